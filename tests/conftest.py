"""Pytest configuration and shared fixtures."""

import pytest

from fairdispatch.domain.value_objects.geo_point import GeoPoint

from tests.fakes import make_unit, make_worker


@pytest.fixture
def paris_points():
    """A few well-known Paris landmarks, roughly 1-5 km apart."""
    return {
        "louvre": GeoPoint(latitude=48.8606, longitude=2.3376),
        "notre_dame": GeoPoint(latitude=48.8530, longitude=2.3499),
        "eiffel": GeoPoint(latitude=48.8584, longitude=2.2945),
        "sacre_coeur": GeoPoint(latitude=48.8867, longitude=2.3431),
    }


@pytest.fixture
def roster():
    return [
        make_worker("w1", sector="Nord"),
        make_worker("w2", sector="Sud"),
        make_worker("w3"),
    ]


@pytest.fixture
def reference_unit():
    """rooms=2, area=50, distance=5, difficulty=3 → score 100."""
    return make_unit("ref", rooms=2, area=50, distance=5, difficulty=3)
