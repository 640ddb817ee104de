"""Tests for GeoPoint value object."""

import math

import pytest

from fairdispatch.domain.value_objects.geo_point import GeoPoint


def test_haversine_same_point():
    """Distance from a point to itself should be 0."""
    p = GeoPoint(latitude=48.8566, longitude=2.3522)
    assert p.haversine_km(p) == 0.0


def test_haversine_one_degree_of_longitude_at_equator():
    """(0,0) → (0,1) is ~111.19 km on a 6371 km sphere."""
    d = GeoPoint(0.0, 0.0).haversine_km(GeoPoint(0.0, 1.0))
    assert d == pytest.approx(111.19, abs=0.5)


def test_haversine_is_symmetric(paris_points):
    a, b = paris_points["louvre"], paris_points["eiffel"]
    assert a.haversine_km(b) == pytest.approx(b.haversine_km(a))


def test_haversine_paris_to_lyon():
    """Paris to Lyon is roughly 390 km as the crow flies."""
    paris = GeoPoint(latitude=48.8566, longitude=2.3522)
    lyon = GeoPoint(latitude=45.7640, longitude=4.8357)
    assert 380 < paris.haversine_km(lyon) < 400


def test_geo_point_is_frozen():
    p = GeoPoint(latitude=43.0, longitude=5.0)
    with pytest.raises(AttributeError):
        p.latitude = 50.0


def test_from_pair_needs_both_coordinates():
    assert GeoPoint.from_pair(48.85, None) is None
    assert GeoPoint.from_pair(None, 2.35) is None
    assert GeoPoint.from_pair(48.85, 2.35) == GeoPoint(latitude=48.85, longitude=2.35)


def test_antipodal_points_are_half_the_circumference():
    north = GeoPoint(latitude=90.0, longitude=0.0)
    south = GeoPoint(latitude=-90.0, longitude=0.0)
    assert north.haversine_km(south) == pytest.approx(math.pi * 6371.0)
