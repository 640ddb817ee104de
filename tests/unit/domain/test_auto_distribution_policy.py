"""Tests for AutoDistributionPolicy."""

import pytest

from fairdispatch.domain.errors import EmptyWorkerRosterError
from fairdispatch.domain.policies.auto_distribution import distribute
from fairdispatch.domain.value_objects.enums import DistributionStatus, UnitStatus

from tests.fakes import make_unit, make_worker


@pytest.fixture
def pair():
    return [make_worker("w1"), make_worker("w2")]


def test_empty_roster_raises():
    with pytest.raises(EmptyWorkerRosterError):
        distribute([make_unit("u1")], [])


def test_empty_roster_raises_even_without_candidates():
    with pytest.raises(EmptyWorkerRosterError):
        distribute([], [])


def test_nothing_to_assign(pair):
    units = [make_unit("u1", worker_id="w1")]
    plan = distribute(units, pair)
    assert plan.status == DistributionStatus.NOTHING_TO_ASSIGN
    assert plan.assignments == []
    assert plan.simulated_loads["w1"].unit_count == 1


def test_assigned_and_inactive_units_are_never_candidates(pair):
    units = [
        make_unit("taken", worker_id="w1"),
        make_unit("off", status=UnitStatus.INACTIVE),
        make_unit("free"),
    ]
    plan = distribute(units, pair)
    assert plan.status == DistributionStatus.PLANNED
    assert [a.unit.id for a in plan.assignments] == ["free"]


def test_costliest_unit_is_placed_first(pair):
    units = [
        make_unit("small"),                                          # 100
        make_unit("big", rooms=4, area=90, distance=10, difficulty=5),  # 180
    ]
    plan = distribute(units, pair)

    assert [a.unit.id for a in plan.assignments] == ["big", "small"]
    assert [a.unit_score for a in plan.assignments] == [180.0, 100.0]
    # big → w1 on the initial tie; small then lands closer to average on w2
    assert [a.worker_id for a in plan.assignments] == ["w1", "w2"]


def test_equal_scores_keep_input_order(pair):
    units = [make_unit(uid) for uid in ("c", "a", "b")]
    plan = distribute(units, pair)
    assert [a.unit.id for a in plan.assignments] == ["c", "a", "b"]


def test_each_unit_is_assigned_at_most_once(pair):
    units = [make_unit(f"u{i}", rooms=i % 4) for i in range(12)]
    plan = distribute(units, pair)
    ids = [a.unit.id for a in plan.assignments]
    assert len(ids) == len(set(ids)) == 12


def test_simulation_tracks_planned_load(pair):
    units = [
        make_unit("small"),
        make_unit("big", rooms=4, area=90, distance=10, difficulty=5),
    ]
    plan = distribute(units, pair)
    assert plan.simulated_loads["w1"].balance_score == 180.0
    assert plan.simulated_loads["w2"].balance_score == 100.0
    assert plan.simulated_loads["w1"].unit_count == 1


def test_simulation_starts_from_committed_assignments(pair):
    # w1 already carries 180, so the free unit goes to w2
    units = [
        make_unit("held", rooms=4, area=90, distance=10, difficulty=5, worker_id="w1"),
        make_unit("free"),
    ]
    plan = distribute(units, pair)
    assert [a.worker_id for a in plan.assignments] == ["w2"]


def test_input_units_are_not_mutated(pair):
    units = [make_unit("u1"), make_unit("u2")]
    distribute(units, pair)
    assert all(u.worker_id is None for u in units)
    assert all(u.status == UnitStatus.AVAILABLE for u in units)


def test_distribution_spreads_load(pair):
    units = [make_unit(f"u{i}") for i in range(6)]
    plan = distribute(units, pair)
    counts = {w: 0 for w in ("w1", "w2")}
    for a in plan.assignments:
        counts[a.worker_id] += 1
    assert counts == {"w1": 3, "w2": 3}


def test_malformed_units_are_excluded_and_counted(pair):
    units = [make_unit("ok"), make_unit("bad", area=-10), make_unit("odd", lat=48.0)]
    plan = distribute(units, pair)
    assert plan.excluded_count == 2
    assert [a.unit.id for a in plan.assignments] == ["ok"]


def test_only_malformed_candidates(pair):
    plan = distribute([make_unit("bad", difficulty=0)], pair)
    assert plan.status == DistributionStatus.NOTHING_TO_ASSIGN
    assert plan.excluded_count == 1
