"""Tests for the read-side use cases: recommendations, balance report, route, history."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from fairdispatch.application.use_cases.balance_report import BalanceReportUseCase
from fairdispatch.application.use_cases.build_route import BuildRouteUseCase
from fairdispatch.application.use_cases.close_assignment_record import (
    CloseAssignmentRecordUseCase,
)
from fairdispatch.application.use_cases.recommend_worker import RecommendationsUseCase
from fairdispatch.domain.entities.assignment_record import AssignmentRecord
from fairdispatch.domain.value_objects.enums import UnitStatus
from fairdispatch.domain.value_objects.geo_point import GeoPoint

from tests.fakes import FakeHistoryRepo, FakeUnitRepo, FakeWorkerRepo, make_unit

T0 = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)
T1 = datetime(2024, 3, 2, 9, 0, tzinfo=timezone.utc)


# ─── Recommendations ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_suggestions_cover_assignable_units_only(roster):
    units = [
        make_unit("free", sector="Sud"),
        make_unit("taken", worker_id="w1"),
        make_unit("off", status=UnitStatus.INACTIVE),
        make_unit("bad", rooms=-1),
    ]
    uc = RecommendationsUseCase(FakeUnitRepo(units), FakeWorkerRepo(roster))

    suggestions = await uc.execute()

    assert [s.unit_id for s in suggestions] == ["free"]
    assert suggestions[0].worker_id == "w2"
    assert suggestions[0].unit_score == 100.0


@pytest.mark.asyncio
async def test_suggestions_share_one_snapshot(roster):
    units = [make_unit("a", sector="Est"), make_unit("b", sector="Est")]
    uc = RecommendationsUseCase(FakeUnitRepo(units), FakeWorkerRepo(roster))

    suggestions = await uc.execute()

    assert [s.worker_id for s in suggestions] == ["w1", "w1"]


@pytest.mark.asyncio
async def test_suggestion_without_workers_is_none():
    uc = RecommendationsUseCase(FakeUnitRepo([make_unit("u1")]), FakeWorkerRepo([]))
    [suggestion] = await uc.execute()
    assert suggestion.worker_id is None


@pytest.mark.asyncio
async def test_single_unit_suggestion(roster):
    units = [make_unit("u1", sector="Est"), make_unit("held", worker_id="w1")]
    uc = RecommendationsUseCase(FakeUnitRepo(units), FakeWorkerRepo(roster))

    suggestion = await uc.for_unit("u1")

    assert suggestion.unit_id == "u1"
    assert suggestion.worker_id == "w2"
    assert await uc.for_unit("missing") is None


# ─── Balance report ─────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_balance_report(roster):
    units = [
        make_unit("u1", worker_id="w1"),
        make_unit("u2", worker_id="w2"),
        make_unit("u3", worker_id="w2"),
        make_unit("bad", worker_id="w3", difficulty=0),
    ]
    uc = BalanceReportUseCase(FakeUnitRepo(units), FakeWorkerRepo(roster))

    report = await uc.execute()

    assert [wl.worker.id for wl in report.loads] == ["w1", "w2", "w3"]
    assert [wl.summary.balance_score for wl in report.loads] == [100.0, 200.0, 0.0]
    assert report.max_balance_score == 200.0
    assert report.excluded_count == 1
    assert 0.0 <= report.global_balance <= 100.0


@pytest.mark.asyncio
async def test_balance_report_without_workers():
    uc = BalanceReportUseCase(FakeUnitRepo([make_unit("u1")]), FakeWorkerRepo([]))
    report = await uc.execute()
    assert report.global_balance == 0.0
    assert report.loads == []
    assert report.max_balance_score == 0.0


# ─── Route ───────────────────────────────────────────────────────────


@pytest.fixture
def route_units(paris_points):
    louvre, eiffel = paris_points["louvre"], paris_points["eiffel"]
    return [
        make_unit("a", worker_id="w1", lat=eiffel.latitude, lon=eiffel.longitude),
        make_unit("b", worker_id="w1", lat=louvre.latitude, lon=louvre.longitude),
        make_unit("c", worker_id="w1"),
        make_unit("x", worker_id="w2", lat=louvre.latitude, lon=louvre.longitude),
    ]


@pytest.mark.asyncio
async def test_route_for_unknown_worker(roster, route_units):
    uc = BuildRouteUseCase(FakeUnitRepo(route_units), FakeWorkerRepo(roster))
    assert await uc.execute("ghost") is None


@pytest.mark.asyncio
async def test_route_covers_only_the_workers_units(roster, route_units):
    uc = BuildRouteUseCase(FakeUnitRepo(route_units), FakeWorkerRepo(roster))

    route = await uc.execute("w1")

    assert route.unit_ids == ["a", "b"]
    assert route.excluded_count == 1
    assert route.base_point is None


@pytest.mark.asyncio
async def test_route_uses_default_base_unless_overridden(roster, route_units, paris_points):
    depot = paris_points["sacre_coeur"]
    uc = BuildRouteUseCase(
        FakeUnitRepo(route_units), FakeWorkerRepo(roster), default_base_point=depot
    )

    route = await uc.execute("w1")
    assert route.base_point == depot
    assert route.unit_ids == ["b", "a"]

    override = GeoPoint(latitude=48.8584, longitude=2.2900)
    route = await uc.execute("w1", base_point=override)
    assert route.base_point == override
    assert route.unit_ids == ["a", "b"]


# ─── History ─────────────────────────────────────────────────────────


def _open_record(unit_id="u1", worker_id="w1"):
    return AssignmentRecord(id="h1", unit_id=unit_id, worker_id=worker_id, started_at=T0)


@pytest.mark.asyncio
async def test_close_record_releases_unit():
    units = FakeUnitRepo([make_unit("u1", worker_id="w1")])
    uc = CloseAssignmentRecordUseCase(FakeHistoryRepo([_open_record()]), units)

    closed = await uc.execute("h1", at=T1)

    assert closed.ended_at == T1
    assert not closed.is_open()
    assert units.stored("u1").worker_id is None
    assert units.stored("u1").status == UnitStatus.AVAILABLE
    assert units.stored("u1").updated_at == T1


@pytest.mark.asyncio
async def test_close_record_leaves_reassigned_unit_alone():
    # The unit has since moved to w2 without the w1 record being closed
    units = FakeUnitRepo([make_unit("u1", worker_id="w2")])
    uc = CloseAssignmentRecordUseCase(FakeHistoryRepo([_open_record()]), units)

    await uc.execute("h1", at=T1)

    assert units.stored("u1").worker_id == "w2"
    assert units.commits == []


@pytest.mark.asyncio
async def test_closing_twice_keeps_first_end_time():
    units = FakeUnitRepo([make_unit("u1", worker_id="w1")])
    uc = CloseAssignmentRecordUseCase(FakeHistoryRepo([_open_record()]), units)

    await uc.execute("h1", at=T0)
    again = await uc.execute("h1", at=T1)

    assert again.ended_at == T0
    assert len(units.commits) == 1


@pytest.mark.asyncio
async def test_closing_a_closed_record_does_not_release_the_unit():
    record = _open_record()
    record.close(T0)
    units = FakeUnitRepo([make_unit("u1", worker_id="w1")])
    uc = CloseAssignmentRecordUseCase(FakeHistoryRepo([record]), units)

    await uc.execute("h1", at=T1)

    assert units.stored("u1").worker_id == "w1"


@pytest.mark.asyncio
async def test_close_unknown_record():
    uc = CloseAssignmentRecordUseCase(FakeHistoryRepo(), FakeUnitRepo())
    assert await uc.execute("missing") is None
