from __future__ import annotations

import pytest

from src.leave_tracker.leave_tracker.core.enums import LeaveType
from src.leave_tracker.leave_tracker.core.exceptions import ValidationError
from src.leave_tracker.leave_tracker.leave.ledger import LeaveLedger
from src.leave_tracker.leave_tracker.leave.model import LeaveRecord
from src.leave_tracker.leave_tracker.metrics.service import MetricsService

TODAY = "2024-03-10"


def _add(registry, name, *records):
    p = registry.add_person(name, "")
    p.ledger = LeaveLedger(records)
    return p


def test_window_without_records_is_all_zero(registry):
    registry.add_person("Alice", "")
    registry.add_person("Bob", "")

    points = MetricsService(registry).rolling_window(30, today=TODAY)

    assert len(points) == 30
    assert points[0].date == "2024-02-10"
    assert points[-1].date == TODAY
    assert all(n == 0 for p in points for n in p.counts.values())
    assert all(set(p.counts) == set(LeaveType) for p in points)


def test_window_counts_open_records_through_today_and_closed_through_end(registry):
    _add(registry, "Open", LeaveRecord(LeaveType.SICK, "2024-03-08"))
    _add(registry, "Closed", LeaveRecord(LeaveType.CHILD_CARE, "2024-03-05", "2024-03-06"))
    _add(registry, "Parental", LeaveRecord(LeaveType.PARENTAL, "2024-03-09", "2024-05-01"))

    points = {p.date: p.counts for p in MetricsService(registry).rolling_window(7, today=TODAY)}

    assert [points[d][LeaveType.SICK] for d in sorted(points)] == [0, 0, 0, 0, 1, 1, 1]
    assert [points[d][LeaveType.CHILD_CARE] for d in sorted(points)] == [0, 1, 1, 0, 0, 0, 0]
    assert points["2024-03-09"][LeaveType.PARENTAL] == 1
    assert points["2024-03-08"][LeaveType.PARENTAL] == 0


def test_window_counts_a_person_once_per_type_and_day(registry):
    _add(
        registry,
        "Twice",
        LeaveRecord(LeaveType.SICK, "2024-03-01", "2024-03-09"),
        LeaveRecord(LeaveType.SICK, "2024-03-09", "2024-03-09"),
    )

    points = MetricsService(registry).rolling_window(1, today="2024-03-09")
    assert points[0].counts[LeaveType.SICK] == 1


def test_window_defaults_to_configured_days_and_rejects_zero(registry):
    service = MetricsService(registry, window_days=14)

    assert len(service.rolling_window(today=TODAY)) == 14
    with pytest.raises(ValidationError):
        service.rolling_window(0, today=TODAY)


def test_leave_counts_by_current_status(registry):
    _add(registry, "A", LeaveRecord(LeaveType.SICK, "2024-03-01"))
    _add(registry, "B", LeaveRecord(LeaveType.SICK, "2024-02-01", "2024-03-10"))
    _add(registry, "C", LeaveRecord(LeaveType.PARENTAL, "2024-01-01", "2024-12-31"))
    _add(registry, "D", LeaveRecord(LeaveType.CHILD_CARE, "2024-01-01", "2024-01-02"))
    _add(registry, "E")

    counts = MetricsService(registry).leave_counts(today=TODAY)

    assert counts.by_type == {LeaveType.SICK: 2, LeaveType.CHILD_CARE: 0, LeaveType.PARENTAL: 1}
    assert counts.total == 3
    assert counts.at_work == 2
    assert counts.as_dict()["child-care"] == 0


def test_total_days_sorted_descending_and_zero_excluded(registry):
    _add(registry, "Short", LeaveRecord(LeaveType.SICK, "2024-01-01", "2024-01-02"))
    _add(
        registry,
        "Long",
        LeaveRecord(LeaveType.SICK, "2024-01-01", "2024-01-05"),
        LeaveRecord(LeaveType.SICK, "2024-03-09"),
    )
    _add(registry, "OtherType", LeaveRecord(LeaveType.CHILD_CARE, "2024-01-01", "2024-01-30"))

    totals = MetricsService(registry).total_days_per_person(LeaveType.SICK, today=TODAY)

    assert [(t.name, t.days) for t in totals] == [("Long", 7), ("Short", 2)]


def test_total_days_surfaces_one_entry_when_all_zero(registry):
    _add(registry, "First")
    _add(registry, "Second")

    totals = MetricsService(registry).total_days_per_person(LeaveType.PARENTAL, today=TODAY)

    assert [(t.name, t.days) for t in totals] == [("First", 0)]


def test_total_days_empty_registry(registry):
    assert MetricsService(registry).total_days_per_person(today=TODAY) == []


def test_summary_bundles_everything(registry):
    _add(registry, "A", LeaveRecord(LeaveType.SICK, "2024-03-01"))

    summary = MetricsService(registry, window_days=3).summary(today=TODAY)

    assert summary["today"] == TODAY
    assert summary["counts"]["sick"] == 1
    assert summary["window"][-1] == {"date": TODAY, "sick": 1, "child-care": 0, "parental": 0}
    assert summary["totals"]["sick"][0]["days"] == 10
