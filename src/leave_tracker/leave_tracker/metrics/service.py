from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common import date_utils
from ..core.constants import DEFAULT_WINDOW_DAYS
from ..core.enums import LeaveType
from ..core.exceptions import ValidationError
from ..leave.ledger import is_active
from ..personnel.registry import PersonnelRegistry


def _zero_counts() -> dict[LeaveType, int]:
    return {t: 0 for t in LeaveType}


@dataclass(frozen=True)
class LeaveCounts:
    by_type: dict[LeaveType, int]
    total: int
    at_work: int

    def as_dict(self) -> dict:
        out = {t.value: n for t, n in self.by_type.items()}
        out["total"] = self.total
        out["at_work"] = self.at_work
        return out


@dataclass(frozen=True)
class WindowPoint:
    date: str
    counts: dict[LeaveType, int]

    def as_dict(self) -> dict:
        return {"date": self.date, **{t.value: n for t, n in self.counts.items()}}


@dataclass(frozen=True)
class PersonTotal:
    person_id: str
    name: str
    role: str
    days: int

    def as_dict(self) -> dict:
        return {"id": self.person_id, "name": self.name, "role": self.role, "days": self.days}


class MetricsService:
    """Read-only figures derived from the registry on every call (no caching)."""

    def __init__(self, registry: PersonnelRegistry, *, window_days: int = DEFAULT_WINDOW_DAYS):
        self._registry = registry
        self._window_days = int(window_days)

    def leave_counts(self, *, today: Optional[str] = None) -> LeaveCounts:
        today = today or date_utils.today()
        counts = _zero_counts()
        at_work = 0
        for person in self._registry.all():
            status = person.ledger.current_status(today=today)
            if status is None:
                at_work += 1
            else:
                counts[status.leave_type] += 1
        return LeaveCounts(by_type=counts, total=sum(counts.values()), at_work=at_work)

    def rolling_window(self, days: Optional[int] = None, *, today: Optional[str] = None) -> list[WindowPoint]:
        """Per-day occupancy for the last `days` dates up to today, oldest first."""
        days = self._window_days if days is None else int(days)
        if days < 1:
            raise ValidationError("Window must cover at least one day")
        today = today or date_utils.today()
        people = self._registry.all()

        points: list[WindowPoint] = []
        for day in date_utils.iter_days(today, days):
            counts = _zero_counts()
            for person in people:
                # A person counts once per type and day, however many records match.
                on_leave = {r.leave_type for r in person.ledger if is_active(r, day, today=today)}
                for leave_type in on_leave:
                    counts[leave_type] += 1
            points.append(WindowPoint(date=day, counts=counts))
        return points

    def total_days_per_person(
        self,
        leave_type: LeaveType = LeaveType.SICK,
        *,
        today: Optional[str] = None,
    ) -> list[PersonTotal]:
        today = today or date_utils.today()
        people = self._registry.all()

        totals = [
            PersonTotal(
                person_id=p.person_id,
                name=p.name,
                role=p.role,
                days=sum(r.duration_days(today) for r in p.ledger if r.leave_type == leave_type),
            )
            for p in people
        ]
        # sorted() is stable: equal totals keep registry order.
        totals.sort(key=lambda t: t.days, reverse=True)

        non_zero = [t for t in totals if t.days > 0]
        if not non_zero and totals:
            return totals[:1]
        return non_zero

    def summary(self, *, today: Optional[str] = None) -> dict:
        today = today or date_utils.today()
        return {
            "today": today,
            "counts": self.leave_counts(today=today).as_dict(),
            "window": [p.as_dict() for p in self.rolling_window(today=today)],
            "totals": {
                t.value: [x.as_dict() for x in self.total_days_per_person(t, today=today)] for t in LeaveType
            },
        }
