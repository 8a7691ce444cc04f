from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.date_utils import days_between_inclusive
from ..core.enums import LeaveType


@dataclass(frozen=True)
class LeaveRecord:
    """Domain entity: one absence interval.

    Dates are canonical YYYY-MM-DD strings. `end_date` is None while the
    period is open; when present it is inclusive (last day of leave).
    """

    leave_type: LeaveType
    start_date: str
    end_date: Optional[str] = None
    comment: str = ""

    @property
    def is_open(self) -> bool:
        return self.end_date is None

    def effective_end(self, today: str) -> str:
        return self.end_date if self.end_date is not None else today

    def duration_days(self, today: str) -> int:
        return days_between_inclusive(self.start_date, self.effective_end(today))
