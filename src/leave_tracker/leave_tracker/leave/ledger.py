from __future__ import annotations

from dataclasses import replace
from typing import Iterable, List, Optional

from ..common import date_utils
from ..common.validators import clean_text
from ..core.constants import RECENT_HISTORY_LIMIT
from ..core.enums import LeaveType
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import LeaveRecord
from .policies import LeavePolicyFactory


def is_active(record: LeaveRecord, as_of: str, *, today: Optional[str] = None) -> bool:
    """Whether `record` covers `as_of`.

    An open record is active from its start up to the present only, never for
    dates after today.
    """
    if record.start_date > as_of:
        return False
    if record.end_date is None:
        return as_of <= (today or date_utils.today())
    return as_of <= record.end_date


class LeaveLedger:
    """One person's leave records, kept in entry order.

    Enforces that at most one record is active today. Persisting the result
    of a mutation is left to the caller.
    """

    def __init__(self, records: Iterable[LeaveRecord] = (), *, policies: Optional[LeavePolicyFactory] = None):
        self._records: List[LeaveRecord] = list(records)
        self._policies = policies or LeavePolicyFactory()

    def __iter__(self):
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    @property
    def records(self) -> List[LeaveRecord]:
        return list(self._records)

    def current_status(self, *, today: Optional[str] = None) -> Optional[LeaveRecord]:
        today = today or date_utils.today()
        for r in self._records:
            if is_active(r, today, today=today):
                return r
        return None

    def register_leave(
        self,
        leave_type: LeaveType,
        start_date: str,
        end_date: Optional[str] = None,
        comment: str = "",
        *,
        today: Optional[str] = None,
    ) -> LeaveRecord:
        today = today or date_utils.today()
        if self.current_status(today=today) is not None:
            raise ConflictError("An active leave period already exists. Close it before registering a new one.")

        start = date_utils.normalize_iso(start_date)
        end = date_utils.normalize_iso(end_date) if end_date else None
        self._policies.for_type(leave_type).check_new(start_date=start, end_date=end)

        record = LeaveRecord(leave_type=leave_type, start_date=start, end_date=end, comment=clean_text(comment))
        self._records.append(record)
        return record

    def register_return(self, return_date: str, *, today: Optional[str] = None) -> LeaveRecord:
        today = today or date_utils.today()
        active = self.current_status(today=today)
        if active is None:
            raise NotFoundError("No active leave period found")

        end = date_utils.normalize_iso(return_date)
        if end < active.start_date:
            raise ValidationError("Return date cannot be earlier than the leave start date")

        closed = replace(active, end_date=end)
        self._records[self._records.index(active)] = closed
        return closed

    def overlapping(self, start_date: str, end_date: Optional[str] = None, *, today: Optional[str] = None) -> List[LeaveRecord]:
        today = today or date_utils.today()
        start = date_utils.normalize_iso(start_date)
        end = date_utils.normalize_iso(end_date) if end_date else today
        return [r for r in self._records if r.start_date <= end and start <= r.effective_end(today)]

    def closed_records(self) -> List[LeaveRecord]:
        return [r for r in self._records if not r.is_open]

    def recent_history(self, limit: int = RECENT_HISTORY_LIMIT) -> List[LeaveRecord]:
        closed = self.closed_records()
        if limit <= 0:
            return []
        return list(reversed(closed[-limit:]))
