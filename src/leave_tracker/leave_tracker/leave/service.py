from __future__ import annotations

import logging
from typing import Optional, Union

from ..common import date_utils
from ..core.constants import RECENT_HISTORY_LIMIT
from ..core.enums import LeaveType, StatusFilter
from ..personnel.model import Person
from ..personnel.registry import PersonnelRegistry
from .model import LeaveRecord

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: register leave / return for a person, then persist."""

    def __init__(self, registry: PersonnelRegistry):
        self._registry = registry

    def register_leave(
        self,
        person_id: str,
        leave_type: Union[LeaveType, str],
        start_date: str,
        end_date: Optional[str] = None,
        comment: str = "",
        *,
        today: Optional[str] = None,
    ) -> LeaveRecord:
        person = self._registry.get(person_id)
        if not isinstance(leave_type, LeaveType):
            leave_type = LeaveType.parse(leave_type)

        record = person.ledger.register_leave(leave_type, start_date, end_date or None, comment, today=today)
        logger.info("Registered %s leave for %s from %s", leave_type.value, person_id, record.start_date)
        self._registry.save()
        return record

    def register_return(self, person_id: str, return_date: str, *, today: Optional[str] = None) -> LeaveRecord:
        person = self._registry.get(person_id)
        record = person.ledger.register_return(return_date, today=today)
        logger.info("Registered return for %s on %s", person_id, record.end_date)
        self._registry.save()
        return record

    def leave_between(
        self,
        person_id: str,
        start_date: str,
        end_date: Optional[str] = None,
        *,
        today: Optional[str] = None,
    ) -> list[dict]:
        """Records of a person touching [start_date, end_date]; open-ended ranges run to today."""
        today = today or date_utils.today()
        records = self._registry.get(person_id).ledger.overlapping(start_date, end_date, today=today)
        return [self._to_ui(r, today) for r in records]

    def current_status(self, person_id: str, *, today: Optional[str] = None) -> Optional[LeaveRecord]:
        return self._registry.get(person_id).ledger.current_status(today=today)

    def list_cards(
        self,
        *,
        search_text: str = "",
        leave_type_filter: str = StatusFilter.ALL.value,
        role_filter: str = StatusFilter.ALL.value,
        today: Optional[str] = None,
    ) -> list[dict]:
        today = today or date_utils.today()
        people = self._registry.filter(search_text, leave_type_filter, role_filter, today=today)
        return [self.person_card(p, today=today) for p in people]

    def person_card(self, person: Person, *, today: Optional[str] = None) -> dict:
        today = today or date_utils.today()
        current = person.ledger.current_status(today=today)
        closed = person.ledger.closed_records()

        card = {
            "id": person.person_id,
            "name": person.name,
            "role": person.role,
            "status": current.leave_type.value if current else StatusFilter.AT_WORK.value,
            "current": None,
            "history": [self._to_ui(r, today) for r in person.ledger.recent_history(RECENT_HISTORY_LIMIT)],
            "history_total": len(closed),
        }
        if current:
            card["current"] = {
                **self._to_ui(current, today),
                "days_so_far": days_so_far(current, today),
            }
        return card

    @staticmethod
    def _to_ui(r: LeaveRecord, today: str) -> dict:
        return {
            "type": r.leave_type.value,
            "start_date": r.start_date,
            "end_date": r.end_date,
            "start_display": date_utils.format_display(r.start_date),
            "end_display": date_utils.format_display(r.end_date) if r.end_date else "-",
            "days": r.duration_days(today),
            "comment": r.comment,
        }


def days_so_far(record: LeaveRecord, today: str) -> int:
    """Days on leave counted up to today (or the record's end, if earlier)."""
    end = record.effective_end(today)
    return date_utils.days_between_inclusive(record.start_date, min(end, today))
