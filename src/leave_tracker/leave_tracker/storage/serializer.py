from __future__ import annotations

import logging
from typing import Any, Tuple

from ..common import date_utils
from ..core.enums import LEGACY_LEAVE_TYPE_ALIASES, LeaveType
from ..core.exceptions import PersistenceError, ValidationError
from ..leave.ledger import LeaveLedger
from ..leave.model import LeaveRecord
from ..personnel.model import Person

logger = logging.getLogger(__name__)

LEGACY_HISTORY_KEY = "sicknessRecords"


def record_to_dict(r: LeaveRecord) -> dict:
    return {
        "type": r.leave_type.value,
        "startDate": r.start_date,
        "endDate": r.end_date,
        "comment": r.comment,
    }


def person_to_dict(p: Person) -> dict:
    return {
        "id": p.person_id,
        "name": p.name,
        "role": p.role,
        "leaveHistory": [record_to_dict(r) for r in p.ledger],
    }


def record_from_dict(row: dict) -> LeaveRecord:
    start = date_utils.normalize_iso(row["startDate"])
    end = date_utils.normalize_iso(row["endDate"]) if row.get("endDate") else None
    if end is not None and end < start:
        raise ValidationError(f"End date {end} is before start date {start}")
    return LeaveRecord(
        leave_type=LeaveType(row["type"]),
        start_date=start,
        end_date=end,
        comment=str(row.get("comment") or "").strip(),
    )


def person_from_dict(row: dict) -> Person:
    try:
        return Person(
            person_id=str(row["id"]),
            name=str(row["name"]).strip(),
            role=str(row.get("role") or "").strip(),
            ledger=LeaveLedger(record_from_dict(r) for r in row.get("leaveHistory") or []),
        )
    except (KeyError, TypeError, ValueError, ValidationError) as e:
        raise PersistenceError(f"Malformed person entry {row.get('id')!r}: {e}") from e


def migrate(payload: Any) -> Tuple[list, bool]:
    """Bring stored data up to the current shape.

    Returns the migrated list and whether anything changed. Records written
    before leave types existed are sick leave.
    """
    if not isinstance(payload, list):
        raise PersistenceError("Stored personnel data is not a list")

    changed = False
    for person in payload:
        if not isinstance(person, dict):
            raise PersistenceError("Stored personnel entry is not an object")

        if "leaveHistory" not in person and LEGACY_HISTORY_KEY in person:
            person["leaveHistory"] = person.pop(LEGACY_HISTORY_KEY)
            changed = True

        history = person.get("leaveHistory") or []
        if not isinstance(history, list):
            raise PersistenceError(f"Leave history of {person.get('id')!r} is not a list")

        for record in history:
            if not isinstance(record, dict):
                raise PersistenceError(f"Leave record of {person.get('id')!r} is not an object")
            leave_type = record.get("type")
            if not leave_type:
                record["type"] = LeaveType.SICK.value
                changed = True
            elif isinstance(leave_type, str) and leave_type in LEGACY_LEAVE_TYPE_ALIASES:
                record["type"] = LEGACY_LEAVE_TYPE_ALIASES[leave_type]
                changed = True

    if changed:
        logger.warning("Migrated stored personnel data to the current format (%d people)", len(payload))
    return payload, changed
