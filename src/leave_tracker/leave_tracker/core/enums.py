from __future__ import annotations

from enum import Enum

from .exceptions import ValidationError


class LeaveType(str, Enum):
    """Kind of absence. Serialized by value."""

    SICK = "sick"
    CHILD_CARE = "child-care"
    PARENTAL = "parental"

    @classmethod
    def parse(cls, value: str) -> "LeaveType":
        v = (value or "").strip().lower()
        v = LEGACY_LEAVE_TYPE_ALIASES.get(v, v)
        try:
            return cls(v)
        except ValueError:
            raise ValidationError(f"Unknown leave type: {value!r}")


# Older data used the Swedish short form for child-care leave.
LEGACY_LEAVE_TYPE_ALIASES = {
    "vab": LeaveType.CHILD_CARE.value,
}


class StatusFilter(str, Enum):
    """Special values accepted by the personnel list filters."""

    ALL = "all"
    AT_WORK = "at-work"
