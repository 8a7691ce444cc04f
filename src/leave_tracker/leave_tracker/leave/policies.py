from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ..core.enums import LeaveType
from ..core.exceptions import ValidationError


class LeavePolicy(ABC):
    """Strategy Pattern: rules a leave type imposes on a new record."""

    @abstractmethod
    def check_new(self, *, start_date: str, end_date: Optional[str]) -> None:
        raise NotImplementedError

    @staticmethod
    def _check_order(start_date: str, end_date: Optional[str]) -> None:
        if end_date is not None and end_date < start_date:
            raise ValidationError("End date cannot be earlier than start date")


class OpenEndedPolicy(LeavePolicy):
    """Sick and child-care leave: may start open, closed later by a return."""

    def check_new(self, *, start_date: str, end_date: Optional[str]) -> None:
        self._check_order(start_date, end_date)


class BoundedPolicy(LeavePolicy):
    """Parental leave: always registered as a bounded period."""

    def check_new(self, *, start_date: str, end_date: Optional[str]) -> None:
        if end_date is None:
            raise ValidationError("Parental leave requires an end date")
        self._check_order(start_date, end_date)


@dataclass
class LeavePolicyFactory:
    """Factory Pattern: one policy per leave type, every type mapped."""

    def for_type(self, leave_type: LeaveType) -> LeavePolicy:
        if leave_type in (LeaveType.SICK, LeaveType.CHILD_CARE):
            return OpenEndedPolicy()
        if leave_type == LeaveType.PARENTAL:
            return BoundedPolicy()
        raise ValidationError(f"No policy for leave type {leave_type!r}")
