from __future__ import annotations

from dataclasses import dataclass, field

from ..leave.ledger import LeaveLedger


@dataclass
class Person:
    """Domain entity: a member of staff and their leave ledger.

    Note: `name` and `role` are stored trimmed; an empty role means no role.
    """

    person_id: str
    name: str
    role: str = ""
    ledger: LeaveLedger = field(default_factory=LeaveLedger)

    @property
    def leave_history(self):
        return self.ledger.records
