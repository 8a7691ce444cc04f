from __future__ import annotations

import logging
import time
import uuid
from typing import Callable, List, Optional

from ..common.validators import clean_text, require_non_empty
from ..core.constants import PERSON_ID_PREFIX
from ..core.enums import LeaveType, StatusFilter
from ..core.exceptions import NotFoundError, PersistenceError
from ..storage.personnel_store import PersonnelStore
from .model import Person

logger = logging.getLogger(__name__)


def generate_person_id() -> str:
    return f"{PERSON_ID_PREFIX}{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"


class PersonnelRegistry:
    """Owns every Person, in insertion order.

    Mutations run validate -> mutate -> save. When a save fails the change is
    kept in memory, the registry is marked dirty and PersistenceError is
    raised; the next successful save clears the flag.
    """

    def __init__(
        self,
        store: Optional[PersonnelStore] = None,
        *,
        id_factory: Callable[[], str] = generate_person_id,
    ):
        self._store = store
        self._id_factory = id_factory
        self._people: List[Person] = []
        self._dirty = False

    # ---- persistence ----

    @property
    def dirty(self) -> bool:
        return self._dirty

    def load(self) -> None:
        if self._store is None:
            return
        try:
            people, migrated = self._store.read()
        except PersistenceError:
            logger.exception("Cannot load personnel data, starting with an empty registry")
            self._people = []
            return

        self._people = people
        logger.info("Loaded %d people", len(people))
        if migrated:
            try:
                self.save()
            except PersistenceError:
                logger.warning("Migrated data kept in memory only until the next successful save")

    def save(self) -> None:
        if self._store is None:
            return
        try:
            self._store.save(self._people)
        except PersistenceError:
            self._dirty = True
            logger.exception("Saving personnel data failed; in-memory state kept")
            raise
        self._dirty = False

    def flush(self) -> bool:
        """Retry a failed save. Returns True when nothing is left unsaved."""
        if self._dirty:
            self.save()
        return not self._dirty

    # ---- CRUD ----

    def _new_id(self) -> str:
        pid = self._id_factory()
        while self.find_by_id(pid) is not None:
            pid = self._id_factory()
        return pid

    def add_person(self, name: str, role: str = "") -> Person:
        name = require_non_empty(name, "Name")
        person = Person(person_id=self._new_id(), name=name, role=clean_text(role))
        self._people.append(person)
        logger.info("Added person %s", person.person_id)
        self.save()
        return person

    def update_person(self, person_id: str, name: str, role: str = "") -> Person:
        person = self.get(person_id)
        name = require_non_empty(name, "Name")
        person.name = name
        person.role = clean_text(role)
        logger.info("Updated person %s", person_id)
        self.save()
        return person

    def delete_person(self, person_id: str) -> None:
        person = self.get(person_id)
        self._people.remove(person)
        logger.info("Deleted person %s (%d leave records)", person_id, len(person.ledger))
        self.save()

    def find_by_id(self, person_id: str) -> Optional[Person]:
        for p in self._people:
            if p.person_id == person_id:
                return p
        return None

    def get(self, person_id: str) -> Person:
        person = self.find_by_id(person_id)
        if person is None:
            raise NotFoundError(f"Person {person_id!r} does not exist")
        return person

    def all(self) -> List[Person]:
        return list(self._people)

    # ---- queries ----

    def distinct_roles(self) -> List[str]:
        return sorted({p.role.strip() for p in self._people if p.role and p.role.strip()})

    def filter(
        self,
        search_text: str = "",
        leave_type_filter: str = StatusFilter.ALL.value,
        role_filter: str = StatusFilter.ALL.value,
        *,
        today: Optional[str] = None,
    ) -> List[Person]:
        needle = clean_text(search_text).lower()
        type_value = clean_text(leave_type_filter) or StatusFilter.ALL.value
        role_value = clean_text(role_filter) or StatusFilter.ALL.value

        wanted_type: Optional[LeaveType] = None
        if type_value not in (StatusFilter.ALL.value, StatusFilter.AT_WORK.value):
            wanted_type = LeaveType.parse(type_value)
        no_roles_defined = not self.distinct_roles()

        def matches_search(p: Person) -> bool:
            return not needle or needle in p.name.lower() or needle in p.role.lower()

        def matches_type(p: Person) -> bool:
            if type_value == StatusFilter.ALL.value:
                return True
            status = p.ledger.current_status(today=today)
            if type_value == StatusFilter.AT_WORK.value:
                return status is None
            return status is not None and status.leave_type == wanted_type

        def matches_role(p: Person) -> bool:
            if role_value == StatusFilter.ALL.value:
                return True
            role = p.role.strip()
            if not role:
                return no_roles_defined
            return role == role_value

        return [p for p in self._people if matches_search(p) and matches_type(p) and matches_role(p)]
