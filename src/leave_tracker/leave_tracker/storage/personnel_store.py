from __future__ import annotations

import json
import logging
from typing import Iterable, List, Tuple

from ..core.constants import STORAGE_KEY
from ..core.exceptions import PersistenceError
from ..personnel.model import Person
from .repository import KeyValueStore
from .serializer import migrate, person_from_dict, person_to_dict

logger = logging.getLogger(__name__)


class PersonnelStore:
    """Persists the whole personnel list as one JSON document under one key."""

    def __init__(self, kv: KeyValueStore, *, key: str = STORAGE_KEY):
        self._kv = kv
        self._key = key

    def read(self) -> Tuple[List[Person], bool]:
        """Decode and migrate stored data without writing it back.

        Returns the people and whether a migration was applied.
        """
        raw = self._kv.get(self._key)
        if not raw:
            return [], False

        try:
            payload = json.loads(raw)
        except ValueError as e:
            raise PersistenceError(f"Stored personnel data is not valid JSON: {e}") from e

        payload, changed = migrate(payload)
        return [person_from_dict(row) for row in payload], changed

    def load(self) -> List[Person]:
        people, changed = self.read()
        if changed:
            self.save(people)
        return people

    def save(self, people: Iterable[Person]) -> None:
        data = [person_to_dict(p) for p in people]
        self._kv.put(self._key, json.dumps(data, ensure_ascii=False))
        logger.debug("Saved %d people under %r", len(data), self._key)
