from __future__ import annotations

from typing import Optional, Protocol


class KeyValueStore(Protocol):
    """Storage interface the personnel store depends on.

    Implementations raise PersistenceError when the backend fails.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def put(self, key: str, value: str) -> None:
        raise NotImplementedError
