import time
from typing import Any


class TTLCache:
    """In-process key/value store. A ttl of 0 or None never expires entries."""

    def __init__(self, ttl: int | None = None):
        self._store: dict[str, tuple[Any, float]] = {}
        self._ttl = ttl or None

    def get(self, key: str) -> Any | None:
        if key in self._store:
            value, ts = self._store[key]
            if self._ttl is None or time.time() - ts < self._ttl:
                return value
            del self._store[key]
        return None

    def set(self, key: str, value: Any) -> None:
        self._store[key] = (value, time.time())

    def clear(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return len(self._store)
