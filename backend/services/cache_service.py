import time
from typing import Any, Callable

from config import settings


class TTLCache:
    """In-process cache; entries expire ``ttl`` seconds after they were stored."""

    def __init__(self, ttl: int | None = None, clock: Callable[[], float] = time.monotonic):
        self._entries: dict[str, tuple[Any, float]] = {}
        self._ttl = ttl or settings.cache_ttl_seconds
        self._clock = clock

    def get(self, key: str) -> Any | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        value, stored_at = entry
        if self._clock() - stored_at >= self._ttl:
            del self._entries[key]
            return None
        return value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = (value, self._clock())

    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        value = self.get(key)
        if value is None:
            value = loader()
            self.set(key, value)
        return value

    def clear(self) -> None:
        self._entries.clear()


cache = TTLCache()
