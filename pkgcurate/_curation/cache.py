"""Thread-safe in-memory cache with expiry for provider lookups."""

import threading
import time
from typing import Callable, Dict, Generic, Optional, Tuple, TypeVar

V = TypeVar("V")

MISSING = object()


class ExpiringCache(Generic[V]):
    """
    Cache whose entries expire after a number of hours.

    An expiration of 0 hours disables caching entirely.
    """

    def __init__(self, expiration_hours: float, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = expiration_hours * 3600
        self._clock = clock
        self._entries: Dict[str, Tuple[float, Optional[V]]] = {}
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self._ttl > 0

    def get(self, key: str, default=MISSING):
        """Return the cached value, or `default` when absent or expired."""
        if not self.enabled:
            return default
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return default
            stored_at, value = entry
            if self._clock() - stored_at >= self._ttl:
                del self._entries[key]
                return default
            return value

    def put(self, key: str, value: Optional[V]) -> None:
        if not self.enabled:
            return
        with self._lock:
            self._entries[key] = (self._clock(), value)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not MISSING

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
