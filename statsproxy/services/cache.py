"""In-memory TTL cache keyed by {category}:{discriminator}."""

from __future__ import annotations

import asyncio
import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")

SWEEP_INTERVAL = 60  # seconds


@dataclass
class CacheEntry(Generic[T]):
    value: T
    expires_at: float


class TTLCache:
    """In-memory cache with per-key TTL and a periodic sweep of dead entries.

    Expiry is enforced lazily by ``get``; the sweep only reclaims memory held
    by entries nobody reads again.  Call ``start()`` from inside a running
    event loop to schedule the sweep and ``destroy()`` at shutdown.
    """

    def __init__(self) -> None:
        self._store: dict[str, CacheEntry[Any]] = {}
        self._lock = threading.Lock()
        self._sweep_task: asyncio.Task | None = None

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if time.monotonic() >= entry.expires_at:
                del self._store[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl: float) -> None:
        entry = CacheEntry(value=value, expires_at=time.monotonic() + ttl)
        with self._lock:
            self._store[key] = entry

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def purge_expired(self) -> int:
        """Drop every entry whose TTL has elapsed. Returns the number removed."""
        now = time.monotonic()
        with self._lock:
            dead = [k for k, e in self._store.items() if now >= e.expires_at]
            for key in dead:
                del self._store[key]
        if dead:
            log.debug("Swept %d expired cache entries", len(dead))
        return len(dead)

    async def _sweep_loop(self) -> None:
        while True:
            await asyncio.sleep(SWEEP_INTERVAL)
            self.purge_expired()

    def start(self) -> None:
        """Schedule the background sweep on the running event loop."""
        if self._sweep_task is not None and not self._sweep_task.done():
            return
        self._sweep_task = asyncio.get_running_loop().create_task(self._sweep_loop())

    @property
    def running(self) -> bool:
        return self._sweep_task is not None and not self._sweep_task.done()

    def destroy(self) -> None:
        """Stop the sweep and drop all entries. Safe to call more than once."""
        if self._sweep_task is not None:
            self._sweep_task.cancel()
            self._sweep_task = None
        self.clear()
