"""Single-slot, time-bounded memo of the last served payload."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Tuple

from .models import Payload

LOGGER = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FreshnessCache:
    """Hold one payload and serve it while younger than ``ttl``.

    Stale entries are ignored rather than evicted; the next ``put`` overwrites
    them.
    """

    def __init__(self, ttl: timedelta, clock: Clock = utcnow) -> None:
        self.ttl = ttl
        self.clock = clock
        self._entry: Optional[Tuple[datetime, Payload]] = None
        self._lock = threading.Lock()

    @property
    def captured_at(self) -> Optional[datetime]:
        with self._lock:
            return self._entry[0] if self._entry else None

    def get(self) -> Optional[Payload]:
        with self._lock:
            if self._entry is None:
                return None
            captured_at, payload = self._entry
            age = self.clock() - captured_at
            if timedelta(0) <= age < self.ttl:
                return payload
            LOGGER.debug("Cached payload from %s is stale", captured_at.isoformat())
            return None

    def put(self, payload: Payload) -> None:
        with self._lock:
            self._entry = (self.clock(), payload)


__all__ = ["Clock", "FreshnessCache", "utcnow"]
