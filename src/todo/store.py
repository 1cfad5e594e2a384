"""In-memory user store keyed by identity."""

from __future__ import annotations

import logging
import threading
import time
from contextlib import contextmanager
from typing import Any, Callable, ContextManager, Dict, Iterator, Optional

from .models import UserRecord

logger = logging.getLogger(__name__)

LockFactory = Callable[[], ContextManager[Any]]


class TodoIdGenerator:
    """Millisecond timestamps that never repeat within the process."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self._clock = clock
        self._last = 0
        self._lock = threading.Lock()

    def next_id(self) -> str:
        with self._lock:
            now_ms = int(self._clock() * 1000)
            self._last = max(now_ms, self._last + 1)
            return str(self._last)


class UserStore:
    """
    Identity -> UserRecord mapping that lives as long as the process.

    Records are created lazily and never evicted. Each record gets its own lock
    from ``lock_factory`` so that read-modify-write sequences on one identity are
    serialized; pass ``contextlib.nullcontext`` when every caller runs on a single
    event loop.
    """

    def __init__(
        self,
        lock_factory: LockFactory = threading.Lock,
        id_generator: Optional[TodoIdGenerator] = None,
    ):
        self._records: Dict[str, UserRecord] = {}
        self._lock_factory = lock_factory
        self._guard = threading.Lock()
        self.ids = id_generator or TodoIdGenerator()

    def get_or_create(self, identity: str) -> UserRecord:
        record = self._records.get(identity)
        if record is not None:
            return record
        with self._guard:
            record = self._records.get(identity)
            if record is None:
                record = UserRecord(identity=identity, lock=self._lock_factory())
                self._records[identity] = record
                logger.debug("Created user record for %s", identity)
        return record

    @contextmanager
    def session(self, identity: str) -> Iterator[UserRecord]:
        """Yield the identity's record while holding its lock."""
        record = self.get_or_create(identity)
        with record.lock:
            yield record

    def __contains__(self, identity: object) -> bool:
        return identity in self._records

    def __len__(self) -> int:
        return len(self._records)
