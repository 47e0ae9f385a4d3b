"""
Warehouse Read/Write Lock
=========================
Shared/exclusive lock guarding one warehouse's product storage.

Design rules:
  - SHARED holders run together; EXCLUSIVE excludes everyone else
  - Waiting writers block new readers (writer starvation prevention)
  - EXCLUSIVE is re-entrant for the owning thread
  - Owner of EXCLUSIVE may also take SHARED (nested read inside a write)
  - SHARED -> EXCLUSIVE upgrade is refused (LockUpgradeError)
  - No timeouts: every acquire eventually succeeds

Thread safety: all state guarded by a single threading.Condition.
"""

import threading
from contextlib import contextmanager
from enum import Enum
from typing import Dict, Iterator, Optional


class LockType(Enum):
    SHARED = "SHARED"
    EXCLUSIVE = "EXCLUSIVE"


class LockUpgradeError(RuntimeError):
    """Raised when a SHARED holder asks for EXCLUSIVE on the same lock."""


class ReadWriteLock:
    """
    Readers-writer lock with writer preference.

    Use the context managers rather than acquire/release directly:

        with lock.shared():
            snapshot = tuple(items)
        with lock.exclusive():
            items.append(x)
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers: Dict[int, int] = {}       # thread ident → shared depth
        self._writer: Optional[int] = None       # thread ident holding EXCLUSIVE
        self._writer_depth = 0
        self._waiting_writers = 0

    # ─── Public API ──────────────────────────────────────────────────────

    def acquire(self, lock_type: LockType) -> None:
        if lock_type == LockType.EXCLUSIVE:
            self._acquire_exclusive()
        else:
            self._acquire_shared()

    def release(self, lock_type: LockType) -> None:
        if lock_type == LockType.EXCLUSIVE:
            self._release_exclusive()
        else:
            self._release_shared()

    @contextmanager
    def shared(self) -> Iterator[None]:
        self.acquire(LockType.SHARED)
        try:
            yield
        finally:
            self.release(LockType.SHARED)

    @contextmanager
    def exclusive(self) -> Iterator[None]:
        self.acquire(LockType.EXCLUSIVE)
        try:
            yield
        finally:
            self.release(LockType.EXCLUSIVE)

    # ─── Introspection (tests / diagnostics) ─────────────────────────────

    @property
    def reader_count(self) -> int:
        with self._cond:
            return sum(self._readers.values())

    @property
    def is_write_locked(self) -> bool:
        with self._cond:
            return self._writer is not None

    # ─── Internals ───────────────────────────────────────────────────────

    def _acquire_shared(self) -> None:
        me = threading.get_ident()
        with self._cond:
            # Nested read inside our own write, or re-entrant read: no wait.
            # Re-entrant readers must not queue behind writers or they
            # would deadlock against a writer waiting on them.
            if self._writer == me or me in self._readers:
                self._readers[me] = self._readers.get(me, 0) + 1
                return
            while self._writer is not None or self._waiting_writers:
                self._cond.wait()
            self._readers[me] = 1

    def _release_shared(self) -> None:
        me = threading.get_ident()
        with self._cond:
            depth = self._readers.get(me)
            if not depth:
                raise RuntimeError("release of SHARED lock not held by this thread")
            if depth == 1:
                del self._readers[me]
            else:
                self._readers[me] = depth - 1
            if not self._readers:
                self._cond.notify_all()

    def _acquire_exclusive(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer == me:
                self._writer_depth += 1
                return
            if me in self._readers:
                raise LockUpgradeError(
                    "cannot upgrade SHARED to EXCLUSIVE; release the read lock first"
                )
            self._waiting_writers += 1
            try:
                while self._writer is not None or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            self._writer = me
            self._writer_depth = 1

    def _release_exclusive(self) -> None:
        me = threading.get_ident()
        with self._cond:
            if self._writer != me:
                raise RuntimeError("release of EXCLUSIVE lock not held by this thread")
            self._writer_depth -= 1
            if self._writer_depth == 0:
                self._writer = None
                self._cond.notify_all()
