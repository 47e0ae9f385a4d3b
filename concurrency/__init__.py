"""
Warehouse Concurrency Package
=============================
Shared/exclusive locking for per-warehouse product storage.
"""

from concurrency.rw_lock import LockType, LockUpgradeError, ReadWriteLock

__all__ = ["LockType", "LockUpgradeError", "ReadWriteLock"]
