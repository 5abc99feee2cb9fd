# server/core/state.py

from threading import Lock
from collections import defaultdict
from pathlib import Path


_locks_guard = Lock()
_store_locks = defaultdict(Lock)


def with_store_lock(path: Path) -> Lock:
    """
    Returns the lock guarding read-modify-write cycles on one data file.
    The same resolved path always yields the same lock.
    """
    key = str(Path(path).resolve())
    with _locks_guard:
        return _store_locks[key]
