"""Per-process cache of resolved users."""

from threading import RLock
from typing import Dict, Optional

from .domain import CacheEntry


class UserRecordCache():
    """Memoizes resolution results, including users that were not found.

    Keys are the identifiers exactly as the caller supplied them, so
    ``"Alice"`` and ``"alice"`` are cached separately. Nothing is ever
    evicted: the number of distinct identifiers a process sees is small,
    and an entry stays valid until the process ends.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, CacheEntry] = {}
        self._lock = RLock()

    def get(self, uid: str) -> Optional[CacheEntry]:
        """Get the entry for ``uid``, or None if it was never looked up."""
        with self._lock:
            return self._entries.get(uid)

    def put(self, uid: str, entry: CacheEntry) -> None:
        with self._lock:
            self._entries[uid] = entry

    def setdefault(self, uid: str, entry: CacheEntry) -> CacheEntry:
        """Store ``entry`` unless ``uid`` already has one; return the stored entry."""
        with self._lock:
            return self._entries.setdefault(uid, entry)

    def __contains__(self, uid: str) -> bool:
        with self._lock:
            return uid in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
