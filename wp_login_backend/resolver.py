"""Resolve host identifiers to WordPress accounts."""

from typing import Optional
import logging

from .cache import UserRecordCache
from .domain import Found, GUEST, NOT_FOUND, UserRecord
from .localstore import LocalDirectoryStore
from .primarystore import PrimaryDirectoryStore

log = logging.getLogger(__name__)


class UserResolver():
    """Look up a user in the host table, then in WordPress.

    A user resolves only if the host knows the identifier (compared
    case-insensitively) and WordPress has an active subscription for the
    matching login or email. Every outcome is cached under the identifier as
    given, so each distinct string hits the databases at most once.
    """

    def __init__(self, local_store: LocalDirectoryStore,
                 primary_store: PrimaryDirectoryStore,
                 cache: Optional[UserRecordCache] = None):
        self.local_store = local_store
        self.primary_store = primary_store
        self.cache = cache if cache is not None else UserRecordCache()

    def resolve(self, uid: str) -> Optional[UserRecord]:
        """Get the record for ``uid``, or None if it does not resolve."""
        uid = str(uid)
        # Guests have no uid. They pass as an empty user.
        if uid == '':
            self.cache.setdefault(uid, NOT_FOUND)
            return GUEST

        entry = self.cache.get(uid)
        if entry is not None:
            log.debug("cache hit for %s", uid[:10])
            return entry.record if isinstance(entry, Found) else None

        record = self._load(uid)
        self.cache.put(uid, Found(record=record) if record is not None else NOT_FOUND)
        return record

    def _load(self, uid: str) -> Optional[UserRecord]:
        if self.local_store.get_user(uid) is None:
            return None
        if not self.primary_store.is_configured:
            log.debug("WordPress database not configured")
            return None
        row = self.primary_store.find_subscriber(uid)
        if row is None:
            return None
        return UserRecord(
            canonical_id=str(row["uid"]),
            display_name=str(row["displayname"] or ''),
            password_hash=str(row["password"] or ''),
            enabled=bool(row["enabled"]),
        )
