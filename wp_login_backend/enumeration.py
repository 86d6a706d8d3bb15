"""Listing users for administrative screens."""

from typing import Any, Dict, List, Optional

from .primarystore import PrimaryDirectoryStore


def fix_limit(limit: Any) -> Optional[int]:
    """Accept only non-negative integers as a limit."""
    if isinstance(limit, int) and not isinstance(limit, bool) and limit >= 0:
        return limit
    return None


class EnumerationService():
    """Lists user ids and disabled user ids."""

    def __init__(self, primary_store: PrimaryDirectoryStore):
        self.primary_store = primary_store

    def get_display_names(self, search: str = '', limit: Optional[int] = None,
                          offset: Optional[int] = None) -> Dict[str, str]:
        """Map of uid to display name.

        Searching WordPress users by display name is not supported yet, so
        this is always empty.
        """
        return {}

    def list_ids(self, search: str = '', limit: Optional[int] = None,
                 offset: Optional[int] = None) -> List[str]:
        """User ids matching ``search``, sorted case-insensitively."""
        limit = fix_limit(limit)
        users = self.get_display_names(search, limit, offset)
        return sorted((str(uid) for uid in users), key=str.lower)

    def list_disabled(self, limit: Optional[int] = None, offset: int = 0,
                      search: str = '') -> List[str]:
        """Logins without an active subscription, each listed once."""
        return self.primary_store.disabled_logins(search, fix_limit(limit),
                                                  offset)
