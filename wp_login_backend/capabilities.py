"""What a user backend can do for the host, one interface per concern."""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union


class ResolutionBackend(ABC):
    """Identify users."""

    @abstractmethod
    def get_backend_name(self) -> str:
        """Name shown to administrators."""

    @abstractmethod
    def user_exists(self, uid: str) -> bool:
        ...

    @abstractmethod
    def get_display_name(self, uid: str) -> str:
        ...

    @abstractmethod
    def get_real_uid(self, uid: str) -> str:
        """Canonical uid of an existing user.

        Callers must have checked the user exists; an unknown uid raises
        :class:`.NoSuchUser`.
        """


class CredentialBackend(ABC):
    """Check passwords."""

    @abstractmethod
    def check_password(self, login_name: str, password: str) -> Union[str, bool]:
        """Canonical uid if the password is correct, otherwise False."""


class EnablementBackend(ABC):
    """Report, and possibly change, whether users may log in."""

    @abstractmethod
    def is_user_enabled(self, uid: str, query_database_value=None) -> bool:
        ...

    @abstractmethod
    def set_user_enabled(self, uid: str, enabled: bool,
                         query_database_value=None,
                         set_database_value=None) -> bool:
        """True if the change was made."""

    @abstractmethod
    def get_disabled_user_list(self, limit: Optional[int] = None,
                               offset: int = 0, search: str = '') -> List[str]:
        ...


class EnumerationBackend(ABC):
    """List and manage the set of users."""

    @abstractmethod
    def get_users(self, search: str = '', limit: Optional[int] = None,
                  offset: Optional[int] = None) -> List[str]:
        ...

    @abstractmethod
    def get_display_names(self, search: str = '', limit: Optional[int] = None,
                          offset: Optional[int] = None) -> Dict[str, str]:
        ...

    @abstractmethod
    def has_user_listings(self) -> bool:
        ...

    @abstractmethod
    def delete_user(self, uid: str) -> bool:
        """True if the user was deleted."""
