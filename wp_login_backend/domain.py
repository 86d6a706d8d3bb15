"""Domain classes for users resolved against WordPress."""

from typing import Union

from pydantic import BaseModel, ConfigDict


class UserRecord(BaseModel):
    """A WordPress account as seen by the host application."""

    model_config = ConfigDict(frozen=True)

    canonical_id: str
    """``wp_users.user_login``, with the casing stored in WordPress"""

    display_name: str
    """``wp_users.display_name``"""

    password_hash: str
    """``wp_users.user_pass``, a phpass hash"""

    enabled: bool
    """True if the user has an active WooCommerce subscription"""


GUEST = UserRecord(canonical_id='', display_name='', password_hash='',
                   enabled=False)
"""Record handed out for the empty identifier (guests)."""


class Found(BaseModel):
    """Cache entry for an identifier that resolved to a user."""

    model_config = ConfigDict(frozen=True)

    record: UserRecord


class NotFound(BaseModel):
    """Cache entry for an identifier known not to resolve."""

    model_config = ConfigDict(frozen=True)


NOT_FOUND = NotFound()

CacheEntry = Union[Found, NotFound]


class HostUser(BaseModel):
    """The host-side user attached to a password change."""

    uid: str

    def get_uid(self) -> str:
        return self.uid


class BeforePasswordUpdatedEvent(BaseModel):
    """Sent by the host just before it stores a new password for a user."""

    user: HostUser
    password: str

    def get_user(self) -> HostUser:
        return self.user

    def get_password(self) -> str:
        return self.password
