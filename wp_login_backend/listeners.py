"""Keep WordPress passwords in sync with the host."""

from typing import Any
import logging

from blinker import NamedSignal

from . import passwords
from .domain import BeforePasswordUpdatedEvent
from .primarystore import PrimaryDirectoryStore
from .signals import before_password_updated

logger = logging.getLogger(__name__)


class PasswordSyncHandler():
    """Write the new password hash to WordPress when the host changes it.

    The write is a single autocommitted ``UPDATE``. It is not retried, and
    users already in a resolver cache keep their old hash there until the
    process ends. Handling the same event twice stores a fresh salt for the
    same password, which verifies just as well.
    """

    def __init__(self, primary_store: PrimaryDirectoryStore):
        self.primary_store = primary_store

    def handle(self, event: Any, **kwargs: Any) -> None:
        if not isinstance(event, BeforePasswordUpdatedEvent):
            return
        if not self.primary_store.is_configured:
            return
        hashed = passwords.hash_password(event.get_password())
        uid = event.get_user().get_uid()
        logger.debug('Syncing password of %s to WordPress', uid[:10])
        self.primary_store.set_password_hash(uid, hashed)

    def connect(self, signal: NamedSignal = before_password_updated) -> None:
        signal.connect(self.handle, weak=False)

    def disconnect(self, signal: NamedSignal = before_password_updated) -> None:
        signal.disconnect(self.handle)
