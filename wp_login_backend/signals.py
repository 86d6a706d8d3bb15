"""Signals the host sends to the backend."""

from blinker import Namespace

_signals = Namespace()

before_password_updated = _signals.signal('before-password-updated')
"""Sent with a :class:`.BeforePasswordUpdatedEvent` as sender."""
