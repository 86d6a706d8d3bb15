"""Exceptions."""


class NoSuchUser(RuntimeError):
    """User does not exist."""
