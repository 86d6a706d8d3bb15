"""Lookups against the host application's own user table."""

from contextlib import contextmanager
from types import GeneratorType
from typing import Callable, Generator, Optional, Union
import logging

from sqlalchemy import select
from sqlalchemy.engine import RowMapping
from sqlalchemy.orm import Session

from .tables import users

log = logging.getLogger(__name__)


class LocalDirectoryStore():
    """The host's ``users`` table.

    db can be either a Session or a function that returns Sessions, such as
    a ``sessionmaker`` or a FastAPI style ``get_db`` generator. A given
    Session is left to its owner; sessions obtained from a function are
    closed after each lookup.
    """

    def __init__(self, db: Union[Session, Callable[[], Session]]):
        self.db = db

    @contextmanager
    def session(self) -> Generator[Session, None, None]:
        if isinstance(self.db, Session):
            yield self.db
            return
        xdb = self.db()
        if isinstance(xdb, GeneratorType):
            try:
                yield next(xdb)
            finally:
                xdb.close()
        else:
            with xdb:
                yield xdb

    def get_user(self, uid: str) -> Optional[RowMapping]:
        """Find the host user whose lowercased uid matches ``uid``.

        Returns a mapping with ``uid``, ``displayname`` and ``password``.
        """
        query = select(users.c.uid, users.c.displayname, users.c.password) \
            .where(users.c.uid_lower == uid.lower())
        with self.session() as session:
            row = session.execute(query).mappings().first()
        if row is None:
            log.debug("no host user for %s", uid[:10])
        return row
