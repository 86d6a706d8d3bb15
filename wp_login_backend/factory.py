"""Build a ready to use backend from configuration."""

from typing import Callable, Optional, Union
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from . import config
from .app_logging import setup_logger
from .backend import UserBackend
from .cache import UserRecordCache
from .listeners import PasswordSyncHandler
from .localstore import LocalDirectoryStore
from .primarystore import PrimaryDirectoryStore
from .resolver import UserResolver

logger = logging.getLogger(__name__)


def get_host_db() -> Callable[[], Session]:
    """Session factory for the host database in ``HOST_DATABASE_URI``."""
    uri = config.HOST_DATABASE_URI
    args = {"check_same_thread": False} if 'sqlite' in uri else {}
    engine = create_engine(uri, connect_args=args)
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_backend(dsn: Optional[str] = None,
                   local_db: Union[Session, Callable[[], Session], None] = None,
                   ) -> UserBackend:
    """Wire up a :class:`.UserBackend` and subscribe its password sync.

    The password sync handler is kept on the backend as ``password_sync``;
    call its ``disconnect`` to unsubscribe.
    """
    if config.LOG_JSON:
        setup_logger(config.LOG_LEVEL)
    if dsn is None:
        dsn = config.WORDPRESS_DSN
    if local_db is None:
        local_db = get_host_db()
    if not dsn:
        logger.info('WORDPRESS_DSN is not set, WordPress login is disabled')

    primary_store = PrimaryDirectoryStore(dsn)
    resolver = UserResolver(LocalDirectoryStore(local_db), primary_store,
                            UserRecordCache())
    backend = UserBackend(resolver)

    handler = PasswordSyncHandler(primary_store)
    handler.connect()
    backend.password_sync = handler
    return backend
