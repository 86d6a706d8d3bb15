"""Queries against the WordPress/WooCommerce database.

WordPress owns this database. We read users and their subscription orders,
and write exactly one thing back: ``wp_users.user_pass`` when the host
changes a password.
"""

from threading import RLock
from typing import Any, List, Optional
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine, RowMapping

log = logging.getLogger(__name__)

# Logins and emails compare case-insensitively on every backend, as they do
# under MySQL's default collation.
SUBSCRIBER_QUERY = """
SELECT u.user_pass AS password,
       u.user_login AS uid,
       u.display_name AS displayname,
       CASE WHEN o.status = 'wc-active' AND o.type = 'shop_subscription' THEN 1
            ELSE 0
            END AS enabled
  FROM wp_wc_orders o
  JOIN wp_users u ON o.customer_id = u.ID
 WHERE o.status IN ('wc-active')
   AND o.type = 'shop_subscription'
   AND (lower(u.user_login) = lower(:username)
        OR lower(u.user_email) = lower(:username))
 ORDER BY u.ID, o.id"""

# Precedence is as written: the trailing OR matches on email alone, whatever
# the subscription state.
DISABLED_QUERY = """
SELECT u.user_login AS uid
  FROM wp_wc_orders o
  JOIN wp_users u ON o.customer_id = u.ID
 WHERE (o.status NOT IN ('wc-active') OR o.type <> 'shop_subscription')
   AND (u.user_login LIKE :search) OR (u.user_email LIKE :search)
GROUP BY u.user_login"""

UPDATE_PASSWORD = """
UPDATE wp_users SET user_pass = :hash
 WHERE lower(user_login) = lower(:username)"""


class PrimaryDirectoryStore():
    """The WordPress database, reached through a single lazy connection.

    The engine and its connection are created on first use and kept until
    :meth:`close`. The connection runs in autocommit mode: nothing written
    here is wrapped in a transaction. Statements are serialized on a lock
    since the one connection is shared by every caller.
    """

    def __init__(self, dsn: Optional[str], **engine_kwargs: Any):
        self.dsn = dsn or ''
        self.engine_kwargs = engine_kwargs
        self._engine: Optional[Engine] = None
        self._conn: Optional[Connection] = None
        self._lock = RLock()

    @property
    def is_configured(self) -> bool:
        return bool(self.dsn)

    def connection(self) -> Optional[Connection]:
        """Get the connection, or None when no DSN is configured."""
        if not self.dsn:
            return None
        with self._lock:
            if self._conn is None:
                kwargs = dict(self.engine_kwargs)
                if self.dsn.startswith('sqlite'):
                    kwargs.setdefault('connect_args', {"check_same_thread": False})
                self._engine = create_engine(self.dsn,
                                             isolation_level='AUTOCOMMIT',
                                             **kwargs)
                self._conn = self._engine.connect()
                log.debug("connected to WordPress database")
            return self._conn

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
            if self._engine is not None:
                self._engine.dispose()
                self._engine = None

    def find_subscriber(self, username_or_email: str) -> Optional[RowMapping]:
        """Get the user with an active subscription by login or email.

        Logins and emails are unique in WordPress, so at most one user
        matches; with several active subscriptions the oldest order wins.
        Returns None when nothing matches or the store is not configured.
        """
        conn = self.connection()
        if conn is None:
            return None
        with self._lock:
            rs = conn.execute(text(SUBSCRIBER_QUERY),
                              {"username": username_or_email})
            row = rs.mappings().first()
        if row is None:
            log.debug("no subscriber found for %s", username_or_email[:10])
        return row

    def disabled_logins(self, search: str = '', limit: Optional[int] = None,
                        offset: Optional[int] = 0) -> List[str]:
        """Logins of users whose orders are not active subscriptions.

        ``search`` is matched as a substring of login or email. Pagination
        applies only for a positive ``limit``.
        """
        conn = self.connection()
        if conn is None:
            return []
        query = DISABLED_QUERY
        params = {"search": f"%{search}%"}
        if limit is not None and limit > 0:
            query += "\nLIMIT :offset,:limit"
            params["limit"] = limit
            params["offset"] = offset or 0
        with self._lock:
            return [str(uid) for uid in conn.execute(text(query), params).scalars()]

    def set_password_hash(self, username: str, hashed: str) -> Optional[int]:
        """Overwrite the stored hash of ``username``.

        Returns the number of updated rows, or None when the store is not
        configured.
        """
        conn = self.connection()
        if conn is None:
            return None
        with self._lock:
            rs = conn.execute(text(UPDATE_PASSWORD),
                              {"hash": hashed, "username": username})
        log.debug("updated password of %s in %d row(s)", username[:10], rs.rowcount)
        return rs.rowcount
