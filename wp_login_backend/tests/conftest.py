"""Fixtures shared by the backend tests.

Two SQLite files stand in for the host database and the WordPress
database. Rows are loaded once per test; see ``load_wordpress_data``.
"""
import hashlib

import pytest
from sqlalchemy import create_engine, insert
from sqlalchemy.orm import sessionmaker

from wp_login_backend import passwords
from wp_login_backend.backend import UserBackend
from wp_login_backend.cache import UserRecordCache
from wp_login_backend.localstore import LocalDirectoryStore
from wp_login_backend.primarystore import PrimaryDirectoryStore
from wp_login_backend.resolver import UserResolver
from wp_login_backend.tables import host_metadata, users, \
    wordpress_metadata, wp_users, wp_wc_orders

CONNECT_ARGS = {"check_same_thread": False}

PASSWORDS = {
    'alice': 'wonderland',
    'bob': 'builder',
    'bobby': 'tables',
    'carol': 'singing',
    'dave': 'notdavid',
    'frank': 'nothing',
}

HOST_UIDS = ['Alice', 'bob', 'bobby', 'carol', 'dave', 'erin@example.com',
             'frank']


def load_wordpress_data(engine):
    rows = [
        [wp_users, {'ID': 1, 'user_login': 'alice', 'user_email': 'alice@example.com',
                    'display_name': 'Alice Liddell'}, "A subscriber"],
        [wp_wc_orders, {'id': 101, 'customer_id': 1, 'type': 'shop_subscription',
                        'status': 'wc-active'}, "Alice subscription"],
        [wp_wc_orders, {'id': 102, 'customer_id': 1, 'type': 'shop_order',
                        'status': 'wc-completed'}, "Alice parent order"],

        [wp_users, {'ID': 2, 'user_login': 'bob', 'user_email': 'bob@example.com',
                    'display_name': 'Bob'}, "A lapsed subscriber"],
        [wp_wc_orders, {'id': 201, 'customer_id': 2, 'type': 'shop_subscription',
                        'status': 'wc-cancelled'}, "Bob cancelled subscription"],

        [wp_users, {'ID': 3, 'user_login': 'bobby', 'user_email': 'bobby@example.com',
                    'display_name': ''}, "A customer, never subscribed"],
        [wp_wc_orders, {'id': 301, 'customer_id': 3, 'type': 'shop_order',
                        'status': 'wc-active'}, "Bobby one-off order"],

        [wp_users, {'ID': 4, 'user_login': 'carol', 'user_email': 'carol@example.com',
                    'display_name': 'Carol'}, "A subscriber with an old subscription"],
        [wp_wc_orders, {'id': 401, 'customer_id': 4, 'type': 'shop_subscription',
                        'status': 'wc-expired'}, "Carol expired subscription"],
        [wp_wc_orders, {'id': 402, 'customer_id': 4, 'type': 'shop_subscription',
                        'status': 'wc-active'}, "Carol current subscription"],

        [wp_users, {'ID': 5, 'user_login': 'dave', 'user_email': 'robert@bobmail.org',
                    'display_name': 'Dave'}, "A subscriber whose email has bob in it"],
        [wp_wc_orders, {'id': 501, 'customer_id': 5, 'type': 'shop_subscription',
                        'status': 'wc-active'}, "Dave subscription"],

        [wp_users, {'ID': 6, 'user_login': 'erin', 'user_email': 'erin@example.com',
                    'display_name': 'Erin',
                    'user_pass': hashlib.md5(b'oldschool').hexdigest()},
         "A subscriber with a pre-phpass password"],
        [wp_wc_orders, {'id': 601, 'customer_id': 6, 'type': 'shop_subscription',
                        'status': 'wc-active'}, "Erin subscription"],

        [wp_users, {'ID': 7, 'user_login': 'frank', 'user_email': 'frank@example.com',
                    'display_name': 'Frank'}, "A user without orders"],
    ]

    with engine.begin() as conn:
        for table, values, comment in rows:
            if table is wp_users and 'user_pass' not in values:
                values = dict(values, user_pass=passwords.hash_password(
                    PASSWORDS[values['user_login']]))
            try:
                conn.execute(insert(table).values(**values))
            except Exception as ex:
                raise Exception(f"Error while inserting {comment}", ex)


def load_host_data(engine):
    with engine.begin() as conn:
        for uid in HOST_UIDS:
            conn.execute(insert(users).values(uid=uid, uid_lower=uid.lower(),
                                              displayname=None, password=''))


@pytest.fixture
def wordpress_dsn(tmp_path):
    dsn = f"sqlite:///{tmp_path / 'wordpress.db'}"
    engine = create_engine(dsn, connect_args=CONNECT_ARGS)
    wordpress_metadata.create_all(bind=engine)
    load_wordpress_data(engine)
    engine.dispose()
    return dsn


@pytest.fixture
def wordpress_engine(wordpress_dsn):
    """A second handle on the WordPress database, to inspect writes."""
    engine = create_engine(wordpress_dsn, connect_args=CONNECT_ARGS)
    yield engine
    engine.dispose()


@pytest.fixture
def host_db_uri(tmp_path):
    uri = f"sqlite:///{tmp_path / 'host.db'}"
    engine = create_engine(uri, connect_args=CONNECT_ARGS)
    host_metadata.create_all(bind=engine)
    load_host_data(engine)
    engine.dispose()
    return uri


@pytest.fixture
def get_host_db(host_db_uri):
    engine = create_engine(host_db_uri, connect_args=CONNECT_ARGS)
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        db = SessionLocal()
        try:
            yield db
        finally:
            db.close()

    yield override_get_db
    engine.dispose()


@pytest.fixture
def local_store(get_host_db):
    return LocalDirectoryStore(get_host_db)


@pytest.fixture
def primary_store(wordpress_dsn):
    store = PrimaryDirectoryStore(wordpress_dsn)
    yield store
    store.close()


@pytest.fixture
def resolver(local_store, primary_store):
    return UserResolver(local_store, primary_store, UserRecordCache())


@pytest.fixture
def backend(resolver):
    return UserBackend(resolver)


@pytest.fixture
def unconfigured_backend(local_store):
    resolver = UserResolver(local_store, PrimaryDirectoryStore(''),
                            UserRecordCache())
    return UserBackend(resolver)
