"""Tables read and written by the backend.

``users`` lives in the host application's database. ``wp_users`` and
``wp_wc_orders`` live in the WordPress database; only the columns the
backend touches, plus the ones needed to insert realistic rows, are
declared here. WooCommerce's high-performance order storage defines more.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    Numeric,
    String,
    Table,
    text,
)

host_metadata = MetaData()

users = Table(
    "users",
    host_metadata,
    Column("uid", String(64), primary_key=True, server_default=text("''")),
    Column("displayname", String(64)),
    Column("password", String(255), nullable=False, server_default=text("''")),
    Column("uid_lower", String(64), index=True, server_default=text("''")),
)

wordpress_metadata = MetaData()

wp_users = Table(
    "wp_users",
    wordpress_metadata,
    Column("ID", BigInteger().with_variant(Integer(), "sqlite"), primary_key=True),
    Column("user_login", String(60), nullable=False, server_default=text("''")),
    Column("user_pass", String(255), nullable=False, server_default=text("''")),
    Column("user_nicename", String(50), nullable=False, server_default=text("''")),
    Column("user_email", String(100), nullable=False, server_default=text("''")),
    Column("user_url", String(100), nullable=False, server_default=text("''")),
    Column("user_registered", DateTime()),
    Column("user_activation_key", String(255), nullable=False, server_default=text("''")),
    Column("user_status", Integer(), nullable=False, server_default=text("'0'")),
    Column("display_name", String(250), nullable=False, server_default=text("''")),
    Index("user_login_key", "user_login"),
    Index("user_email", "user_email"),
)

wp_wc_orders = Table(
    "wp_wc_orders",
    wordpress_metadata,
    Column("id", BigInteger().with_variant(Integer(), "sqlite"), primary_key=True),
    Column("status", String(20)),
    Column("currency", String(10)),
    Column("type", String(20)),
    Column("total_amount", Numeric(26, 8)),
    Column("customer_id", BigInteger(), index=True),
    Column("billing_email", String(320)),
    Column("date_created_gmt", DateTime()),
    Column("parent_order_id", BigInteger()),
    Index("type_status_date", "type", "status", "date_created_gmt"),
)
