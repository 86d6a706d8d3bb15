"""Configuration for the WordPress login backend."""

import os

WORDPRESS_DSN = os.environ.get('WORDPRESS_DSN', '')
"""
SQLAlchemy database URL of the WordPress/WooCommerce database.

An empty value disables every lookup against WordPress: users can then never
be resolved, authenticated or enabled through this backend.
"""

HOST_DATABASE_URI = os.environ.get('HOST_DATABASE_URI', 'sqlite:///host.db')
"""Database holding the host application's own ``users`` table."""

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
LOG_JSON = os.environ.get('LOG_JSON', '0') == '1'
"""Install the JSON log formatter on the root logger."""
