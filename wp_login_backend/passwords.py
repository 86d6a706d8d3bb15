"""Passwords compatible with WordPress.

WordPress before 6.8 stores the portable phpass hash (``$P$`` + cost + salt
+ digest) in ``wp_users.user_pass``. Accounts that predate phpass may still
carry a bare MD5 hex digest, which WordPress accepts and upgrades on login;
we accept those too. WordPress 6.8 and later write ``$wp`` + a bcrypt hash of
the base64 HMAC-SHA384 of the password (keyed ``wp-sha384``); those verify
here as well.

New hashes are always phpass with WordPress' cost of 2^13 rounds
(``$P$B``). Every WordPress release verifies them.
"""

from base64 import b64encode
import hashlib
import hmac
import logging

import bcrypt
from passlib.context import CryptContext

logger = logging.getLogger(__name__)

WP_BCRYPT_PREFIX = '$wp'

pwd_context = CryptContext(
    schemes=["phpass", "hex_md5"],
    default="phpass",
    deprecated=["hex_md5"],
    phpass__default_rounds=13,
)


def hash_password(password: str) -> str:
    """Generate a phpass hash of a password."""
    return pwd_context.hash(password)


def _wp_prehash(password: str) -> bytes:
    digest = hmac.new(b'wp-sha384', password.encode('utf-8'),
                      hashlib.sha384).digest()
    return b64encode(digest)


def _check_wp_bcrypt(password: str, encrypted: str) -> bool:
    hashed = encrypted[len(WP_BCRYPT_PREFIX):]
    # PHP's $2y$ is the same algorithm as $2b$.
    if hashed.startswith('$2y$'):
        hashed = '$2b$' + hashed[4:]
    try:
        return bcrypt.checkpw(_wp_prehash(password), hashed.encode('ascii'))
    except ValueError as e:
        logger.debug('Unusable bcrypt hash: %s', e)
        return False


def check_password(password: str, encrypted: str) -> bool:
    """Check a password against a stored WordPress hash.

    Hashes that cannot be identified never match.
    """
    if not encrypted:
        return False
    if encrypted.startswith(WP_BCRYPT_PREFIX + '$'):
        return _check_wp_bcrypt(password, encrypted)
    try:
        return pwd_context.verify(password, encrypted)
    except ValueError as e:
        logger.debug('Unusable password hash: %s', e)
        return False
