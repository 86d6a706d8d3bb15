"""User backend that lets WordPress subscribers log in to the host."""

from typing import Dict, List, Optional, Union
import logging

from . import passwords
from .capabilities import CredentialBackend, EnablementBackend, \
    EnumerationBackend, ResolutionBackend
from .enablement import EnablementPolicy
from .enumeration import EnumerationService
from .exceptions import NoSuchUser
from .resolver import UserResolver

logger = logging.getLogger(__name__)

BACKEND_NAME = 'WordpressLogin'


class UserBackend(ResolutionBackend, CredentialBackend, EnablementBackend,
                  EnumerationBackend):
    """Adapter exposing the resolver and its policies to the host.

    Unknown users are reported with falsy results. Only :meth:`get_real_uid`
    raises, since its callers must already know the user exists. Users can
    be neither deleted nor enabled/disabled from here; WordPress owns them.
    """

    password_sync = None
    """:class:`.PasswordSyncHandler` subscribed by :func:`.create_backend`."""

    def __init__(self, resolver: UserResolver,
                 enablement: Optional[EnablementPolicy] = None,
                 enumeration: Optional[EnumerationService] = None):
        self.resolver = resolver
        self.enablement = enablement or EnablementPolicy(resolver)
        self.enumeration = enumeration \
            or EnumerationService(resolver.primary_store)

    def get_backend_name(self) -> str:
        return BACKEND_NAME

    def user_exists(self, uid: str) -> bool:
        return self.resolver.resolve(uid) is not None

    def get_display_name(self, uid: str) -> str:
        uid = str(uid)
        record = self.resolver.resolve(uid)
        if record is None or not record.display_name:
            return uid
        return record.display_name

    def get_real_uid(self, uid: str) -> str:
        record = self.resolver.resolve(uid)
        if record is None:
            raise NoSuchUser(f'{uid} does not exist')
        return record.canonical_id

    def check_password(self, login_name: str, password: str) -> Union[str, bool]:
        """
        Authenticate with a login name or email and a password.

        Parameters
        ----------
        login_name : str
            Host uid; matched against the WordPress login or email.
        password : str

        Returns
        -------
        str
            The WordPress login of the user. Use this, and not
            ``login_name``, to refer to the user afterwards.
        bool
            False if the user is unknown or the password is wrong.

        """
        record = self.resolver.resolve(login_name)
        if record is None:
            logger.debug('No such user: %s', login_name[:10])
            return False
        if passwords.check_password(password, record.password_hash):
            return record.canonical_id
        logger.debug('Wrong password for %s', login_name[:10])
        return False

    def is_user_enabled(self, uid: str, query_database_value=None) -> bool:
        return self.enablement.is_enabled(uid)

    def set_user_enabled(self, uid: str, enabled: bool,
                         query_database_value=None,
                         set_database_value=None) -> bool:
        return self.enablement.set_enabled(uid, enabled)

    def get_disabled_user_list(self, limit: Optional[int] = None,
                               offset: int = 0, search: str = '') -> List[str]:
        return self.enumeration.list_disabled(limit, offset, search)

    def get_users(self, search: str = '', limit: Optional[int] = None,
                  offset: Optional[int] = None) -> List[str]:
        return self.enumeration.list_ids(search, limit, offset)

    def get_display_names(self, search: str = '', limit: Optional[int] = None,
                          offset: Optional[int] = None) -> Dict[str, str]:
        return self.enumeration.get_display_names(search, limit, offset)

    def has_user_listings(self) -> bool:
        return True

    def delete_user(self, uid: str) -> bool:
        return False
