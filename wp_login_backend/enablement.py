"""Whether a user may log in, as decided by their WooCommerce subscription."""

import logging

from .resolver import UserResolver

log = logging.getLogger(__name__)


class EnablementPolicy():
    """A user is enabled iff they have an active ``shop_subscription``.

    Only WordPress can change that, so enabling or disabling from the host
    is refused.
    """

    def __init__(self, resolver: UserResolver):
        self.resolver = resolver

    def is_enabled(self, uid: str) -> bool:
        record = self.resolver.resolve(uid)
        if record is None:
            return False
        return record.enabled

    def set_enabled(self, uid: str, enabled: bool) -> bool:
        log.debug("refusing to set enabled=%s for %s", enabled, uid[:10])
        return False
