"""
Log in to a host application with a WordPress/WooCommerce account.

Users keep living in WordPress. The host still needs a row for each user in
its own ``users`` table; a user can log in when WordPress has them, by login
or email, with an active ``shop_subscription`` order. Passwords are checked
against the phpass hash stored by WordPress, and password changes made on
the host are written back to WordPress.

.. code-block:: python

   from wp_login_backend.factory import create_backend
   from wp_login_backend.signals import before_password_updated
   from wp_login_backend.domain import BeforePasswordUpdatedEvent, HostUser

   backend = create_backend('mysql://wp:secret@db/wordpress')
   uid = backend.check_password('Alice@example.com', 'hunter2')
   if uid:
       backend.is_user_enabled(uid)

   before_password_updated.send(
       BeforePasswordUpdatedEvent(user=HostUser(uid=uid), password='new'))
"""

from .domain import UserRecord, Found, NotFound, NOT_FOUND, \
    BeforePasswordUpdatedEvent, HostUser
from .backend import UserBackend
from .exceptions import NoSuchUser
