"""
DRF authentication classes for admin bearer tokens.

``AdminJWTAuthentication`` is the mandatory variant used by admin
endpoints: a request without a bearer token stays anonymous (the
``IsAdmin`` permission then answers ``AUTH_REQUIRED``), while a bad token
fails straight away with ``TOKEN_EXPIRED``, ``INVALID_TOKEN`` or
``ADMIN_NOT_FOUND``.  ``OptionalAdminJWTAuthentication`` is used on public
endpoints and ignores any token problem so a stale browser token never
breaks a public page.
"""
import logging

from rest_framework.authentication import BaseAuthentication, get_authorization_header
from rest_framework.exceptions import AuthenticationFailed

from .exceptions import AdminNotFound, InvalidTokenError, TokenExpiredError
from .models import AdminAccount
from .tokens import TokenExpired, TokenInvalid, verify_token

logger = logging.getLogger(__name__)


class AdminJWTAuthentication(BaseAuthentication):
    keyword = b"bearer"

    def authenticate(self, request):
        parts = get_authorization_header(request).split()
        if not parts or parts[0].lower() != self.keyword:
            return None
        if len(parts) == 1:
            return None
        if len(parts) > 2:
            raise InvalidTokenError("Invalid token header. Token string should not contain spaces.")
        try:
            token = parts[1].decode()
        except UnicodeError:
            raise InvalidTokenError()
        return self.authenticate_credentials(token)

    def authenticate_credentials(self, token):
        try:
            claims = verify_token(token)
        except TokenExpired:
            raise TokenExpiredError()
        except TokenInvalid as exc:
            logger.debug("Rejected admin token: %s", exc)
            raise InvalidTokenError()

        admin = AdminAccount.objects.filter(pk=claims.admin_id, is_active=True).first()
        if admin is None:
            raise AdminNotFound()
        return (admin, claims)

    def authenticate_header(self, request):
        return 'Bearer realm="api"'


class OptionalAdminJWTAuthentication(AdminJWTAuthentication):
    """Attach the admin when the token is good; otherwise stay anonymous."""

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except AuthenticationFailed:
            return None
