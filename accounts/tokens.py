"""
Bearer token service for admin sessions.

Tokens are HS256 JWTs signed with ``settings.JWT_SECRET`` and carry the
admin id (``sub``), the admin email, ``iat`` and ``exp``.  They are not
stored anywhere: a token stays valid until it expires, and logging in
again is the only way to get a new one.
"""
from dataclasses import dataclass
from datetime import datetime

import jwt
from django.conf import settings
from django.utils import timezone

from common.exceptions import ConfigurationError


class TokenError(Exception):
    """Base class for token verification failures."""


class TokenExpired(TokenError):
    pass


class TokenInvalid(TokenError):
    pass


@dataclass(frozen=True)
class TokenClaims:
    admin_id: int
    email: str


def token_lifetime_seconds() -> int:
    return int(settings.JWT_EXPIRES_IN.total_seconds())


def _signing_secret() -> str:
    secret = getattr(settings, "JWT_SECRET", "")
    if not secret:
        raise ConfigurationError("JWT secret is not configured.")
    return secret


def issue_token(admin, now: datetime | None = None) -> str:
    """Sign a token for ``admin`` that expires ``JWT_EXPIRES_IN`` after ``now``."""
    issued_at = now or timezone.now()
    payload = {
        "sub": str(admin.pk),
        "email": admin.email,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + settings.JWT_EXPIRES_IN).timestamp()),
    }
    return jwt.encode(payload, _signing_secret(), algorithm=settings.JWT_ALGORITHM)


def verify_token(token: str) -> TokenClaims:
    """Return the claims of a valid token; raise TokenExpired/TokenInvalid otherwise."""
    secret = _signing_secret()
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as exc:
        raise TokenExpired("Token has expired.") from exc
    except jwt.InvalidTokenError as exc:
        raise TokenInvalid(str(exc)) from exc

    try:
        admin_id = int(payload["sub"])
    except (TypeError, ValueError) as exc:
        raise TokenInvalid("Token subject is not an admin id.") from exc
    return TokenClaims(admin_id=admin_id, email=payload.get("email", ""))
