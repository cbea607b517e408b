"""
Error types and the central DRF exception handler.

Every failure leaving the API is rendered as::

    {"success": false, "error": {"code": ..., "message": ..., "details": ...}}

Views raise either DRF's built-in exceptions (mapped to a code below) or
one of the :class:`APIError` subclasses, which carry their own code.
Database ``IntegrityError`` and serializer ``unique`` failures are both
normalised into ``DUPLICATE_ENTRY`` so storage-specific error shapes never
reach the client.
"""
import logging
import re

from django.conf import settings
from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import IntegrityError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response

logger = logging.getLogger(__name__)


class APIError(exceptions.APIException):
    """An API exception whose wire code is given by ``default_code``."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "BAD_REQUEST"
    default_detail = "Bad request."

    def __init__(self, detail=None, code=None, details=None):
        super().__init__(detail, code)
        self.details = details


class MissingCredentials(APIError):
    default_code = "MISSING_CREDENTIALS"
    default_detail = "Email and password are required."


class InvalidCredentials(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_code = "INVALID_CREDENTIALS"
    default_detail = "Invalid email or password."


class InvalidPassword(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_code = "INVALID_PASSWORD"
    default_detail = "Current password is incorrect."


class AdminExists(APIError):
    status_code = status.HTTP_409_CONFLICT
    default_code = "ADMIN_EXISTS"
    default_detail = "An admin with this email already exists."


class DuplicateEntry(APIError):
    status_code = status.HTTP_409_CONFLICT
    default_code = "DUPLICATE_ENTRY"
    default_detail = "A record with this value already exists."

    @classmethod
    def for_field(cls, field, value=None):
        details = {field: value} if value is not None else None
        return cls(f"A record with this {field} already exists.", details=details)


class ConfigurationError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code = "CONFIGURATION_ERROR"
    default_detail = "Server configuration error."


class RateLimitExceeded(exceptions.Throttled):
    """429 with a scope-specific code and message."""
    default_code = "RATE_LIMIT_EXCEEDED"
    default_detail = "Too many requests from this IP, please try again later."

    def __init__(self, wait=None, detail=None, code=None):
        super().__init__(wait=wait, detail=detail or self.default_detail, code=code)
        # Throttled appends "Expected available in N seconds." to the detail
        self.detail = exceptions.ErrorDetail(detail or self.default_detail, code or self.default_code)


# Checked in order; the first matching class wins.  Exceptions with an
# upper-case code (token errors, RateLimitExceeded) never reach this table.
DRF_CODES = (
    (exceptions.ValidationError, "VALIDATION_ERROR"),
    (exceptions.ParseError, "INVALID_JSON"),
    (exceptions.NotAuthenticated, "AUTH_REQUIRED"),
    (exceptions.AuthenticationFailed, "INVALID_TOKEN"),
    (exceptions.PermissionDenied, "FORBIDDEN"),
    (exceptions.NotFound, "NOT_FOUND"),
    (exceptions.MethodNotAllowed, "METHOD_NOT_ALLOWED"),
    (exceptions.NotAcceptable, "NOT_ACCEPTABLE"),
    (exceptions.UnsupportedMediaType, "UNSUPPORTED_MEDIA_TYPE"),
    (exceptions.Throttled, "RATE_LIMIT_EXCEEDED"),
)

DEFAULT_MESSAGES = {
    "AUTH_REQUIRED": "Access denied. No token provided.",
    "FORBIDDEN": "Access denied. Insufficient permissions.",
    "NOT_FOUND": "Resource not found.",
}

# sqlite: "UNIQUE constraint failed: table.column"
# postgres: "Key (column)=(value) already exists."
_SQLITE_UNIQUE_RE = re.compile(r"UNIQUE constraint failed: [\w]+\.(\w+)")
_POSTGRES_UNIQUE_RE = re.compile(r"Key \((\w+)\)=\((.*?)\) already exists")


def error_body(code, message, details=None):
    error = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"success": False, "error": error}


def flatten_validation_errors(detail, prefix=""):
    """Aggregate a DRF error structure into ``["field: message", ...]``."""
    messages = []
    if isinstance(detail, dict):
        for field, value in detail.items():
            if field == "non_field_errors":
                messages.extend(flatten_validation_errors(value, prefix))
                continue
            name = f"{prefix}.{field}" if prefix else str(field)
            messages.extend(flatten_validation_errors(value, name))
    elif isinstance(detail, (list, tuple)):
        for index, value in enumerate(detail):
            if isinstance(value, (dict, list)):
                messages.extend(flatten_validation_errors(value, f"{prefix}[{index}]"))
            else:
                messages.extend(flatten_validation_errors(value, prefix))
    else:
        messages.append(f"{prefix}: {detail}" if prefix else str(detail))
    return messages


def _unique_violation(exc):
    """Return the first field whose validation failed with code ``unique``."""
    codes = exc.get_codes()
    if not isinstance(codes, dict):
        return None
    for field, field_codes in codes.items():
        if isinstance(field_codes, list) and "unique" in field_codes:
            return field
    return None


def duplicate_entry_from_integrity_error(exc):
    text = str(exc)
    match = _POSTGRES_UNIQUE_RE.search(text)
    if match:
        return DuplicateEntry.for_field(match.group(1), match.group(2))
    match = _SQLITE_UNIQUE_RE.search(text)
    if match:
        return DuplicateEntry.for_field(match.group(1))
    return DuplicateEntry()


def _code_for(exc):
    # Our own exceptions use upper-case codes; DRF's built-ins use snake case
    code = getattr(exc.detail, "code", None) or exc.default_code
    if code.isupper():
        return code
    for klass, code in DRF_CODES:
        if isinstance(exc, klass):
            return code
    return "ERROR"


def api_exception_handler(exc, context):
    """DRF ``EXCEPTION_HANDLER`` producing the failure envelope."""
    # rest_framework.views resolves the authentication classes on import,
    # and those import this module
    from rest_framework.views import exception_handler as drf_exception_handler

    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, DjangoPermissionDenied):
        exc = exceptions.PermissionDenied()
    elif isinstance(exc, IntegrityError):
        logger.warning("Integrity error normalised to 409: %s", exc)
        exc = duplicate_entry_from_integrity_error(exc)
    elif isinstance(exc, exceptions.ValidationError):
        field = _unique_violation(exc)
        if field:
            value = None
            request = context.get("request")
            if request is not None and hasattr(request, "data"):
                value = request.data.get(field) if hasattr(request.data, "get") else None
            exc = DuplicateEntry.for_field(field, value)

    response = drf_exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.exception("Unhandled error in %s", view.__class__.__name__ if view else "view", exc_info=exc)
        message = str(exc) if settings.DEBUG else "An unexpected error occurred"
        return Response(error_body("INTERNAL_ERROR", message), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    code = _code_for(exc)
    if isinstance(exc, exceptions.ValidationError):
        response.data = error_body(code, "Validation failed", flatten_validation_errors(exc.detail))
        return response

    message = str(exc.detail) if isinstance(exc.detail, str) else str(exc.default_detail)
    if code in DEFAULT_MESSAGES and message == str(type(exc).default_detail):
        message = DEFAULT_MESSAGES[code]
    if response.status_code >= 500:
        logger.error("%s: %s", code, message)
    response.data = error_body(code, str(message), getattr(exc, "details", None))
    return response
