"""
Authentication failures raised by the bearer token authenticators.

Only ``rest_framework.exceptions`` is imported here: DRF resolves
``DEFAULT_AUTHENTICATION_CLASSES`` while ``rest_framework.views`` is still
loading, so nothing on that import path may pull in DRF's views.
"""
from rest_framework import exceptions


class TokenExpiredError(exceptions.AuthenticationFailed):
    default_code = "TOKEN_EXPIRED"
    default_detail = "Token has expired. Please log in again."


class InvalidTokenError(exceptions.AuthenticationFailed):
    default_code = "INVALID_TOKEN"
    default_detail = "Invalid token."


class AdminNotFound(exceptions.AuthenticationFailed):
    default_code = "ADMIN_NOT_FOUND"
    default_detail = "Admin not found. Token may be invalid."
