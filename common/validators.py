# common/validators.py
from __future__ import annotations

from django.conf import settings
from email_validator import validate_email as ev_validate_email, EmailNotValidError
from rest_framework import serializers


def normalize_email(value: str) -> str:
    """
    Validate & normalize an email using the 'email-validator' library.

    - Handles syntax and IDN/unicode domains
    - Optionally checks DNS deliverability (``STRICT_EMAIL_DNS``)
    - Returns the address case-folded, the form stored everywhere
    """
    v = (value or "").strip()
    check_deliverability = bool(getattr(settings, "STRICT_EMAIL_DNS", False))
    try:
        info = ev_validate_email(v, check_deliverability=check_deliverability)
    except EmailNotValidError:
        raise serializers.ValidationError("Please provide a valid email address.")
    return info.normalized.lower()


class NormalizedEmailField(serializers.CharField):
    """Email field that validates with email-validator and stores lowercase."""

    def __init__(self, **kwargs):
        kwargs.setdefault("max_length", 254)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        return normalize_email(super().to_internal_value(data))
