# accounts/validators.py
import re

from django.core.exceptions import ValidationError

_LOWER = re.compile(r"[a-z]")
_UPPER = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"\d")


class MixedCharacterClassValidator:
    """Require at least one lowercase letter, one uppercase letter and one digit."""

    message = "Password must contain at least one uppercase letter, one lowercase letter, and one number."

    def validate(self, password, user=None):
        if not (_LOWER.search(password) and _UPPER.search(password) and _DIGIT.search(password)):
            raise ValidationError(self.message, code="password_character_classes")

    def get_help_text(self):
        return self.message
