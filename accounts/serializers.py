"""
Serializers for the accounts app.

Input serializers validate login, registration and password-change
bodies; output serializers never include the password hash.
"""
from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from common.validators import NormalizedEmailField
from .models import AdminAccount, Role


def _validate_password(value, user=None):
    try:
        password_validation.validate_password(value, user=user)
    except DjangoValidationError as exc:
        raise serializers.ValidationError(list(exc.messages))
    return value


class AdminSerializer(serializers.ModelSerializer):
    class Meta:
        model = AdminAccount
        fields = ["id", "email", "name", "role"]
        read_only_fields = fields


class AdminProfileSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    lastLoginAt = serializers.DateTimeField(source="last_login", read_only=True)

    class Meta:
        model = AdminAccount
        fields = ["id", "email", "name", "role", "createdAt", "lastLoginAt"]
        read_only_fields = fields


class LoginSerializer(serializers.Serializer):
    email = NormalizedEmailField()
    password = serializers.CharField(trim_whitespace=False)


class RegisterSerializer(serializers.Serializer):
    email = NormalizedEmailField()
    password = serializers.CharField(trim_whitespace=False, write_only=True)
    name = serializers.CharField(min_length=2, max_length=100)
    role = serializers.ChoiceField(choices=Role.choices, required=False, default=Role.ADMIN)

    def validate_password(self, value):
        return _validate_password(value)


class ChangePasswordSerializer(serializers.Serializer):
    currentPassword = serializers.CharField(trim_whitespace=False)
    newPassword = serializers.CharField(trim_whitespace=False)

    def validate_newPassword(self, value):
        return _validate_password(value, user=self.context.get("admin"))
