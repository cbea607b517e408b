"""
Views for the accounts app.

Provides admin login (bearer token issuance), registration of further
admins by an authenticated admin, the current admin's profile and
password change.
"""
import logging

from django.contrib.auth import authenticate
from django.db import transaction
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import PermissionDenied
from rest_framework.permissions import AllowAny
from rest_framework.views import APIView

from common.exceptions import AdminExists, InvalidCredentials, InvalidPassword, MissingCredentials
from common.responses import success_response
from common.throttling import GeneralRateThrottle, LoginRateThrottle
from .models import AdminAccount, Role
from .permissions import IsAdmin, require_roles, role_allowed
from .serializers import (
    AdminProfileSerializer,
    AdminSerializer,
    ChangePasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
)
from .tokens import issue_token, token_lifetime_seconds

logger = logging.getLogger(__name__)


class LoginView(APIView):
    """
    Exchange email + password for a bearer token.

    Only failed attempts count against the login rate limit.
    """
    authentication_classes = []
    permission_classes = [AllowAny]
    throttle_classes = [GeneralRateThrottle, LoginRateThrottle]

    def post(self, request):
        data = request.data
        if not isinstance(data, dict) or not data.get("email") or not data.get("password"):
            raise MissingCredentials()
        serializer = LoginSerializer(data=data)
        serializer.is_valid(raise_exception=True)

        admin = authenticate(
            request,
            email=serializer.validated_data["email"],
            password=serializer.validated_data["password"],
        )
        if admin is None:
            LoginRateThrottle.record_failure(request, self)
            logger.info("Failed admin login for %s", serializer.validated_data["email"])
            raise InvalidCredentials()

        admin.last_login = timezone.now()
        admin.save(update_fields=["last_login"])
        return success_response(
            {
                "token": issue_token(admin),
                "expiresIn": token_lifetime_seconds(),
                "admin": AdminSerializer(admin).data,
            },
            message="Login successful",
        )


class RegisterView(APIView):
    """Create another admin account. Only a superadmin may create a superadmin."""
    permission_classes = [require_roles(Role.ADMIN, Role.SUPERADMIN)]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if data["role"] == Role.SUPERADMIN and not role_allowed(request.user, {Role.SUPERADMIN}):
            raise PermissionDenied("Only a superadmin can register another superadmin.")

        with transaction.atomic():
            if AdminAccount.objects.filter(email__iexact=data["email"]).exists():
                raise AdminExists()
            create = (
                AdminAccount.objects.create_superuser
                if data["role"] == Role.SUPERADMIN
                else AdminAccount.objects.create_user
            )
            admin = create(email=data["email"], password=data["password"], name=data["name"])

        logger.info("Admin %s registered by %s", admin.email, request.user.email)
        return success_response(
            {"admin": AdminSerializer(admin).data},
            message="Admin registered successfully",
            status=status.HTTP_201_CREATED,
        )


class MeView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request):
        return success_response(AdminProfileSerializer(request.user).data)


class ChangePasswordView(APIView):
    permission_classes = [IsAdmin]

    def put(self, request):
        admin = request.user
        serializer = ChangePasswordSerializer(data=request.data, context={"admin": admin})
        serializer.is_valid(raise_exception=True)

        if not admin.check_password(serializer.validated_data["currentPassword"]):
            raise InvalidPassword()

        admin.set_password(serializer.validated_data["newPassword"])
        admin.save(update_fields=["password", "updated_at"])
        return success_response(message="Password changed successfully")
