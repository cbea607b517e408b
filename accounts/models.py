"""
Models for the accounts app.

``AdminAccount`` is the project's ``AUTH_USER_MODEL``: every account is
a platform administrator identified by a case-folded email.  Passwords
are stored through Django's hasher framework (bcrypt in production) and
``last_login`` doubles as the last-login stamp set on each successful
login.  The role set is closed; see :func:`accounts.permissions.role_allowed`.
"""
from django.contrib.auth.base_user import AbstractBaseUser, BaseUserManager
from django.contrib.auth.models import PermissionsMixin
from django.db import models


class Role(models.TextChoices):
    ADMIN = "admin", "Admin"
    SUPERADMIN = "superadmin", "Super admin"


class AdminAccountManager(BaseUserManager):
    use_in_migrations = True

    def _create_account(self, email, password, **extra_fields):
        if not email:
            raise ValueError("An email address is required")
        email = self.normalize_email(email).lower()
        account = self.model(email=email, **extra_fields)
        account.set_password(password)
        account.save(using=self._db)
        return account

    def create_user(self, email, password=None, **extra_fields):
        extra_fields.setdefault("role", Role.ADMIN)
        extra_fields.setdefault("is_superuser", False)
        return self._create_account(email, password, **extra_fields)

    def create_superuser(self, email, password=None, **extra_fields):
        extra_fields["role"] = Role.SUPERADMIN
        extra_fields["is_superuser"] = True
        return self._create_account(email, password, **extra_fields)

    def get_by_natural_key(self, username):
        return self.get(**{f"{self.model.USERNAME_FIELD}__iexact": username})


class AdminAccount(AbstractBaseUser, PermissionsMixin):
    """An administrator allowed to manage platform content."""
    email = models.EmailField(unique=True)
    name = models.CharField(max_length=100)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.ADMIN)
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = AdminAccountManager()

    USERNAME_FIELD = "email"
    EMAIL_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        ordering = ["-created_at"]
        verbose_name = "admin account"

    def __str__(self) -> str:
        return f"{self.name} <{self.email}> ({self.role})"

    @property
    def is_staff(self) -> bool:
        # Every active account may use the Django admin site
        return self.is_active

    @property
    def is_superadmin(self) -> bool:
        return self.role == Role.SUPERADMIN
