"""
Permission classes for admin endpoints.

Roles form a flat, closed set (:class:`accounts.models.Role`), so access
is decided by a plain membership test, :func:`role_allowed`.
"""
from rest_framework import permissions

from .models import AdminAccount, Role


def role_allowed(admin, allowed) -> bool:
    """True when ``admin`` is an account whose role is in ``allowed``."""
    if not isinstance(admin, AdminAccount):
        return False
    return admin.role in {Role(role) for role in allowed}


class IsAdmin(permissions.BasePermission):
    """Any authenticated admin account."""
    message = "Access denied. No token provided."

    def has_permission(self, request, view):
        user = getattr(request, "user", None)
        return bool(user and user.is_authenticated and isinstance(user, AdminAccount))


def require_roles(*roles):
    """Build a permission class admitting only admins whose role is in ``roles``."""
    allowed = frozenset(Role(role) for role in roles)

    class HasRole(IsAdmin):
        message = "Access denied. Insufficient permissions."

        def has_permission(self, request, view):
            return super().has_permission(request, view) and role_allowed(request.user, allowed)

    HasRole.__name__ = f"HasRole_{'_'.join(sorted(allowed))}"
    return HasRole
