# accounts/admin.py
from django.contrib import admin

from .models import AdminAccount


@admin.register(AdminAccount)
class AdminAccountAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "role", "is_active", "last_login", "created_at")
    list_filter = ("role", "is_active")
    search_fields = ("email", "name")
    ordering = ("-created_at",)
    readonly_fields = ("last_login", "created_at", "updated_at")
    exclude = ("password", "groups", "user_permissions")
