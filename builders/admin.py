from django.contrib import admin

from .models import BuilderProject


@admin.register(BuilderProject)
class BuilderProjectAdmin(admin.ModelAdmin):
    list_display = ("title", "creator", "status", "users", "tvl", "created_at")
    list_filter = ("status",)
    search_fields = ("title", "creator", "description")
