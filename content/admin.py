# content/admin.py
from django.contrib import admin

from .models import Resource


@admin.register(Resource)
class ResourceAdmin(admin.ModelAdmin):
    list_display = ("title", "type", "category", "level", "downloads", "featured", "created_at")
    list_filter = ("type", "level", "featured")
    search_fields = ("title", "description", "author", "provider")
    prepopulated_fields = {"slug": ("title",)}
    ordering = ("-featured", "-created_at")
