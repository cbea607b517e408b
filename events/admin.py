# events/admin.py
from django.contrib import admin

from .models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("title", "date", "type", "status", "location", "attendees", "created_at")
    list_filter = ("type", "status")
    search_fields = ("title", "location", "description")
    ordering = ("date", "-created_at")
