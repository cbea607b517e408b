from django.contrib import admin

from .models import ContactSubmission


@admin.register(ContactSubmission)
class ContactSubmissionAdmin(admin.ModelAdmin):
    list_display = ("full_name", "email", "subject", "subscribe_newsletter", "submitted_at")
    list_filter = ("subscribe_newsletter",)
    search_fields = ("full_name", "email", "subject", "message")
    readonly_fields = ("submitted_at",)
