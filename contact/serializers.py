"""Serializers for the contact app."""
from rest_framework import serializers

from common.validators import NormalizedEmailField
from .models import ContactSubmission


class ContactSubmissionSerializer(serializers.ModelSerializer):
    fullName = serializers.CharField(source="full_name", min_length=2, max_length=100)
    email = NormalizedEmailField()
    company = serializers.CharField(max_length=200, required=False, allow_blank=True)
    subject = serializers.CharField(min_length=5, max_length=200)
    message = serializers.CharField(min_length=10, max_length=5000)
    subscribeNewsletter = serializers.BooleanField(source="subscribe_newsletter", required=False, default=False)
    submittedAt = serializers.DateTimeField(source="submitted_at", read_only=True)

    class Meta:
        model = ContactSubmission
        fields = ["id", "fullName", "email", "company", "subject", "message", "subscribeNewsletter", "submittedAt"]
        read_only_fields = ["id", "submittedAt"]
