"""
Views for the contact app.

Anyone may submit the contact form (rate limited); reading and deleting
submissions needs an admin token.  After a submission is stored the
optional newsletter sign-up and the two notification emails run on a
best-effort basis: their failures are logged and never change the
response.
"""
import logging

from django.conf import settings
from rest_framework import status

from common.emails import send_templated_email
from common.responses import success_response
from common.throttling import SubmissionRateThrottle
from common.viewsets import ContentViewSet
from newsletter import services as newsletter
from newsletter.models import Subscriber
from .models import ContactSubmission
from .serializers import ContactSubmissionSerializer

logger = logging.getLogger(__name__)


class ContactSubmissionViewSet(ContentViewSet):
    http_method_names = ["get", "post", "delete", "head", "options"]
    serializer_class = ContactSubmissionSerializer
    public_actions = ("create",)
    action_throttles = {"create": [SubmissionRateThrottle]}
    items_key = "submissions"
    entity_label = "Contact submission"

    def get_queryset(self):
        return ContactSubmission.objects.order_by("-submitted_at", "-id")

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        submission = serializer.save()
        logger.info("Contact submission %s from %s", submission.pk, submission.email)

        if submission.subscribe_newsletter:
            try:
                newsletter.subscribe(submission.email, Subscriber.SOURCE_CONTACT_FORM)
            except Exception:
                logger.exception("Error adding %s to newsletter from contact form", submission.email)

        context = {"submission": submission}
        send_templated_email(
            settings.CONTACT_EMAIL,
            f"New Contact Form Submission: {submission.subject}",
            "contact_admin.html",
            context,
        )
        send_templated_email(
            submission.email, "Thank you for contacting Web3 Economy", "contact_ack.html", context
        )

        return success_response(
            {"id": submission.pk, "submittedAt": serializer.data["submittedAt"]},
            message="Contact form submitted successfully. We will get back to you soon!",
            status=status.HTTP_201_CREATED,
        )
