"""
Views for the newsletter app.

``subscribe`` and ``unsubscribe`` are public; the subscriber list and
deletion are admin-only.  Confirmation emails are queued after the state
change and never affect the response.
"""
from urllib.parse import urlencode

from django.conf import settings
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny

from common.emails import send_templated_email
from common.responses import success_response
from common.throttling import GeneralRateThrottle, SubmissionRateThrottle
from common.viewsets import ContentViewSet
from . import services
from .filters import SubscriberFilter
from .models import Subscriber
from .serializers import SubscribeSerializer, SubscriberSerializer, UnsubscribeSerializer


def unsubscribe_url(email):
    return f"{settings.FRONTEND_URL.rstrip('/')}/unsubscribe?{urlencode({'email': email})}"


@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([GeneralRateThrottle, SubmissionRateThrottle])
def subscribe(request):
    serializer = SubscribeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    email = serializer.validated_data["email"]

    subscriber, outcome = services.subscribe(email, serializer.validated_data.get("source") or None)
    if outcome == services.ALREADY_ACTIVE:
        return success_response(message="You are already subscribed to our newsletter.")

    context = {"unsubscribe_url": unsubscribe_url(email)}
    if outcome == services.REACTIVATED:
        send_templated_email(
            email, "Welcome back to Web3 Economy Newsletter!", "newsletter_welcome_back.html", context
        )
        return success_response(message="Successfully re-subscribed to newsletter.")

    send_templated_email(email, "Welcome to Web3 Economy Newsletter!", "newsletter_welcome.html", context)
    return success_response(message="Successfully subscribed to newsletter.", status=status.HTTP_201_CREATED)


@api_view(["POST"])
@authentication_classes([])
@permission_classes([AllowAny])
def unsubscribe(request):
    serializer = UnsubscribeSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    email = serializer.validated_data["email"]

    subscriber, outcome = services.unsubscribe(email)
    if outcome == services.ALREADY_UNSUBSCRIBED:
        return success_response(message="You are already unsubscribed from our newsletter.")

    send_templated_email(email, "Unsubscribed from Web3 Economy Newsletter", "newsletter_unsubscribed.html")
    return success_response(message="Successfully unsubscribed from newsletter.")


class SubscriberViewSet(ContentViewSet):
    """Admin view of the subscriber list."""
    http_method_names = ["get", "delete", "head", "options"]
    serializer_class = SubscriberSerializer
    filterset_class = SubscriberFilter
    public_actions = ()
    items_key = "subscribers"
    page_size = 50
    entity_label = "Subscriber"

    def get_queryset(self):
        return Subscriber.objects.order_by("-subscribed_at", "-id")

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        active_count = Subscriber.objects.filter(status=Subscriber.STATUS_ACTIVE).count()
        return self.paginated_response(queryset, activeCount=active_count)