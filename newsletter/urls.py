"""
URL patterns for the newsletter app, mounted under ``/api/newsletter/``.
"""
from django.urls import path
from rest_framework.routers import SimpleRouter

from . import views

router = SimpleRouter(trailing_slash=False)
router.register(r"subscribers", views.SubscriberViewSet, basename="subscriber")

urlpatterns = [
    path("subscribe", views.subscribe, name="newsletter-subscribe"),
    path("unsubscribe", views.unsubscribe, name="newsletter-unsubscribe"),
] + router.urls
