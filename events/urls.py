"""
URL patterns for the events app.

Registered under ``/api/`` so the collection lives at ``/api/events``
and single events at ``/api/events/<id>``.
"""
from rest_framework.routers import SimpleRouter

from .views import EventViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"events", EventViewSet, basename="event")

urlpatterns = router.urls
