"""
URL patterns for the content app.

Mounted under ``/api/``: ``/api/resources``, ``/api/resources/<id>``,
``/api/resources/slug/<slug>`` and ``/api/resources/<id>/download``.
"""
from rest_framework.routers import SimpleRouter

from .views import ResourceViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"resources", ResourceViewSet, basename="resource")

urlpatterns = router.urls
