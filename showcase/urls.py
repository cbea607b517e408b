"""URL patterns for the showcase app, mounted under ``/api/``."""
from rest_framework.routers import SimpleRouter

from .views import ShowcaseViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"showcase", ShowcaseViewSet, basename="showcase")

urlpatterns = router.urls
