"""URL patterns for the creators app, mounted under ``/api/``."""
from rest_framework.routers import SimpleRouter

from .views import CreatorViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"creators", CreatorViewSet, basename="creator")

urlpatterns = router.urls
