"""URL patterns for the blogs app, mounted under ``/api/``."""
from rest_framework.routers import SimpleRouter

from .views import BlogViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"blogs", BlogViewSet, basename="blog")

urlpatterns = router.urls
