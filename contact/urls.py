"""URL patterns for the contact app, mounted under ``/api/``."""
from rest_framework.routers import SimpleRouter

from .views import ContactSubmissionViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"contact", ContactSubmissionViewSet, basename="contact")

urlpatterns = router.urls
