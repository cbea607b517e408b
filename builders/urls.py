"""URL patterns for the builders app; projects live at ``/api/builders/projects``."""
from rest_framework.routers import SimpleRouter

from .views import BuilderProjectViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r"builders/projects", BuilderProjectViewSet, basename="builder-project")

urlpatterns = router.urls
