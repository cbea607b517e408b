"""ViewSets for the builders app."""
from common.viewsets import ContentViewSet
from .filters import BuilderProjectFilter
from .models import BuilderProject
from .serializers import BuilderProjectSerializer


class BuilderProjectViewSet(ContentViewSet):
    serializer_class = BuilderProjectSerializer
    filterset_class = BuilderProjectFilter
    items_key = "projects"
    list_message = "Found {count} projects"
    entity_label = "Project"

    def get_queryset(self):
        return BuilderProject.objects.order_by("-created_at", "-id")
