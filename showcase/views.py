"""
ViewSets for the showcase app.

Public endpoints show published projects only (except lookup by id) and
include category counts and the headline statistics.  Starring is a
public counter with the submission rate limit.
"""
from django.db.models import Count, Sum
from rest_framework.decorators import action

from common.counters import increment
from common.formatting import format_count, format_usd
from common.pagination import read_limit
from common.responses import success_response
from common.throttling import SubmissionRateThrottle
from common.viewsets import ContentViewSet
from .filters import ShowcaseAdminFilter, ShowcaseFilter
from .models import Showcase
from .serializers import ShowcaseSerializer


class ShowcaseViewSet(ContentViewSet):
    serializer_class = ShowcaseSerializer
    public_actions = (
        "list", "retrieve", "categories", "stats", "featured", "trending", "by_slug", "star",
    )
    action_throttles = {"star": [SubmissionRateThrottle]}
    items_key = "projects"
    entity_label = "Project"

    @property
    def page_size(self):
        return 20 if self.action == "admin_all" else 12

    @property
    def filterset_class(self):
        return ShowcaseAdminFilter if self.action == "admin_all" else ShowcaseFilter

    def get_queryset(self):
        return Showcase.objects.order_by("-created_at", "-id")

    def published(self):
        return self.get_queryset().filter(published=True)

    def list(self, request, *args, **kwargs):
        return self.paginated_response(self.filter_queryset(self.published()))

    @action(detail=False, methods=["get"], url_path="admin/all")
    def admin_all(self, request):
        return self.paginated_response(self.filter_queryset(self.get_queryset()))

    @action(detail=False, methods=["get"])
    def categories(self, request):
        published = Showcase.objects.filter(published=True)
        counts = (
            published.order_by().values("category")
            .annotate(count=Count("id"))
            .order_by("-count", "category")
        )
        data = [{"id": "all", "name": "All Projects", "count": published.count()}]
        data += [
            {"id": row["category"].lower(), "name": row["category"], "count": row["count"]}
            for row in counts
        ]
        return success_response(data)

    @action(detail=False, methods=["get"])
    def stats(self, request):
        published = Showcase.objects.filter(published=True)
        totals = published.aggregate(
            projects=Count("id"),
            builders=Count("creator", distinct=True),
            stars=Sum("stars"),
            tvl=Sum("tvl_usd"),
        )
        data = [
            {"label": "Total Projects", "value": format_count(totals["projects"]), "icon": "Layers"},
            {"label": "Active Builders", "value": format_count(totals["builders"]), "icon": "Users"},
            {"label": "Combined TVL", "value": format_usd(totals["tvl"]), "icon": "TrendingUp"},
            {"label": "GitHub Stars", "value": format_count(totals["stars"]), "icon": "Star"},
        ]
        return success_response(data)

    def _flagged(self, request, flag):
        queryset = self.published().filter(**{flag: True}).order_by("-stars", "-created_at", "-id")
        projects = queryset[:read_limit(request, default=6)]
        return success_response(self.get_serializer(projects, many=True).data)

    @action(detail=False, methods=["get"])
    def featured(self, request):
        return self._flagged(request, "featured")

    @action(detail=False, methods=["get"])
    def trending(self, request):
        return self._flagged(request, "trending")

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-zA-Z0-9_]+)")
    def by_slug(self, request, slug=None):
        project = self.get_by_slug(self.published(), slug)
        return success_response(self.get_serializer(project).data)

    @action(detail=True, methods=["post"])
    def star(self, request, pk=None):
        stars = increment(Showcase.objects.all(), pk, "stars", "Project not found.")
        return success_response({"stars": stars}, message="Project starred")
