"""
ViewSets for the blogs app.

Public readers only ever see published posts, except when fetching a
post by id.  Reading a post by slug returns the stored representation
first and then queues ``record_blog_view`` to count the view, so the GET
itself never writes.  Likes, bookmarks and explicit view pings are
public counters.  ``admin/all`` lists drafts as well for the editors.
"""
import logging

from django.db.models import Count, Q
from rest_framework.decorators import action
from rest_framework.exceptions import NotFound

from common.counters import increment
from common.pagination import read_limit
from common.responses import success_response
from common.search import json_list_contains_q, json_list_tally
from common.throttling import SubmissionRateThrottle
from common.viewsets import ContentViewSet
from .filters import BlogAdminFilter, BlogFilter
from .models import Blog
from .serializers import BlogListSerializer, BlogSerializer, RelatedBlogSerializer
from .tasks import record_blog_view
from .utils import category_id

logger = logging.getLogger(__name__)

TRENDING_TAGS = 10


class BlogViewSet(ContentViewSet):
    serializer_class = BlogSerializer
    public_actions = (
        "list", "retrieve", "featured", "categories", "trending",
        "by_slug", "related", "like", "bookmark", "record_view",
    )
    action_throttles = {
        "like": [SubmissionRateThrottle],
        "bookmark": [SubmissionRateThrottle],
    }
    items_key = "posts"
    entity_label = "Blog post"

    @property
    def page_size(self):
        return 20 if self.action == "admin_all" else 10

    @property
    def filterset_class(self):
        return BlogAdminFilter if self.action == "admin_all" else BlogFilter

    def get_queryset(self):
        return Blog.objects.order_by("-published_date", "-created_at", "-id")

    def published(self):
        return self.get_queryset().filter(published=True)

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.published().defer("content"))
        return self.paginated_response(queryset, BlogListSerializer)

    @action(detail=False, methods=["get"], url_path="admin/all")
    def admin_all(self, request):
        queryset = self.filter_queryset(Blog.objects.order_by("-created_at", "-id"))
        return self.paginated_response(queryset)

    @action(detail=False, methods=["get"])
    def featured(self, request):
        post = self.published().filter(featured=True).first() or self.published().first()
        if post is None:
            raise NotFound("No blog posts found.")
        return success_response(self.get_serializer(post).data)

    @action(detail=False, methods=["get"])
    def categories(self, request):
        published = Blog.objects.filter(published=True)
        counts = (
            published.order_by().values("category")
            .annotate(count=Count("id"))
            .order_by("-count", "category")
        )
        data = [{"id": "all", "name": "All Posts", "count": published.count()}]
        data += [
            {"id": category_id(row["category"]), "name": row["category"], "count": row["count"]}
            for row in counts
        ]
        return success_response(data)

    @action(detail=False, methods=["get"])
    def trending(self, request):
        tally = json_list_tally(Blog.objects.filter(published=True), "tags", TRENDING_TAGS)
        data = [{"name": name, "posts": posts} for name, posts in tally]
        return success_response(data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-zA-Z0-9_]+)")
    def by_slug(self, request, slug=None):
        post = self.get_by_slug(self.published(), slug)
        data = self.get_serializer(post).data
        try:
            record_blog_view.delay(post.pk)
        except Exception:
            logger.exception("Could not queue view count for blog %s", post.pk)
        return success_response(data)

    @action(detail=False, methods=["get"], url_path=r"slug/(?P<slug>[-a-zA-Z0-9_]+)/related")
    def related(self, request, slug=None):
        post = self.get_by_slug(self.get_queryset(), slug)

        condition = Q(category=post.category)
        shares_tag = json_list_contains_q(Blog.objects.all(), "tags", post.tags or [])
        if shares_tag is not None:
            condition |= shares_tag
        queryset = self.published().exclude(pk=post.pk).filter(condition)
        posts = queryset[:read_limit(request, default=3)]
        return success_response(RelatedBlogSerializer(posts, many=True).data)

    @action(detail=True, methods=["post"])
    def like(self, request, pk=None):
        likes = increment(Blog.objects.all(), pk, "likes", "Blog post not found.")
        return success_response({"likes": likes}, message="Blog post liked")

    @action(detail=True, methods=["post"])
    def bookmark(self, request, pk=None):
        bookmarks = increment(Blog.objects.all(), pk, "bookmarks", "Blog post not found.")
        return success_response({"bookmarks": bookmarks}, message="Blog post bookmarked")

    @action(detail=True, methods=["post"], url_path="view")
    def record_view(self, request, pk=None):
        views = increment(Blog.objects.all(), pk, "views", "Blog post not found.")
        return success_response({"views": views}, message="View recorded")
