"""
Base viewset for the content resources.

``ContentViewSet`` wires the behaviour every resource shares:

* actions named in ``public_actions`` accept an optional bearer token and
  are open to everyone; all other actions require an admin token;
* per-action throttles come from ``action_throttles`` on top of the
  general limit;
* responses use the success envelope, list responses the skip/limit
  paginator, and PUT merges fields exactly like PATCH.
"""
from django.http import Http404
from rest_framework import status, viewsets
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny

from accounts.authentication import AdminJWTAuthentication, OptionalAdminJWTAuthentication
from accounts.permissions import IsAdmin
from .responses import success_response
from .throttling import GeneralRateThrottle


class ContentViewSet(viewsets.ModelViewSet):
    public_actions = ("list", "retrieve")
    action_throttles = {}
    lookup_value_regex = r"[0-9]+"

    items_key = "results"
    page_size = 20
    list_message = None
    entity_label = "Item"

    def _resolve_action(self):
        # Authenticators are built before DRF sets self.action
        action_map = getattr(self, "action_map", None) or {}
        return action_map.get(self.request.method.lower())

    def get_authenticators(self):
        if self._resolve_action() in self.public_actions:
            return [OptionalAdminJWTAuthentication()]
        return [AdminJWTAuthentication()]

    def get_permissions(self):
        if self.action in self.public_actions:
            return [AllowAny()]
        return [IsAdmin()]

    def get_throttles(self):
        throttles = [GeneralRateThrottle]
        throttles += list(self.action_throttles.get(self.action, ()))
        return [throttle() for throttle in throttles]

    def get_object(self):
        try:
            return super().get_object()
        except Http404:
            raise NotFound(f"{self.entity_label} not found.")

    def get_by_slug(self, queryset, slug):
        obj = queryset.filter(slug=slug).first()
        if obj is None:
            raise NotFound(f"{self.entity_label} not found.")
        return obj

    def paginated_response(self, queryset, serializer_class=None, **extra):
        page = self.paginate_queryset(queryset)
        serializer_class = serializer_class or self.get_serializer_class()
        serializer = serializer_class(page, many=True, context=self.get_serializer_context())
        return self.paginator.get_paginated_response(serializer.data, **extra)

    def list(self, request, *args, **kwargs):
        queryset = self.filter_queryset(self.get_queryset())
        return self.paginated_response(queryset)

    def retrieve(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_object())
        return success_response(serializer.data)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        return success_response(
            serializer.data,
            message=f"{self.entity_label} created successfully",
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        return success_response(serializer.data, message=f"{self.entity_label} updated successfully")

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        self.perform_destroy(instance)
        return success_response(message=f"{self.entity_label} deleted successfully")
