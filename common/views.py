"""
Service-level views: root info, the API endpoint index, the health check
and JSON replacements for Django's HTML 404/500 pages.
"""
import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone
from rest_framework.decorators import api_view, authentication_classes, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from .exceptions import error_body

logger = logging.getLogger(__name__)

API_NAME = "Web3 Economy API"
API_VERSION = "1.0.0"

ENDPOINTS = {
    "admin": {
        "login": "POST /api/admin/login",
        "register": "POST /api/admin/register (auth required)",
        "me": "GET /api/admin/me (auth required)",
        "changePassword": "PUT /api/admin/password (auth required)",
    },
    "events": {
        "list": "GET /api/events",
        "get": "GET /api/events/:id",
        "create": "POST /api/events (auth required)",
        "update": "PUT /api/events/:id (auth required)",
        "delete": "DELETE /api/events/:id (auth required)",
    },
    "creators": {
        "list": "GET /api/creators",
        "get": "GET /api/creators/:id",
        "create": "POST /api/creators (auth required)",
        "update": "PUT /api/creators/:id (auth required)",
        "delete": "DELETE /api/creators/:id (auth required)",
    },
    "builders": {
        "list": "GET /api/builders/projects",
        "get": "GET /api/builders/projects/:id",
        "create": "POST /api/builders/projects (auth required)",
        "update": "PUT /api/builders/projects/:id (auth required)",
        "delete": "DELETE /api/builders/projects/:id (auth required)",
    },
    "resources": {
        "list": "GET /api/resources",
        "get": "GET /api/resources/:id",
        "getBySlug": "GET /api/resources/slug/:slug",
        "download": "POST /api/resources/:id/download",
        "create": "POST /api/resources (auth required)",
        "update": "PUT /api/resources/:id (auth required)",
        "delete": "DELETE /api/resources/:id (auth required)",
    },
    "blogs": {
        "list": "GET /api/blogs",
        "featured": "GET /api/blogs/featured",
        "categories": "GET /api/blogs/categories",
        "trending": "GET /api/blogs/trending",
        "getBySlug": "GET /api/blogs/slug/:slug",
        "related": "GET /api/blogs/slug/:slug/related",
        "get": "GET /api/blogs/:id",
        "like": "POST /api/blogs/:id/like",
        "bookmark": "POST /api/blogs/:id/bookmark",
        "view": "POST /api/blogs/:id/view",
        "adminList": "GET /api/blogs/admin/all (auth required)",
        "create": "POST /api/blogs (auth required)",
        "update": "PUT /api/blogs/:id (auth required)",
        "delete": "DELETE /api/blogs/:id (auth required)",
    },
    "showcase": {
        "list": "GET /api/showcase",
        "categories": "GET /api/showcase/categories",
        "stats": "GET /api/showcase/stats",
        "featured": "GET /api/showcase/featured",
        "trending": "GET /api/showcase/trending",
        "getBySlug": "GET /api/showcase/slug/:slug",
        "get": "GET /api/showcase/:id",
        "star": "POST /api/showcase/:id/star",
        "adminList": "GET /api/showcase/admin/all (auth required)",
        "create": "POST /api/showcase (auth required)",
        "update": "PUT /api/showcase/:id (auth required)",
        "delete": "DELETE /api/showcase/:id (auth required)",
    },
    "contact": {
        "submit": "POST /api/contact",
        "list": "GET /api/contact (auth required)",
        "get": "GET /api/contact/:id (auth required)",
        "delete": "DELETE /api/contact/:id (auth required)",
    },
    "newsletter": {
        "subscribe": "POST /api/newsletter/subscribe",
        "unsubscribe": "POST /api/newsletter/unsubscribe",
        "subscribers": "GET /api/newsletter/subscribers (auth required)",
        "deleteSubscriber": "DELETE /api/newsletter/subscribers/:id (auth required)",
    },
}


def _database_status():
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError:
        logger.warning("Health check could not reach the database", exc_info=True)
        return "disconnected"
    return "connected"


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
@throttle_classes([])
def health(request):
    return Response({
        "status": "OK",
        "timestamp": timezone.now().isoformat(),
        "database": _database_status(),
        "environment": settings.ENVIRONMENT,
    })


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def root(request):
    return Response({
        "name": API_NAME,
        "version": API_VERSION,
        "status": "running",
        "documentation": "/api",
        "health": "/health",
    })


@api_view(["GET"])
@authentication_classes([])
@permission_classes([AllowAny])
def api_index(request):
    return Response({
        "name": API_NAME,
        "version": API_VERSION,
        "docs": "/api/docs",
        "endpoints": ENDPOINTS,
    })


def handler404(request, exception=None):
    return JsonResponse(error_body("NOT_FOUND", "The requested endpoint was not found."), status=404)


def handler500(request):
    return JsonResponse(error_body("INTERNAL_ERROR", "An unexpected error occurred"), status=500)
