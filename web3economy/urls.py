"""
URL configuration for the Web3 Economy platform backend.

Every resource app registers its own routes under ``/api/``; admin
account endpoints live under ``/api/admin/``.  Unknown paths answer with
the JSON error envelope instead of Django's HTML page.
"""
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularRedocView, SpectacularSwaggerView

from common import views as common_views

urlpatterns = [
    path("", common_views.root, name="root"),
    path("health", common_views.health, name="health"),
    path("django-admin/", admin.site.urls),

    path("api", common_views.api_index, name="api-index"),

    # Swagger/Redoc
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    path("api/admin/", include("accounts.urls")),
    path("api/", include("events.urls")),
    path("api/", include("creators.urls")),
    path("api/", include("builders.urls")),
    path("api/", include("content.urls")),
    path("api/", include("blogs.urls")),
    path("api/", include("showcase.urls")),
    path("api/", include("contact.urls")),
    path("api/newsletter/", include("newsletter.urls")),
]

handler404 = "common.views.handler404"
handler500 = "common.views.handler500"
