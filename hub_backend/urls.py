"""
URL configuration for the community hub backend.

Every API route is mounted twice: under ``/<tenant_slug>/api/`` and under
the bare ``/api/`` prefix, which addresses ``settings.DEFAULT_TENANT_SLUG``.
Authentication endpoints are nested under ``auth/``.
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import (
    SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView
)

from hub_backend.views import HealthView

api_patterns = [
    path("health", HealthView.as_view(), name="health"),
    path("auth/", include("users.urls")),
    path("", include("tenants.urls")),
    path("", include("forum.urls")),
    path("", include("content.urls")),
    path("", include("events.urls")),
    path("", include("notifications.urls")),
    path("", include("moderation.urls")),
    path("", include("activity_feed.urls")),
]

urlpatterns = [
    path("admin/", admin.site.urls),

    #  Swagger/Redoc
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("api/redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),

    path("api/", include((api_patterns, "api"), namespace="api")),
    path("<slug:tenant_slug>/api/", include((api_patterns, "api"), namespace="tenant-api")),
]
