"""
URL configuration for lapakBackend project.

The purchase endpoints are mounted under ``v1/`` to match the public API
contract; the admin and the OpenAPI documentation live next to them.
"""

from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView


urlpatterns = [
    path("admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # API endpoints
    path("v1/", include("marketplace.urls")),
]
