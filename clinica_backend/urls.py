"""Clinic backend URL configuration.

API routes:
    /api/health/    - Health check (core)
    /api/auth/      - Authentication (core)
    /api/patients/  - Patient records (patients)
"""

from django.contrib import admin
from django.http import HttpResponse
from django.urls import include, path


def root(request):
    """Plain-text liveness response."""
    return HttpResponse("Clinic backend is running.")


urlpatterns = [
    path("", root, name="root"),
    path("admin/", admin.site.urls),

    path("api/", include("clinica_backend.core.urls")),
    path("api/", include("clinica_backend.patients.urls")),
]
