from django.contrib import admin
from django.urls import path

from storefront.apps.core.views import healthz

urlpatterns = [
    path("healthz", healthz, name="healthz"),  # Health check
    path("admin/", admin.site.urls),  # Django admin app (constance settings live here)
]
