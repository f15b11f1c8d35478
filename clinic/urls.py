"""
Root URLs: the registry API at the site root, the admin under ``/admin/``
and the generated OpenAPI browsers under ``/swagger/`` and ``/redoc/``.
"""
from django.contrib import admin
from django.urls import path, include

from rest_framework import permissions
from drf_yasg.views import get_schema_view
from drf_yasg import openapi

# referenced by SWAGGER_SETTINGS["DEFAULT_INFO"]
api_info = openapi.Info(
    title="Clinic Registry API",
    default_version='v1',
    description="Doctors, patients, appointments, patient records and medications.",
)

schema_view = get_schema_view(
    api_info,
    public=True,
    permission_classes=(permissions.AllowAny,),
)

urlpatterns = [
    path('admin/', admin.site.urls),
    # collections, /healthz and /metrics
    path('', include('registry.routers')),
    path('swagger/', schema_view.with_ui('swagger', cache_timeout=0), name='schema-swagger-ui'),
    path('redoc/', schema_view.with_ui('redoc', cache_timeout=0), name='schema-redoc'),
]
