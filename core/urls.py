from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView

urlpatterns = [
    path("api/v1/", include("apps.core.api_router")),
    path("api/v1/schema/", SpectacularAPIView.as_view(), name="schema"),
]
