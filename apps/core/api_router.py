from django.urls import include, path

urlpatterns = [
    path("", include("apps.stamps.urls")),
]
