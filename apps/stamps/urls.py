from django.urls import path

from .views import StampProviderListView, StampVerifyView

urlpatterns = [
    path("stamps/verify/", StampVerifyView.as_view(), name="stamp-verify"),
    path("stamps/providers/", StampProviderListView.as_view(), name="stamp-providers"),
]
