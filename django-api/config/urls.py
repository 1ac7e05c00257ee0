from django.contrib import admin
from django.urls import include, path

from common.handlers import AccountView, StatusView

urlpatterns = [
    path("admin/", admin.site.urls),
    path("api/auth/", include("rest_framework.urls")),
    path("api/status", StatusView.as_view(), name="status"),
    path("api/account", AccountView.as_view(), name="account"),
    path("api/", include("signups.urls")),
    path("api/", include("shop.urls")),
    path("api/", include("clips.urls")),
]
