from django.contrib import admin
from django.urls import path, include
from django.contrib.auth import views as auth_views

from . import views

urlpatterns = [
    path(
        "admin/logout/",
        auth_views.LogoutView.as_view(next_page="/admin/login/"),
        name="admin-logout",
    ),

    path("admin/", admin.site.urls),

    path("", views.HomeView.as_view(), name="home"),
    path("", include("idle_logout.urls")),
]
