# idle_logout/urls.py
from django.urls import path

from . import views
from .api_views import ActivityStatusView

app_name = "idle_logout"

urlpatterns = [
    # --- Auth (login/logout) ---
    path("login/", views.IdleLoginView.as_view(), name="login"),
    path("logout/", views.LogoutGetOK.as_view(next_page="idle_logout:login"), name="logout"),

    # --- Keep-alive polling, exempt from activity ---
    path("api/heartbeat/", ActivityStatusView.as_view(), name="heartbeat"),
]
