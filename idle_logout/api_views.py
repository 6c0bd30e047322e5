# idle_logout/api_views.py
from django.utils import timezone
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .guard import get_session_guard
from .serializers import ActivityStatusSerializer


class ActivityStatusView(APIView):
    """
    Keep-alive / status endpoint polled by the browser.

    The middleware treats this path as exempt activity, so polling it reports
    the remaining window without extending it. An expired session never
    reaches the view: the middleware has already logged it out.
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request):
        guard = get_session_guard()
        user = request.user if request.user.is_authenticated else None
        now = timezone.now().timestamp()
        data = {
            "ok": True,
            "authenticated": user is not None,
            "max_idle_seconds": guard.policy_provider.get_policy().max_idle_seconds,
            "seconds_remaining": guard.seconds_remaining(user, now),
        }
        return Response(ActivityStatusSerializer(data).data)
