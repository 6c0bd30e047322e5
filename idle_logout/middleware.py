# idle_logout/middleware.py
import logging

from django.contrib import auth
from django.shortcuts import redirect
from django.urls import NoReverseMatch, reverse
from django.utils import timezone

from .conf import get_config
from .guard import GuardSignal, get_session_guard
from .stores import StoreUnavailable

log = logging.getLogger(__name__)


def _reverse_or_none(name):
    try:
        return reverse(name)
    except NoReverseMatch:
        return None


class IdleLogoutMiddleware:
    """
    Runs the session guard on every authenticated request.

    Must sit after AuthenticationMiddleware. Ignored paths (static files,
    login/logout) are never evaluated; exempt paths and requests carrying the
    heartbeat header are evaluated but do not extend the idle window.
    """

    def __init__(self, get_response):
        self.get_response = get_response
        conf = get_config()
        self.ignored_prefixes = tuple(conf["IGNORED_PATHS"])
        self.extra_exempt_paths = set(conf["EXEMPT_PATHS"])
        self.heartbeat_header = conf["HEARTBEAT_HEADER"]
        self._auth_paths = None
        self._exempt_paths = None

    @property
    def auth_paths(self):
        # reversed lazily, the urlconf may not be loaded yet in __init__
        if self._auth_paths is None:
            names = ('idle_logout:login', 'idle_logout:logout', 'admin:login', 'admin:logout')
            self._auth_paths = {p for p in map(_reverse_or_none, names) if p}
        return self._auth_paths

    @property
    def exempt_paths(self):
        if self._exempt_paths is None:
            heartbeat = _reverse_or_none('idle_logout:heartbeat')
            self._exempt_paths = self.extra_exempt_paths | ({heartbeat} if heartbeat else set())
        return self._exempt_paths

    def is_ignored(self, request):
        path = request.path
        return path.startswith(self.ignored_prefixes) or path in self.auth_paths

    def is_exempt_activity(self, request):
        if request.path in self.exempt_paths:
            return True
        if self.heartbeat_header and request.headers.get(self.heartbeat_header):
            return True
        return False

    def __call__(self, request):
        if not request.user.is_authenticated or self.is_ignored(request):
            return self.get_response(request)

        guard = get_session_guard()
        now = int(timezone.now().timestamp())
        try:
            signal = guard.on_request(
                request.user,
                now,
                is_exempt_activity=self.is_exempt_activity(request),
                invalidate_session=lambda: auth.logout(request),
            )
        except StoreUnavailable:
            log.exception("idle check skipped for %s", request.path)
            return self.get_response(request)

        if signal.action == GuardSignal.REDIRECT:
            return redirect(signal.url)

        # TERMINATE: auth.logout already swapped request.user for AnonymousUser
        return self.get_response(request)
