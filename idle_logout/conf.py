# idle_logout/conf.py
from functools import lru_cache

from django.conf import settings

DEFAULT_MAX_IDLE_SECONDS = 60 * 60
MIN_IDLE_SECONDS = 60
DEFAULT_IDLE_MESSAGE = "You have been logged out due to inactivity."

DEFAULTS = {
    "MAX_IDLE_SECONDS": DEFAULT_MAX_IDLE_SECONDS,
    "IDLE_MESSAGE": DEFAULT_IDLE_MESSAGE,
    "SILENT_LOGOUT": False,
    "POLICY_SCOPE": "settings",  # "settings" | "site" | "network"
    "STORE": "model",  # "model" | "cache" (cache backend must not evict)
    "CACHE_ALIAS": "default",
    "KEY_NAMESPACE": "idle_logout",
    "LOGIN_URL": None,  # None -> settings.LOGIN_URL
    "IGNORED_PATHS": ["/static/", "/media/"],
    "EXEMPT_PATHS": [],
    "HEARTBEAT_HEADER": "X-Idle-Heartbeat",
}


@lru_cache(maxsize=None)
def get_config() -> dict:
    conf = dict(DEFAULTS)
    conf.update(getattr(settings, "IDLE_LOGOUT", None) or {})
    if not conf["LOGIN_URL"]:
        conf["LOGIN_URL"] = settings.LOGIN_URL
    return conf


def reset_caches():
    """Forget the cached config and the process-wide guard built from it."""
    from .guard import get_session_guard

    get_config.cache_clear()
    get_session_guard.cache_clear()
