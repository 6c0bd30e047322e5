# idle_logout/signals.py
import logging

from django.contrib.auth.signals import user_logged_in, user_logged_out
from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils import timezone

from .conf import reset_caches
from .guard import get_session_guard

log = logging.getLogger(__name__)


@receiver(user_logged_in, dispatch_uid="idle_logout_on_login")
def start_idle_window(sender, request, user, **kwargs):
    get_session_guard().on_login(user, timezone.now().timestamp())


@receiver(user_logged_out, dispatch_uid="idle_logout_on_logout")
def clear_idle_window(sender, request, user, **kwargs):
    # user is None when the session was already anonymous
    get_session_guard().on_logout(user)


@receiver(setting_changed, dispatch_uid="idle_logout_setting_changed")
def reload_idle_config(sender, setting, **kwargs):
    if setting in ("IDLE_LOGOUT", "LOGIN_URL", "CACHES"):
        log.debug("%s changed, rebuilding idle logout guard", setting)
        reset_caches()
