# idle_logout/guard.py
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from django.shortcuts import resolve_url
from django.template.defaultfilters import linebreaksbr
from django.utils.html import format_html

from .conf import get_config
from .policy import PolicyProvider, get_policy_provider
from .stores import get_activity_store
from .tracker import ActivityTracker, Outcome

log = logging.getLogger(__name__)

IDLE_QUERY_PARAM = "idle"


@dataclass(frozen=True)
class GuardSignal:
    CONTINUE = "continue"
    REDIRECT = "redirect"
    TERMINATE = "terminate"  # carry on as anonymous

    action: str
    url: Optional[str] = None

    @classmethod
    def proceed(cls):
        return cls(cls.CONTINUE)

    @classmethod
    def redirect(cls, url):
        return cls(cls.REDIRECT, url)

    @classmethod
    def terminate(cls):
        return cls(cls.TERMINATE)


def idle_flag_set(value) -> bool:
    # same notion of "set" as a non-empty query string value
    if value is None or value is False:
        return False
    return str(value).strip() not in ("", "0")


def idle_login_url(login_url: str) -> str:
    sep = "&" if "?" in login_url else "?"
    return f"{login_url}{sep}{IDLE_QUERY_PARAM}=1"


class SessionGuard:
    def __init__(self, tracker: ActivityTracker, policy_provider: PolicyProvider, login_url: str):
        self.tracker = tracker
        self.policy_provider = policy_provider
        self.login_url = login_url

    def on_request(self, principal, now, is_exempt_activity=False, invalidate_session=None) -> GuardSignal:
        if principal is None:
            return GuardSignal.proceed()

        now = int(now)
        outcome = self.tracker.evaluate(principal.pk, now, refresh=not is_exempt_activity)

        if outcome is Outcome.NO_RECORD:
            log.debug("initialising activity record for principal %s", principal.pk)
            self.tracker.touch(principal.pk, now)
            return GuardSignal.proceed()

        if outcome is Outcome.EXPIRED:
            policy = self.policy_provider.get_policy()
            if invalidate_session is not None:
                invalidate_session()
            self.tracker.clear(principal.pk)
            log.info("principal %s logged out after %ss idle (%s)", principal.pk,
                     policy.max_idle_seconds, "silent" if policy.silent_logout else "redirect")
            if policy.silent_logout:
                return GuardSignal.terminate()
            return GuardSignal.redirect(idle_login_url(resolve_url(self.login_url)))

        return GuardSignal.proceed()

    def on_login(self, principal, now):
        self.tracker.touch(principal.pk, int(now))

    def on_logout(self, principal):
        if principal is None or getattr(principal, "pk", None) is None:
            return
        self.tracker.clear(principal.pk)

    def render_login_notice(self, base_message, idle_flag) -> str:
        if not idle_flag_set(idle_flag):
            return base_message
        message = self.policy_provider.get_policy().idle_message
        notice = format_html('<p class="message">{}</p>', linebreaksbr(message, autoescape=True))
        return f"{base_message}{notice}"

    def seconds_remaining(self, principal, now):
        if principal is None:
            return None
        return self.tracker.seconds_remaining(principal.pk, int(now))


@lru_cache(maxsize=None)
def get_session_guard() -> SessionGuard:
    """Process-wide guard; store and policy scope are picked once here."""
    conf = get_config()
    provider = get_policy_provider()
    tracker = ActivityTracker(get_activity_store(), provider, namespace=conf["KEY_NAMESPACE"])
    return SessionGuard(tracker, provider, conf["LOGIN_URL"])
