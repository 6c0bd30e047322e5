# idle_logout/policy.py
import logging
from dataclasses import dataclass

from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError

from .conf import DEFAULT_IDLE_MESSAGE, DEFAULT_MAX_IDLE_SECONDS, MIN_IDLE_SECONDS, get_config
from .stores import StoreUnavailable

log = logging.getLogger(__name__)

POLICY_SCOPES = ("settings", "site", "network")


def clamp_max_idle_seconds(value) -> int:
    """Values below the floor, or not integers at all, fall back to the default."""
    if isinstance(value, bool):
        return DEFAULT_MAX_IDLE_SECONDS
    try:
        seconds = int(value)
    except (TypeError, ValueError):
        return DEFAULT_MAX_IDLE_SECONDS
    if isinstance(value, float) and value != seconds:
        return DEFAULT_MAX_IDLE_SECONDS
    if seconds < MIN_IDLE_SECONDS:
        return DEFAULT_MAX_IDLE_SECONDS
    return seconds


@dataclass(frozen=True)
class IdlePolicy:
    max_idle_seconds: int = DEFAULT_MAX_IDLE_SECONDS
    idle_message: str = DEFAULT_IDLE_MESSAGE
    silent_logout: bool = False


def build_policy(max_idle_seconds=None, idle_message=None, silent_logout=False) -> IdlePolicy:
    return IdlePolicy(
        max_idle_seconds=clamp_max_idle_seconds(max_idle_seconds),
        idle_message=idle_message or DEFAULT_IDLE_MESSAGE,
        silent_logout=bool(silent_logout),
    )


class PolicyProvider:
    def get_policy(self) -> IdlePolicy:
        raise NotImplementedError


class SettingsPolicyProvider(PolicyProvider):
    """Policy straight from settings.IDLE_LOGOUT."""

    def get_policy(self) -> IdlePolicy:
        conf = get_config()
        return build_policy(conf["MAX_IDLE_SECONDS"], conf["IDLE_MESSAGE"], conf["SILENT_LOGOUT"])


class StoredPolicyProvider(PolicyProvider):
    """
    Policy edited through the admin, stored per scope.

    "site" is the single-tenant row, "network" the row shared by every tenant.
    Without a row the settings policy applies.
    """

    def __init__(self, scope: str = "site", fallback: PolicyProvider = None):
        self.scope = scope
        self.fallback = fallback or SettingsPolicyProvider()

    def get_policy(self) -> IdlePolicy:
        from .models import IdlePolicySetting

        try:
            row = IdlePolicySetting.objects.filter(scope=self.scope).first()
        except DatabaseError as e:
            raise StoreUnavailable(f"policy read failed for {self.scope} scope: {e}") from e
        if row is None:
            return self.fallback.get_policy()
        return build_policy(row.max_idle_seconds, row.idle_message, row.silent_logout)


def get_policy_provider() -> PolicyProvider:
    scope = (get_config()["POLICY_SCOPE"] or "settings").strip().lower()
    if scope not in POLICY_SCOPES:
        raise ImproperlyConfigured(f"Unknown IDLE_LOGOUT['POLICY_SCOPE']: {scope!r}")
    if scope == "settings":
        return SettingsPolicyProvider()
    log.debug("idle policy read from %s scope", scope)
    return StoredPolicyProvider(scope)
