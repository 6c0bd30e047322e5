# idle_logout/tracker.py
import enum
import logging

from .policy import PolicyProvider
from .stores import ActivityStore

log = logging.getLogger(__name__)


class Outcome(enum.Enum):
    NO_RECORD = "no_record"
    FRESH = "fresh"
    EXPIRED = "expired"


def parse_timestamp(raw):
    """Stored value -> non-negative int, or None when absent/malformed."""
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw if raw >= 0 else None
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("ascii")
        except UnicodeDecodeError:
            return None
    if isinstance(raw, str):
        s = raw.strip()
        return int(s) if s.isascii() and s.isdigit() else None
    return None


class ActivityTracker:
    def __init__(self, store: ActivityStore, policy_provider: PolicyProvider, namespace: str = "idle_logout"):
        self.store = store
        self.policy_provider = policy_provider
        self.namespace = namespace

    def key_for(self, principal_id) -> str:
        return f"{self.namespace}.{principal_id}.last_active_time"

    def peek(self, principal_id):
        return parse_timestamp(self.store.get(self.key_for(principal_id)))

    def evaluate(self, principal_id, now: int, refresh: bool = True) -> Outcome:
        """
        Classify the principal's idle state at `now`.

        Only the FRESH branch writes, and only when `refresh` is set.
        EXPIRED leaves the record alone so the caller decides when to clear it.
        """
        key = self.key_for(principal_id)
        raw = self.store.get(key)
        last_active = parse_timestamp(raw)
        if last_active is None:
            if raw is not None:
                log.debug("malformed activity record %s=%r", key, raw)
            return Outcome.NO_RECORD

        max_idle = self.policy_provider.get_policy().max_idle_seconds
        if last_active + max_idle < now:
            return Outcome.EXPIRED

        # never move the timestamp backwards
        if refresh and now > last_active:
            self.store.set(key, int(now))
        return Outcome.FRESH

    def touch(self, principal_id, now: int):
        self.store.set(self.key_for(principal_id), int(now))

    def clear(self, principal_id):
        self.store.delete(self.key_for(principal_id))

    def seconds_remaining(self, principal_id, now: int):
        last_active = self.peek(principal_id)
        if last_active is None:
            return None
        max_idle = self.policy_provider.get_policy().max_idle_seconds
        return max(0, last_active + max_idle - int(now))
