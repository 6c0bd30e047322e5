# idle_logout/stores.py
from django.core.cache import caches
from django.core.exceptions import ImproperlyConfigured
from django.db import DatabaseError

from .conf import get_config


class StoreUnavailable(Exception):
    pass


class ActivityStore:
    """Minimal key-value contract the tracker needs: get / set / delete."""

    def get(self, key):
        raise NotImplementedError

    def set(self, key, value):
        raise NotImplementedError

    def delete(self, key):
        raise NotImplementedError


class CacheActivityStore(ActivityStore):
    """
    Records in a Django cache alias.

    The backend must not evict: a culled record reads as missing and would
    open a fresh idle window for a user who should have expired.
    """

    def __init__(self, alias: str = "default"):
        self.alias = alias

    @property
    def cache(self):
        return caches[self.alias]

    def get(self, key):
        try:
            return self.cache.get(key)
        except Exception as e:  # backend specific (redis, memcached, ...)
            raise StoreUnavailable(f"cache read failed for {key}: {e}") from e

    def set(self, key, value):
        try:
            # records live until logout, never expire on their own
            self.cache.set(key, value, timeout=None)
        except Exception as e:
            raise StoreUnavailable(f"cache write failed for {key}: {e}") from e

    def delete(self, key):
        try:
            self.cache.delete(key)
        except Exception as e:
            raise StoreUnavailable(f"cache delete failed for {key}: {e}") from e


class ModelActivityStore(ActivityStore):
    def get(self, key):
        from .models import ActivityRecord

        try:
            row = ActivityRecord.objects.filter(key=key).values_list("value", flat=True).first()
        except DatabaseError as e:
            raise StoreUnavailable(f"database read failed for {key}: {e}") from e
        return row

    def set(self, key, value):
        from .models import ActivityRecord

        try:
            ActivityRecord.objects.update_or_create(key=key, defaults={"value": str(value)})
        except DatabaseError as e:
            raise StoreUnavailable(f"database write failed for {key}: {e}") from e

    def delete(self, key):
        from .models import ActivityRecord

        try:
            ActivityRecord.objects.filter(key=key).delete()
        except DatabaseError as e:
            raise StoreUnavailable(f"database delete failed for {key}: {e}") from e


def get_activity_store() -> ActivityStore:
    conf = get_config()
    kind = (conf["STORE"] or "model").strip().lower()
    if kind == "cache":
        return CacheActivityStore(conf["CACHE_ALIAS"])
    if kind != "model":
        raise ImproperlyConfigured(f"Unknown IDLE_LOGOUT['STORE']: {conf['STORE']!r}")
    return ModelActivityStore()
