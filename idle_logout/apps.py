# idle_logout/apps.py
from django.apps import AppConfig


class IdleLogoutConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "idle_logout"
    verbose_name = "Idle logout"

    def ready(self):
        from . import signals  # noqa: F401
        from .policy import get_policy_provider
        from .stores import get_activity_store

        # fail at startup, not on the first authenticated request
        get_policy_provider()
        get_activity_store()
