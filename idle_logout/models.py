# idle_logout/models.py
from django.db import models

from .conf import DEFAULT_IDLE_MESSAGE, DEFAULT_MAX_IDLE_SECONDS


class ActivityRecord(models.Model):
    """Plain key/value row used by ModelActivityStore."""

    key = models.CharField(max_length=255, unique=True)
    value = models.CharField(max_length=32, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-updated_at"]

    def __str__(self):
        return f"{self.key} = {self.value or '∅'}"


class IdlePolicySetting(models.Model):
    SCOPE_CHOICES = [
        ('site', 'This site'),
        ('network', 'Whole network (shared)'),
    ]

    scope = models.CharField(max_length=16, choices=SCOPE_CHOICES, unique=True, default='site')
    max_idle_seconds = models.PositiveIntegerField(default=DEFAULT_MAX_IDLE_SECONDS)
    idle_message = models.TextField(default=DEFAULT_IDLE_MESSAGE)
    silent_logout = models.BooleanField(default=False)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Idle logout policy"
        verbose_name_plural = "Idle logout policies"

    def save(self, *args, **kwargs):
        from .policy import clamp_max_idle_seconds
        self.max_idle_seconds = clamp_max_idle_seconds(self.max_idle_seconds)
        super().save(*args, **kwargs)

    def __str__(self):
        return f"{self.get_scope_display()} • {self.max_idle_seconds}s"
