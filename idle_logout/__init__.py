"""Sign out users who stay idle longer than the configured window."""

__version__ = "1.0.0"
