"""Admin-editable shop configuration backed by django-constance."""

from __future__ import annotations

from constance import config
from django.conf import settings


class ConfigurationStore:
    """Key/value lookup over the constance settings declared in ``CONSTANCE_CONFIG``."""

    def get(self, key: str) -> str | None:
        """Return the stored value, or None for unknown keys and empty values."""
        if key not in settings.CONSTANCE_CONFIG:
            return None
        value = getattr(config, key)
        if value in (None, ""):
            return None
        return str(value)
