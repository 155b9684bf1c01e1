"""Django app configuration for Leads."""

from __future__ import annotations

from django.apps import AppConfig


class LeadsConfig(AppConfig):
    """AppConfig for lead records and aggregate queries."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "leads"

    def ready(self) -> None:
        """Register signal handlers that push aggregate changes."""

        from leads import signals  # noqa: F401
