"""App configuration for the lead charts dashboard."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Dashboard views, templates and chart construction."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"
    verbose_name = "Lead charts"
