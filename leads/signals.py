"""Signals that push aggregate changes to connected chart components.

Pushes are deferred until the writing transaction commits, so subscribers
never see aggregates from writes that are later rolled back.
"""

from __future__ import annotations

from django.db import transaction
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from leads.models import Lead
from leads.source import notify_lead_change


@receiver(post_save, sender=Lead)
def push_on_lead_saved(sender, instance: Lead, **kwargs) -> None:
    """Re-run aggregate queries once a Lead create or update commits."""

    if kwargs.get("raw", False):
        return
    transaction.on_commit(notify_lead_change)


@receiver(post_delete, sender=Lead)
def push_on_lead_deleted(sender, instance: Lead, **kwargs) -> None:
    """Re-run aggregate queries once a Lead delete commits."""

    transaction.on_commit(notify_lead_change)
