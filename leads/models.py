"""Database models for lead records."""

from __future__ import annotations

from datetime import datetime

from django.db import models
from django.utils import timezone


class LeadStatus(models.TextChoices):
    """Pipeline statuses a lead moves through."""

    NEW = "New", "New"
    WORKING = "Working", "Working"
    NURTURING = "Nurturing", "Nurturing"
    QUALIFIED = "Qualified", "Qualified"
    CLOSED = "Closed", "Closed"


class Lead(models.Model):
    """A single sales lead.

    Charts never read individual leads; they consume the grouped rows returned
    by `leads.queries`.
    """

    name = models.CharField(max_length=255)
    status = models.CharField(max_length=32, choices=LeadStatus.choices, default=LeadStatus.NEW)
    industry = models.CharField(max_length=128, blank=True, default="")
    product_interest = models.CharField(max_length=128, blank=True, default="")
    created_at = models.DateTimeField(default=timezone.now, db_index=True)
    converted_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        verbose_name = "Lead"
        verbose_name_plural = "Leads"
        ordering = ("created_at", "id")

    def __str__(self) -> str:
        """Return a concise display string for admin/debug usage."""

        return f"Lead(name={self.name!r}, status={self.status})"

    def duration_in_days(self, *, now: datetime | None = None) -> int:
        """Return whole days between creation and conversion (or `now`)."""

        end = self.converted_at or now or timezone.now()
        return (end - self.created_at).days
