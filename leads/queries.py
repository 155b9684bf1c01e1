"""Aggregate queries over Lead records.

Each query returns plain rows keyed the way the chart component consumes
them, so the same rows can come from this module or any other aggregate
backend.
"""

from __future__ import annotations

from datetime import datetime

from django.db.models import Count
from django.db.models.functions import ExtractYear
from django.utils import timezone

from analysis.dto import CombinedRow, DurationRow, LeadDataResult, StatusRow, YearlyRow
from leads.models import Lead


def get_lead_data(*, now: datetime | None = None) -> LeadDataResult:
    """Return status counts and per-lead durations (Query A).

    Args:
        now: End point used for leads that have not converted yet.

    Returns:
        Mapping with `statusData` and `durationData` row lists.
    """

    now = now or timezone.now()
    status_rows: list[StatusRow] = [
        {"Status": row["status"], "Count": row["total"]}
        for row in Lead.objects.values("status").annotate(total=Count("id")).order_by("status")
    ]
    duration_rows: list[DurationRow] = [
        {"LeadName": lead.name, "DurationInDays": lead.duration_in_days(now=now)}
        for lead in Lead.objects.only("name", "created_at", "converted_at").order_by("created_at", "id")
    ]
    return {"statusData": status_rows, "durationData": duration_rows}


def get_combined_lead_data() -> list[CombinedRow]:
    """Return lead counts grouped by industry and product interest (Query B)."""

    grouped = (
        Lead.objects.values("industry", "product_interest")
        .annotate(total=Count("id"))
        .order_by("industry", "product_interest")
    )
    return [
        {"Industry": row["industry"], "ProductInterest": row["product_interest"], "Count": row["total"]}
        for row in grouped
    ]


def get_lead_count_by_year() -> list[YearlyRow]:
    """Return lead counts grouped by creation year, ascending (Query C)."""

    grouped = (
        Lead.objects.annotate(year=ExtractYear("created_at"))
        .values("year")
        .annotate(total=Count("id"))
        .order_by("year")
    )
    return [{"year": row["year"], "leadCount": row["total"]} for row in grouped]
