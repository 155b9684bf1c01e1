"""View-model mappers from aggregate rows to DTOs.

Mappers preserve order and length and never invent fallback rows. Values are
passed through as received: negative or non-numeric counts are not rejected
or clamped here.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from .dto import (
    CombinedCategoryCount,
    CombinedRow,
    DurationRow,
    LeadDuration,
    StatusCount,
    StatusRow,
    TableColumn,
    YearlyLeadCount,
    YearlyRow,
)

COMBINED_LABEL_SEPARATOR: Final[str] = " - "

STATUS_COLUMNS: Final[tuple[TableColumn, ...]] = (
    TableColumn(label="Lead Status", field_name="status", type="text"),
    TableColumn(label="Count", field_name="count", type="number"),
)

DURATION_COLUMNS: Final[tuple[TableColumn, ...]] = (
    TableColumn(label="Lead Name", field_name="leadName", type="text"),
    TableColumn(label="Duration (Days)", field_name="durationInDays", type="number"),
)


def map_status_rows(rows: Iterable[StatusRow]) -> tuple[StatusCount, ...]:
    """Map `{Status, Count}` rows to StatusCount DTOs."""

    return tuple(StatusCount(status=row["Status"], count=row["Count"]) for row in rows)


def map_duration_rows(rows: Iterable[DurationRow]) -> tuple[LeadDuration, ...]:
    """Map `{LeadName, DurationInDays}` rows to LeadDuration DTOs."""

    return tuple(
        LeadDuration(lead_name=row["LeadName"], duration_in_days=row["DurationInDays"]) for row in rows
    )


def combined_label(industry: str, product_interest: str) -> str:
    """Return the composite label for an industry/product pair."""

    return f"{industry}{COMBINED_LABEL_SEPARATOR}{product_interest}"


def map_combined_rows(rows: Iterable[CombinedRow]) -> tuple[CombinedCategoryCount, ...]:
    """Map `{Industry, ProductInterest, Count}` rows to labelled counts.

    Args:
        rows: Grouped rows from the combined-category query.

    Returns:
        One CombinedCategoryCount per row, labelled `"{Industry} - {ProductInterest}"`.
    """

    return tuple(
        CombinedCategoryCount(label=combined_label(row["Industry"], row["ProductInterest"]), count=row["Count"])
        for row in rows
    )


def map_yearly_rows(rows: Iterable[YearlyRow]) -> tuple[YearlyLeadCount, ...]:
    """Map `{year, leadCount}` rows to YearlyLeadCount DTOs."""

    return tuple(YearlyLeadCount(year=row["year"], lead_count=row["leadCount"]) for row in rows)


def status_table_rows(items: Iterable[StatusCount]) -> list[dict[str, object]]:
    """Return table rows keyed by the STATUS_COLUMNS field names."""

    return [{"status": item.status, "count": item.count} for item in items]


def duration_table_rows(items: Iterable[LeadDuration]) -> list[dict[str, object]]:
    """Return table rows keyed by the DURATION_COLUMNS field names."""

    return [{"leadName": item.lead_name, "durationInDays": item.duration_in_days} for item in items]
