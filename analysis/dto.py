"""Row and DTO types shared by the aggregate queries and the chart component.

Raw rows are the shapes returned by the aggregate data source. DTOs are the
view-model records the tables and charts read. Neither carries any Django or
ORM dependency.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypedDict


class StatusRow(TypedDict):
    """Lead count for one status."""

    Status: str
    Count: int


class DurationRow(TypedDict):
    """Age of a single lead in days."""

    LeadName: str
    DurationInDays: int


class LeadDataResult(TypedDict):
    """Combined result of the status/duration query."""

    statusData: list[StatusRow]
    durationData: list[DurationRow]


class CombinedRow(TypedDict):
    """Lead count for one industry and product interest pair."""

    Industry: str
    ProductInterest: str
    Count: int


class YearlyRow(TypedDict):
    """Lead count for one creation year."""

    year: int
    leadCount: int


@dataclass(frozen=True, slots=True)
class StatusCount:
    """Lead count for one status.

    Attributes:
        status: Status label.
        count: Number of leads in that status.
    """

    status: str
    count: int


@dataclass(frozen=True, slots=True)
class LeadDuration:
    """Age of a lead.

    Attributes:
        lead_name: Display name of the lead.
        duration_in_days: Whole days from creation to conversion (or today).
    """

    lead_name: str
    duration_in_days: int


@dataclass(frozen=True, slots=True)
class CombinedCategoryCount:
    """Lead count for a composite industry/product label."""

    label: str
    count: int


@dataclass(frozen=True, slots=True)
class YearlyLeadCount:
    """Lead count for one year."""

    year: int
    lead_count: int


@dataclass(frozen=True, slots=True)
class TableColumn:
    """Column declaration for a tabular display.

    Attributes:
        label: Header text.
        field_name: Key read from each table row.
        type: Display type hint (`text` or `number`).
    """

    label: str
    field_name: str
    type: str
