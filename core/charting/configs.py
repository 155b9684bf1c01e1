"""Chart.js config builders for the four lead chart slots."""

from __future__ import annotations

from collections.abc import Sequence

from analysis.dto import CombinedCategoryCount, LeadDuration, StatusCount, YearlyLeadCount

from .palette import PIE_BORDER, TEAL_BORDER, TEAL_FILL, bar_palette, color_palette
from .runtime import ChartJsConfig


def _bar_options() -> dict[str, object]:
    return {"responsive": True, "scales": {"y": {"beginAtZero": True}}}


def status_chart_config(rows: Sequence[StatusCount]) -> ChartJsConfig:
    """Bar chart of lead counts per status."""

    colors = bar_palette(len(rows))
    return {
        "type": "bar",
        "data": {
            "labels": [row.status for row in rows],
            "datasets": [
                {
                    "label": "Lead Status Counts",
                    "data": [row.count for row in rows],
                    "backgroundColor": colors,
                    "borderColor": list(colors),
                    "borderWidth": 1,
                }
            ],
        },
        "options": _bar_options(),
    }


def duration_chart_config(rows: Sequence[LeadDuration]) -> ChartJsConfig:
    """Bar chart of each lead's age in days."""

    return {
        "type": "bar",
        "data": {
            "labels": [row.lead_name for row in rows],
            "datasets": [
                {
                    "label": "Duration (Days)",
                    "data": [row.duration_in_days for row in rows],
                    "backgroundColor": TEAL_FILL,
                    "borderColor": TEAL_BORDER,
                    "borderWidth": 1,
                }
            ],
        },
        "options": _bar_options(),
    }


def combined_chart_config(rows: Sequence[CombinedCategoryCount]) -> ChartJsConfig:
    """Pie chart of lead counts per industry/product label.

    The legend is hidden; the page attaches a `"{label}: {value}"` tooltip
    formatter because callbacks cannot travel through JSON.
    """

    return {
        "type": "pie",
        "data": {
            "labels": [row.label for row in rows],
            "datasets": [
                {
                    "data": [row.count for row in rows],
                    "backgroundColor": color_palette(len(rows)),
                    "borderColor": PIE_BORDER,
                    "borderWidth": 1,
                }
            ],
        },
        "options": {
            "responsive": True,
            "plugins": {"legend": {"display": False, "position": "bottom"}},
        },
    }


def yearly_chart_config(rows: Sequence[YearlyLeadCount]) -> ChartJsConfig:
    """Bar chart of lead counts per creation year."""

    return {
        "type": "bar",
        "data": {
            "labels": [row.year for row in rows],
            "datasets": [
                {
                    "label": "Yearly Lead Count",
                    "data": [row.lead_count for row in rows],
                    "backgroundColor": TEAL_FILL,
                    "borderColor": TEAL_BORDER,
                    "borderWidth": 1,
                }
            ],
        },
        "options": {"responsive": True, "maintainAspectRatio": False},
    }
