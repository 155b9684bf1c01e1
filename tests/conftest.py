"""Pytest fixtures shared across the lead charts test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import UTC, datetime

import pytest

from core.charting.runtime import ChartSurface

ALL_CANVASES = ("status-chart", "duration-chart", "combined-chart", "yearly-chart")


@pytest.fixture
def full_surface() -> ChartSurface:
    """Return a surface rendering all four chart canvases."""

    return ChartSurface(ALL_CANVASES)


@pytest.fixture
def make_lead(db) -> Callable[..., object]:
    """Return a factory that creates Lead rows with sensible defaults."""

    from leads.models import Lead

    def _make_lead(**overrides: object) -> Lead:
        values: dict[str, object] = {
            "name": "Acme",
            "status": "New",
            "industry": "Retail",
            "product_interest": "CRM",
            "created_at": datetime(2024, 6, 1, tzinfo=UTC),
        }
        values.update(overrides)
        return Lead.objects.create(**values)

    return _make_lead


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no database access.
    - `integration`: tests touching Django, database, views, commands, or IO.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
