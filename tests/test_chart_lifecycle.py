"""Unit tests for chart handles and the per-slot lifecycle manager."""

from __future__ import annotations

import pytest

from analysis.dto import CombinedCategoryCount, LeadDuration, StatusCount, YearlyLeadCount
from core.charting.lifecycle import ChartLifecycleManager
from core.charting.palette import PIE_COLORS, TEAL_FILL
from core.charting.runtime import CanvasInUseError, Chart, ChartSurface

pytestmark = pytest.mark.unit

STATUS = (StatusCount(status="New", count=5), StatusCount(status="Closed", count=2))


def test_reinitializing_a_slot_destroys_the_previous_chart_first(full_surface: ChartSurface) -> None:
    """Two initializations leave one live handle; the first is destroyed before the second is built."""

    events: list[tuple[str, int]] = []

    class RecordingChart(Chart):
        """Chart that records construction and destruction order."""

        def __init__(self, canvas, config) -> None:  # type: ignore[no-untyped-def]
            events.append(("construct", id(self)))
            super().__init__(canvas, config)

        def destroy(self) -> None:
            events.append(("destroy", id(self)))
            super().destroy()

    manager = ChartLifecycleManager(full_surface, chart_factory=RecordingChart)

    first = manager.initialize_status_chart(STATUS)
    second = manager.initialize_status_chart(STATUS)

    assert first is not None and second is not None
    assert events == [("construct", id(first)), ("destroy", id(first)), ("construct", id(second))]
    assert first.destroyed
    assert manager.live_handles() == {"status": second}
    assert full_surface.query_selector(".status-chart").chart is second


def test_missing_canvas_is_a_silent_no_op() -> None:
    """Without a combined-chart canvas nothing is built and nothing raises."""

    manager = ChartLifecycleManager(ChartSurface(["status-chart"]))

    result = manager.initialize_combined_chart((CombinedCategoryCount(label="Retail - CRM", count=3),))

    assert result is None
    assert manager.handle("combined") is None


def test_chart_refuses_a_canvas_that_is_already_bound(full_surface: ChartSurface) -> None:
    """A canvas carries at most one live chart."""

    canvas = full_surface.query_selector(".status-chart")
    config = {"type": "bar", "data": {"labels": [], "datasets": []}, "options": {}}
    chart = Chart(canvas, config)

    with pytest.raises(CanvasInUseError):
        Chart(canvas, config)

    chart.destroy()
    chart.destroy()
    assert Chart(canvas, config).canvas is canvas


def test_unknown_chart_type_propagates(full_surface: ChartSurface) -> None:
    """Construction failures are not swallowed by the manager."""

    manager = ChartLifecycleManager(full_surface)

    with pytest.raises(ValueError):
        manager.replace(
            "status",
            lambda canvas: Chart(canvas, {"type": "radar", "data": {"labels": [], "datasets": []}, "options": {}}),
        )


def test_empty_yearly_rows_leave_the_slot_untouched(full_surface: ChartSurface) -> None:
    """An empty yearly collection does not build or release a chart."""

    manager = ChartLifecycleManager(full_surface)
    existing = manager.initialize_yearly_chart((YearlyLeadCount(year=2024, lead_count=1),))

    assert manager.initialize_yearly_chart(()) is None
    assert manager.handle("yearly") is existing
    assert not existing.destroyed


def test_release_all_destroys_every_live_chart(full_surface: ChartSurface) -> None:
    """Release-all empties every slot and frees every canvas."""

    manager = ChartLifecycleManager(full_surface)
    manager.initialize_status_chart(STATUS)
    manager.initialize_duration_chart((LeadDuration(lead_name="Acme", duration_in_days=4),))

    assert manager.release_all() == 2
    assert manager.live_handles() == {}
    assert all(canvas.chart is None for canvas in full_surface.canvases)


def test_chart_configs_match_each_slot(full_surface: ChartSurface) -> None:
    """Each slot gets its chart kind, labels, data and colors."""

    manager = ChartLifecycleManager(full_surface)
    status = manager.initialize_status_chart(STATUS)
    duration = manager.initialize_duration_chart((LeadDuration(lead_name="Acme", duration_in_days=4),))
    combined = manager.initialize_combined_chart(
        tuple(CombinedCategoryCount(label=f"Industry {i} - CRM", count=i) for i in range(14))
    )
    yearly = manager.initialize_yearly_chart((YearlyLeadCount(year=2023, lead_count=15),))

    assert status.config["type"] == "bar"
    assert status.config["data"]["labels"] == ["New", "Closed"]
    assert status.config["data"]["datasets"][0]["data"] == [5, 2]
    assert status.config["data"]["datasets"][0]["label"] == "Lead Status Counts"
    assert status.config["options"]["scales"]["y"]["beginAtZero"] is True

    assert duration.config["data"]["datasets"][0]["backgroundColor"] == TEAL_FILL

    assert combined.config["type"] == "pie"
    colors = combined.config["data"]["datasets"][0]["backgroundColor"]
    assert len(colors) == 14
    assert colors[12] == PIE_COLORS[0]
    assert combined.config["options"]["plugins"]["legend"] == {"display": False, "position": "bottom"}

    assert yearly.config["data"]["labels"] == [2023]
    assert yearly.config["options"]["maintainAspectRatio"] is False


def test_payload_is_a_detached_copy(full_surface: ChartSurface) -> None:
    """Mutating a payload does not change the live chart."""

    chart = ChartLifecycleManager(full_surface).initialize_status_chart(STATUS)
    payload = chart.to_payload()
    payload["data"]["labels"].append("Extra")

    assert chart.config["data"]["labels"] == ["New", "Closed"]
