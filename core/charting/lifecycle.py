"""Ownership of the four lead chart handles.

Every slot maps to at most one live `Chart`. `replace()` destroys the slot's
previous handle before the builder runs, so re-initializing a slot never
stacks charts on the same canvas.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Final, Literal

from analysis.dto import CombinedCategoryCount, LeadDuration, StatusCount, YearlyLeadCount

from .configs import combined_chart_config, duration_chart_config, status_chart_config, yearly_chart_config
from .runtime import Canvas, Chart, ChartJsConfig, ChartSurface

logger = logging.getLogger("leadcharts.lifecycle")

ChartSlot = Literal["status", "duration", "combined", "yearly"]

SLOTS: Final[tuple[ChartSlot, ...]] = ("status", "duration", "combined", "yearly")

CANVAS_SELECTORS: Final[dict[ChartSlot, str]] = {
    "status": ".status-chart",
    "duration": ".duration-chart",
    "combined": ".combined-chart",
    "yearly": ".yearly-chart",
}

ChartFactory = Callable[[Canvas, ChartJsConfig], Chart]
ChartBuilder = Callable[[Canvas], Chart]


class ChartLifecycleManager:
    """Create, replace and release the chart handle for each slot."""

    def __init__(self, surface: ChartSurface, *, chart_factory: ChartFactory = Chart) -> None:
        self.surface = surface
        self._chart_factory = chart_factory
        self._handles: dict[ChartSlot, Chart | None] = dict.fromkeys(SLOTS)

    def handle(self, slot: ChartSlot) -> Chart | None:
        """Return the live handle for `slot`, if any."""

        return self._handles[slot]

    def live_handles(self) -> dict[ChartSlot, Chart]:
        """Return live handles keyed by slot, in slot order."""

        return {slot: handle for slot, handle in self._handles.items() if handle is not None}

    def replace(self, slot: ChartSlot, builder: ChartBuilder) -> Chart | None:
        """Release the slot's current chart and build a new one on its canvas.

        Args:
            slot: Slot to (re)build.
            builder: Called with the slot's canvas; returns the new handle.

        Returns:
            The new handle, or None when the view does not render the slot's canvas.
        """

        canvas = self.surface.query_selector(CANVAS_SELECTORS[slot])
        if canvas is None:
            logger.debug("no canvas for %s chart; skipping", slot)
            return None

        self.release(slot)
        handle = builder(canvas)
        self._handles[slot] = handle
        return handle

    def release(self, slot: ChartSlot) -> bool:
        """Destroy the slot's chart; return True when a handle was released."""

        handle = self._handles[slot]
        if handle is None:
            return False
        handle.destroy()
        self._handles[slot] = None
        return True

    def release_all(self) -> int:
        """Destroy every live chart; return how many were released."""

        return sum(1 for slot in SLOTS if self.release(slot))

    def _build(self, config: ChartJsConfig) -> ChartBuilder:
        return lambda canvas: self._chart_factory(canvas, config)

    def initialize_status_chart(self, rows: Sequence[StatusCount]) -> Chart | None:
        return self.replace("status", self._build(status_chart_config(rows)))

    def initialize_duration_chart(self, rows: Sequence[LeadDuration]) -> Chart | None:
        return self.replace("duration", self._build(duration_chart_config(rows)))

    def initialize_combined_chart(self, rows: Sequence[CombinedCategoryCount]) -> Chart | None:
        return self.replace("combined", self._build(combined_chart_config(rows)))

    def initialize_yearly_chart(self, rows: Sequence[YearlyLeadCount]) -> Chart | None:
        """Build the yearly chart; an empty collection leaves the slot untouched."""

        if not rows:
            return None
        return self.replace("yearly", self._build(yearly_chart_config(rows)))
