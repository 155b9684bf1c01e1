"""The lead charts component: data callbacks, render trigger and teardown.

The component receives pushes from three aggregate queries and owns one
chart slot per chart. A slot is (re)built once its data is present and the
charting runtime has loaded, whichever happens last:

- a data push while the runtime is loaded rebuilds the affected charts
  immediately;
- the runtime finishing its load builds every slot that already has data, in
  the order status, duration, combined, yearly.

The yearly slot is the exception: unless `LEAD_CHARTS_GATE_YEARLY_CHART` is
enabled it is built as soon as its data arrives, whatever the loader state.
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings

from analysis.dto import CombinedCategoryCount, LeadDuration, StatusCount, TableColumn, YearlyLeadCount
from analysis.mappers import (
    DURATION_COLUMNS,
    STATUS_COLUMNS,
    duration_table_rows,
    map_combined_rows,
    map_duration_rows,
    map_status_rows,
    map_yearly_rows,
    status_table_rows,
)
from leads.source import (
    COMBINED_LEAD_DATA,
    LEAD_COUNT_BY_YEAR,
    LEAD_DATA,
    LeadAggregateSource,
    Subscription,
    WireResult,
)

from .lifecycle import ChartFactory, ChartLifecycleManager
from .loader import ChartRuntimeLoader
from .runtime import Chart, ChartSurface

logger = logging.getLogger("leadcharts.component")


class LeadChartsComponent:
    """Status, duration, combined and yearly lead charts plus their tables."""

    def __init__(
        self,
        *,
        surface: ChartSurface,
        loader: ChartRuntimeLoader | None = None,
        gate_yearly: bool | None = None,
        chart_factory: ChartFactory = Chart,
    ) -> None:
        self.status_table: tuple[StatusCount, ...] = ()
        self.duration_table: tuple[LeadDuration, ...] = ()
        self.combined_data: tuple[CombinedCategoryCount, ...] = ()
        self.yearly_data: tuple[YearlyLeadCount, ...] = ()
        self.charts = ChartLifecycleManager(surface, chart_factory=chart_factory)
        self.loader = loader if loader is not None else ChartRuntimeLoader()
        self.gate_yearly = settings.LEAD_CHARTS_GATE_YEARLY_CHART if gate_yearly is None else gate_yearly
        self._subscriptions: list[tuple[LeadAggregateSource, Subscription]] = []
        self.torn_down = False

    @property
    def runtime_loaded(self) -> bool:
        return self.loader.loaded

    def connect(self, source: LeadAggregateSource) -> None:
        """Subscribe the three data callbacks to `source`."""

        for query, callback in (
            (LEAD_DATA, self.on_lead_data),
            (COMBINED_LEAD_DATA, self.on_combined_data),
            (LEAD_COUNT_BY_YEAR, self.on_yearly_data),
        ):
            self._subscriptions.append((source, source.subscribe(query, callback)))

    def on_lead_data(self, result: WireResult) -> None:
        """Handle a status/duration push.

        Empty `statusData` or `durationData` lists leave the previous table in
        place.
        """

        if self.torn_down:
            return
        if result.data is not None:
            status_rows = result.data.get("statusData") or []
            duration_rows = result.data.get("durationData") or []
            if status_rows:
                self.status_table = map_status_rows(status_rows)
            if duration_rows:
                self.duration_table = map_duration_rows(duration_rows)

            if self.runtime_loaded:
                self.initialize_charts()
        elif result.error is not None:
            logger.error("Error fetching lead data: %s", result.error, exc_info=result.error)

    def on_combined_data(self, result: WireResult) -> None:
        """Handle an industry/product push; the data is replaced wholesale."""

        if self.torn_down:
            return
        if result.data is not None:
            self.combined_data = map_combined_rows(result.data)
            if self.runtime_loaded:
                self.initialize_combined_chart()
        elif result.error is not None:
            logger.error("Error fetching combined lead data: %s", result.error, exc_info=result.error)

    def on_yearly_data(self, result: WireResult) -> None:
        """Handle a per-year push."""

        if self.torn_down:
            return
        if result.data is not None:
            self.yearly_data = map_yearly_rows(result.data)
            if self.runtime_loaded or not self.gate_yearly:
                self.initialize_yearly_chart()
        elif result.error is not None:
            logger.error("Error fetching yearly lead data: %s", result.error, exc_info=result.error)

    def rendered(self) -> None:
        """Load the runtime on first render and build every chart with data."""

        if self.torn_down or self.runtime_loaded:
            return
        if self.loader.load():
            self.initialize_charts()

    def initialize_charts(self) -> None:
        if self.status_table:
            self.initialize_status_chart()
        if self.duration_table:
            self.initialize_duration_chart()
        if self.combined_data:
            self.initialize_combined_chart()
        if self.yearly_data:
            self.initialize_yearly_chart()

    def initialize_status_chart(self) -> Chart | None:
        return self.charts.initialize_status_chart(self.status_table)

    def initialize_duration_chart(self) -> Chart | None:
        return self.charts.initialize_duration_chart(self.duration_table)

    def initialize_combined_chart(self) -> Chart | None:
        return self.charts.initialize_combined_chart(self.combined_data)

    def initialize_yearly_chart(self) -> Chart | None:
        return self.charts.initialize_yearly_chart(self.yearly_data)

    def teardown(self) -> None:
        """Unsubscribe from every source and release all chart handles."""

        if self.torn_down:
            return
        for source, subscription in self._subscriptions:
            source.unsubscribe(subscription)
        self._subscriptions.clear()
        released = self.charts.release_all()
        self.torn_down = True
        logger.debug("lead charts torn down (released=%d)", released)

    def payload(self) -> dict[str, Any]:
        """Return tables, runtime URL and live chart configs for the page."""

        return {
            "runtime": {"state": str(self.loader.state), "scriptUrl": self.loader.script_url},
            "statusColumns": [_column(column) for column in STATUS_COLUMNS],
            "statusRows": status_table_rows(self.status_table),
            "durationColumns": [_column(column) for column in DURATION_COLUMNS],
            "durationRows": duration_table_rows(self.duration_table),
            "charts": {slot: handle.to_payload() for slot, handle in self.charts.live_handles().items()},
        }


def _column(column: TableColumn) -> dict[str, str]:
    return {"label": column.label, "fieldName": column.field_name, "type": column.type}
