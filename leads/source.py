"""Push-based aggregate data source.

A subscriber registers a callback for one named query. The callback receives
the current result immediately and again every time the underlying Lead rows
change. Results are delivered as `WireResult` values carrying either `data`
or `error`, never both.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Final
from weakref import WeakSet

from django.db import DatabaseError

from leads import queries

logger = logging.getLogger("leadcharts.source")

LEAD_DATA: Final[str] = "lead_data"
COMBINED_LEAD_DATA: Final[str] = "combined_lead_data"
LEAD_COUNT_BY_YEAR: Final[str] = "lead_count_by_year"

DEFAULT_QUERIES: Final[Mapping[str, Callable[[], Any]]] = {
    LEAD_DATA: queries.get_lead_data,
    COMBINED_LEAD_DATA: queries.get_combined_lead_data,
    LEAD_COUNT_BY_YEAR: queries.get_lead_count_by_year,
}


@dataclass(frozen=True, slots=True)
class WireResult:
    """One push from the data source."""

    data: Any = None
    error: Exception | None = None


WireCallback = Callable[[WireResult], None]


@dataclass(frozen=True, slots=True)
class Subscription:
    """Handle returned by `LeadAggregateSource.subscribe`."""

    query: str
    callback: WireCallback


_LIVE_SOURCES: WeakSet["LeadAggregateSource"] = WeakSet()


class LeadAggregateSource:
    """Run named aggregate queries and push their results to subscribers."""

    def __init__(self, query_functions: Mapping[str, Callable[[], Any]] | None = None) -> None:
        self._queries = dict(query_functions if query_functions is not None else DEFAULT_QUERIES)
        self._subscriptions: list[Subscription] = []
        self.owner_thread = threading.get_ident()
        _LIVE_SOURCES.add(self)

    def subscribe(self, query: str, callback: WireCallback) -> Subscription:
        """Register `callback` for `query` and deliver the current result.

        Raises:
            ValueError: When `query` is not a known query name.
        """

        if query not in self._queries:
            raise ValueError(f"Unknown aggregate query: {query!r}")
        subscription = Subscription(query=query, callback=callback)
        self._subscriptions.append(subscription)
        callback(self._run(query))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        """Stop pushing results to `subscription` (no-op when already removed)."""

        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    @property
    def subscriptions(self) -> tuple[Subscription, ...]:
        return tuple(self._subscriptions)

    def refresh(self) -> int:
        """Re-run every subscribed query once and push the results.

        Returns:
            Number of callbacks invoked.
        """

        delivered = 0
        results: dict[str, WireResult] = {}
        for subscription in list(self._subscriptions):
            if subscription.query not in results:
                results[subscription.query] = self._run(subscription.query)
            subscription.callback(results[subscription.query])
            delivered += 1
        return delivered

    def _run(self, query: str) -> WireResult:
        try:
            return WireResult(data=self._queries[query]())
        except DatabaseError as exc:
            logger.warning("aggregate query %s failed: %s", query, exc)
            return WireResult(error=exc)


def notify_lead_change() -> int:
    """Push fresh results to every connected source owned by the calling thread.

    Sources belong to the thread that created them; a write committed on
    another thread never runs their callbacks.

    Returns:
        Total number of callbacks invoked across sources.
    """

    current = threading.get_ident()
    return sum(
        source.refresh()
        for source in list(_LIVE_SOURCES)
        if source.owner_thread == current and source.subscriptions
    )
