"""One-shot loader for the Chart.js runtime asset.

The loader moves through NOT_STARTED -> LOADING -> LOADED or FAILED exactly
once. FAILED is terminal: later `load()` calls return False without retrying.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum

from django.conf import settings
from django.contrib.staticfiles import finders
from django.templatetags.static import static

logger = logging.getLogger("leadcharts.loader")


class LoaderState(StrEnum):
    """Lifecycle of the charting runtime load."""

    not_started = "not_started"
    loading = "loading"
    loaded = "loaded"
    failed = "failed"


class ScriptLoadError(RuntimeError):
    """Raised when the charting runtime asset cannot be resolved."""


def resolve_chart_js(location: str) -> str:
    """Resolve the Chart.js asset to a URL the page can load.

    Args:
        location: Absolute URL, protocol-relative URL, or staticfiles path.

    Returns:
        The URL to place in the page's script tag.

    Raises:
        ScriptLoadError: When the location is empty or the static asset is missing.
    """

    location = (location or "").strip()
    if not location:
        raise ScriptLoadError("No charting runtime location is configured.")
    if location.startswith(("https://", "http://", "//")):
        return location
    if finders.find(location) is None:
        raise ScriptLoadError(f"Static asset not found: {location!r}")
    return static(location)


class ChartRuntimeLoader:
    """Load the charting runtime at most once."""

    def __init__(
        self,
        *,
        location: str | None = None,
        resolver: Callable[[str], str] = resolve_chart_js,
    ) -> None:
        self.location = settings.LEAD_CHARTS_CHART_JS_URL if location is None else location
        self._resolver = resolver
        self.state = LoaderState.not_started
        self.script_url: str | None = None
        self.error: ScriptLoadError | None = None

    @property
    def loaded(self) -> bool:
        return self.state is LoaderState.loaded

    def load(self) -> bool:
        """Attempt the load once; return True when the runtime is available."""

        if self.state is not LoaderState.not_started:
            logger.debug("charting runtime load suppressed (state=%s)", self.state)
            return self.loaded

        self.state = LoaderState.loading
        try:
            self.script_url = self._resolver(self.location)
        except ScriptLoadError as exc:
            self.state = LoaderState.failed
            self.error = exc
            logger.error("Error loading charting runtime from %s: %s", self.location, exc, exc_info=exc)
            return False
        except Exception:
            self.state = LoaderState.failed
            raise

        self.state = LoaderState.loaded
        logger.debug("charting runtime loaded from %s", self.script_url)
        return True
