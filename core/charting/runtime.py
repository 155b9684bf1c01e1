"""Server-side model of Chart.js chart handles and the canvases they bind to.

A `Chart` is constructed against a `Canvas` and owns it until `destroy()` is
called. Constructing a second chart on a canvas that still carries a live
chart raises `CanvasInUseError`, mirroring Chart.js itself.
"""

from __future__ import annotations

import copy
from collections.abc import Iterable
from typing import Final, Literal, TypedDict

ChartType = Literal["bar", "pie"]

SUPPORTED_CHART_TYPES: Final[frozenset[str]] = frozenset({"bar", "pie"})


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload."""

    label: str
    data: list[object]
    backgroundColor: str | list[str]
    borderColor: str | list[str]
    borderWidth: int


class ChartData(TypedDict):
    """Chart.js labels + datasets."""

    labels: list[object]
    datasets: list[ChartDataset]


class ChartJsConfig(TypedDict):
    """The full config object passed to `new Chart(canvas, config)`."""

    type: ChartType
    data: ChartData
    options: dict[str, object]


class CanvasInUseError(RuntimeError):
    """Raised when a chart is constructed on a canvas that is already bound."""


class Canvas:
    """A canvas mount point rendered by the current view."""

    def __init__(self, class_name: str) -> None:
        self.class_name = class_name
        self.chart: Chart | None = None

    def __repr__(self) -> str:
        return f"Canvas({self.class_name!r})"


class ChartSurface:
    """The set of canvases the current view renders, looked up by selector."""

    def __init__(self, class_names: Iterable[str]) -> None:
        self._canvases: dict[str, Canvas] = {}
        for name in class_names:
            self._canvases.setdefault(name, Canvas(name))

    @property
    def canvases(self) -> tuple[Canvas, ...]:
        return tuple(self._canvases.values())

    def query_selector(self, selector: str) -> Canvas | None:
        """Return the canvas for a `.class-name` selector, or None when not rendered."""

        return self._canvases.get(selector.removeprefix("."))


class Chart:
    """A live chart bound to one canvas."""

    def __init__(self, canvas: Canvas, config: ChartJsConfig) -> None:
        if config["type"] not in SUPPORTED_CHART_TYPES:
            raise ValueError(f"Unsupported chart type: {config['type']!r}")
        if canvas.chart is not None:
            raise CanvasInUseError(f"Canvas {canvas.class_name!r} is already in use by another chart.")
        self.canvas = canvas
        self.config: ChartJsConfig = copy.deepcopy(config)
        self.destroyed = False
        canvas.chart = self

    def destroy(self) -> None:
        """Release the canvas. Destroying twice is a no-op."""

        if self.destroyed:
            return
        if self.canvas.chart is self:
            self.canvas.chart = None
        self.destroyed = True

    def to_payload(self) -> ChartJsConfig:
        """Return a copy of the config suitable for JSON serialization."""

        return copy.deepcopy(self.config)
