"""Views for the lead charts dashboard."""

from __future__ import annotations

from typing import Any

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render

from core.charting.component import LeadChartsComponent
from core.charting.lifecycle import CANVAS_SELECTORS, SLOTS
from core.charting.runtime import ChartSurface
from leads.source import LeadAggregateSource


def _requested_slots(request: HttpRequest) -> tuple[str, ...]:
    """Return the slots whose canvases the page renders.

    `?canvases=status,combined` limits the page to those canvases; unknown
    names are ignored and an absent parameter renders all four.
    """

    raw = (request.GET.get("canvases") or "").strip()
    if not raw:
        return SLOTS
    wanted = {part.strip() for part in raw.split(",") if part.strip()}
    return tuple(slot for slot in SLOTS if slot in wanted)


def _render_payload(slots: tuple[str, ...]) -> dict[str, Any]:
    """Drive one component through connect, first render and teardown."""

    surface = ChartSurface(CANVAS_SELECTORS[slot].removeprefix(".") for slot in slots)
    component = LeadChartsComponent(surface=surface)
    try:
        component.connect(LeadAggregateSource())
        component.rendered()
        return component.payload()
    finally:
        component.teardown()


def _table_cells(columns: list[dict[str, str]], rows: list[dict[str, object]]) -> list[list[object]]:
    """Return each row as its cell values, in declared column order."""

    return [[row[column["fieldName"]] for column in columns] for row in rows]


def lead_charts(request: HttpRequest) -> HttpResponse:
    """Render the lead charts dashboard."""

    slots = _requested_slots(request)
    payload = _render_payload(slots)
    context = {
        "canvas_slots": slots,
        "script_url": payload["runtime"]["scriptUrl"],
        "runtime_state": payload["runtime"]["state"],
        "status_columns": payload["statusColumns"],
        "status_rows": payload["statusRows"],
        "duration_columns": payload["durationColumns"],
        "duration_rows": payload["durationRows"],
        "status_cells": _table_cells(payload["statusColumns"], payload["statusRows"]),
        "duration_cells": _table_cells(payload["durationColumns"], payload["durationRows"]),
        "chart_configs": payload["charts"],
    }
    return render(request, "core/lead_charts.html", context)


def lead_charts_api(request: HttpRequest) -> JsonResponse:
    """Return the dashboard payload as JSON."""

    return JsonResponse(_render_payload(_requested_slots(request)))
