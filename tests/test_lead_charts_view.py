"""Django integration tests for the lead charts views."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest
from django.core.management import call_command

from leads.models import Lead

pytestmark = pytest.mark.integration


@pytest.fixture
def seeded_leads(make_lead) -> None:
    """Create leads covering every chart slot."""

    make_lead(name="Acme", status="New", created_at=datetime(2022, 3, 1, tzinfo=UTC))
    make_lead(
        name="Globex",
        status="Closed",
        industry="Banking",
        product_interest="Analytics",
        created_at=datetime(2023, 3, 1, tzinfo=UTC),
        converted_at=datetime(2023, 3, 15, tzinfo=UTC),
    )


@pytest.mark.django_db
def test_dashboard_renders_all_charts(client, seeded_leads) -> None:
    """The dashboard renders tables, canvases and four chart configs."""

    response = client.get("/")

    assert response.status_code == 200
    assert set(response.context["chart_configs"]) == {"status", "duration", "combined", "yearly"}
    assert response.context["status_rows"] == [{"status": "Closed", "count": 1}, {"status": "New", "count": 1}]
    content = response.content.decode("utf-8")
    assert 'class="combined-chart"' in content
    assert "chart.umd.min.js" in content
    assert 'id="lead-chart-configs"' in content


@pytest.mark.django_db
def test_dashboard_renders_with_no_leads(client) -> None:
    """An empty database renders empty tables and no charts."""

    response = client.get("/")

    assert response.status_code == 200
    assert response.context["chart_configs"] == {}
    assert response.context["status_rows"] == []


@pytest.mark.django_db
def test_missing_canvases_are_tolerated(client, seeded_leads) -> None:
    """Only the requested canvases are rendered and charted."""

    response = client.get("/", {"canvases": "status,combined,bogus"})

    assert response.status_code == 200
    assert response.context["canvas_slots"] == ("status", "combined")
    assert set(response.context["chart_configs"]) == {"status", "combined"}
    assert 'class="yearly-chart"' not in response.content.decode("utf-8")


@pytest.mark.django_db
def test_failed_runtime_renders_tables_without_charts(client, seeded_leads, settings) -> None:
    """A missing runtime asset leaves the ungated charts out and reports the failure."""

    settings.LEAD_CHARTS_CHART_JS_URL = "vendor/missing-chart.js"
    settings.LEAD_CHARTS_GATE_YEARLY_CHART = True

    response = client.get("/")

    assert response.status_code == 200
    assert response.context["runtime_state"] == "failed"
    assert response.context["chart_configs"] == {}
    assert len(response.context["duration_rows"]) == 2
    assert "Charts are unavailable." in response.content.decode("utf-8")


@pytest.mark.django_db
def test_api_returns_the_payload(client, seeded_leads) -> None:
    """The JSON endpoint mirrors the dashboard payload."""

    response = client.get("/api/charts/")

    assert response.status_code == 200
    payload = response.json()
    assert payload["runtime"]["state"] == "loaded"
    assert payload["charts"]["yearly"]["data"]["labels"] == [2022, 2023]
    assert payload["charts"]["combined"]["data"]["labels"] == ["Banking - Analytics", "Retail - CRM"]
    assert payload["durationColumns"][1]["label"] == "Duration (Days)"


@pytest.mark.django_db
def test_seed_leads_command_is_deterministic() -> None:
    """Seeding with a fixed seed creates the requested number of leads."""

    call_command("seed_leads", "--count", "12", "--seed", "7")
    first = list(Lead.objects.values_list("status", "industry", "product_interest"))

    call_command("seed_leads", "--count", "12", "--seed", "7", "--clear")
    second = list(Lead.objects.values_list("status", "industry", "product_interest"))

    assert len(first) == 12
    assert first == second


@pytest.mark.django_db
def test_table_cells_follow_declared_columns(client, seeded_leads) -> None:
    """Table body cells come from the declared columns, in column order."""

    response = client.get("/")

    assert response.context["status_cells"] == [["Closed", 1], ["New", 1]]
    assert response.context["duration_cells"][1] == ["Globex", 14]
    assert "<td>Globex</td><td>14</td>" in response.content.decode("utf-8")
