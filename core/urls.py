"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.lead_charts, name="lead_charts"),
    path("api/charts/", views.lead_charts_api, name="lead_charts_api"),
]
