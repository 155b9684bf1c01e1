"""Admin registrations for Lead records."""

from __future__ import annotations

from django.contrib import admin

from leads.models import Lead


@admin.register(Lead)
class LeadAdmin(admin.ModelAdmin):
    """Admin configuration for Lead."""

    list_display = ("name", "status", "industry", "product_interest", "created_at", "converted_at")
    list_filter = ("status", "industry", "product_interest")
    search_fields = ("name",)
    date_hierarchy = "created_at"
