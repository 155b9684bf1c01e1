"""Create the Lead table."""

from __future__ import annotations

import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):
    """Initial schema for lead records."""

    initial = True

    dependencies: list[tuple[str, str]] = []

    operations = [
        migrations.CreateModel(
            name="Lead",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("New", "New"),
                            ("Working", "Working"),
                            ("Nurturing", "Nurturing"),
                            ("Qualified", "Qualified"),
                            ("Closed", "Closed"),
                        ],
                        default="New",
                        max_length=32,
                    ),
                ),
                ("industry", models.CharField(blank=True, default="", max_length=128)),
                ("product_interest", models.CharField(blank=True, default="", max_length=128)),
                ("created_at", models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ("converted_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "verbose_name": "Lead",
                "verbose_name_plural": "Leads",
                "ordering": ("created_at", "id"),
            },
        ),
    ]
