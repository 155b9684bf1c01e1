"""Seed sample Lead rows for exploring the dashboard."""

from __future__ import annotations

import random
from datetime import timedelta

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from leads.models import Lead, LeadStatus

INDUSTRIES = ("Banking", "Education", "Healthcare", "Retail", "Technology")
PRODUCTS = ("Analytics", "CRM", "Support")


class Command(BaseCommand):
    """Create random leads spread over the last few years."""

    help = "Create sample leads (deterministic for a given --seed)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("--count", type=int, default=50, help="Number of leads to create (default: 50).")
        parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible data.")
        parser.add_argument("--clear", action="store_true", help="Delete existing leads first.")

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        count: int = options["count"]
        if count < 0:
            raise CommandError("--count must be zero or positive.")

        rng = random.Random(options["seed"])
        now = timezone.now()
        statuses = [choice.value for choice in LeadStatus]

        leads: list[Lead] = []
        for index in range(count):
            created_at = now - timedelta(days=rng.randint(0, 3 * 365))
            status = rng.choice(statuses)
            converted_at = None
            if status == LeadStatus.CLOSED:
                converted_at = min(now, created_at + timedelta(days=rng.randint(1, 120)))
            leads.append(
                Lead(
                    name=f"Lead {index + 1:03d}",
                    status=status,
                    industry=rng.choice(INDUSTRIES),
                    product_interest=rng.choice(PRODUCTS),
                    created_at=created_at,
                    converted_at=converted_at,
                )
            )

        with transaction.atomic():
            deleted = 0
            if options["clear"]:
                deleted, _ = Lead.objects.all().delete()
            Lead.objects.bulk_create(leads)

        self.stdout.write(f"created={len(leads)} deleted={deleted}")
        return None
