"""Pure analysis package for lead charts.

This package contains deterministic, testable transformations from aggregate
rows to view-model DTOs. It must not import Django or perform any database
I/O.
"""

from .mappers import map_combined_rows, map_duration_rows, map_status_rows, map_yearly_rows

__all__ = ["map_combined_rows", "map_duration_rows", "map_status_rows", "map_yearly_rows"]
