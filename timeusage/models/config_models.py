from __future__ import annotations

from dataclasses import dataclass

"""Config dataclass for the time usage pipeline.

Built by timeusage/config/loader.py after schema validation; every field here has
already been defaulted.
"""


@dataclass(frozen=True)
class TimeUsageConfig:
    """Root configuration object for one pipeline run."""
    source_path: str  # Summary CSV (atussum.csv)
    view_name: str = "summed"  # Name the SQL path registers the summary under
    show_debug: bool = False  # Print intermediate and final tables
    cross_check: bool = True  # Compare SQL / typed paths against the direct path
    output_path: str | None = None  # Optional CSV of the grouped table
