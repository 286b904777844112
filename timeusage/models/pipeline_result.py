from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

import pandas as pd

"""Pipeline result model.

Aggregated outputs and metrics of one run, consumed by the SUMMARY line
renderer and by the CLI table printer.
"""


@dataclass(frozen=True)
class PipelineResult:
    """Outputs and metrics of a single pipeline run."""
    rows_read: int  # Respondents in the source file
    rows_kept: int  # Respondents left after the labor force filter
    groups: int  # Distinct (working, sex, age) triples
    primary_columns: int  # Columns classified as primary needs
    work_columns: int  # Columns classified as work
    other_columns: int  # Columns classified as other
    start_time: datetime
    end_time: datetime
    elapsed_seconds: float
    summary: pd.DataFrame = field(repr=False, compare=False)  # Per-respondent projection
    grouped: pd.DataFrame = field(repr=False, compare=False)  # Per-group averages
