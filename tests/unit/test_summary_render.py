from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pandas as pd

from timeusage.models.pipeline_result import PipelineResult
from timeusage.services.summary import render_summary_line


def _result(elapsed: float, **overrides) -> PipelineResult:
    start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
    values = dict(
        rows_read=10,
        rows_kept=8,
        groups=3,
        primary_columns=5,
        work_columns=2,
        other_columns=9,
        start_time=start,
        end_time=start + timedelta(seconds=elapsed),
        elapsed_seconds=elapsed,
        summary=pd.DataFrame(),
        grouped=pd.DataFrame(),
    )
    values.update(overrides)
    return PipelineResult(**values)


def test_render_summary_line_integer_seconds():
    assert render_summary_line(_result(2.0)) == (
        "SUMMARY rows=10/8 groups=3 columns=5/2/9 elapsed_sec=2"
    )


def test_render_summary_line_zero_elapsed():
    assert render_summary_line(_result(0.0)).endswith("elapsed_sec=0")


def test_render_summary_line_small_elapsed_no_scientific_notation():
    line = render_summary_line(_result(0.000123))
    assert line.endswith("elapsed_sec=0.000123")
    assert "e-" not in line


def test_render_summary_line_fractional_elapsed_rounded():
    assert render_summary_line(_result(1.23456)).endswith("elapsed_sec=1.235")


def test_render_summary_line_empty_run():
    line = render_summary_line(_result(0.5, rows_read=4, rows_kept=0, groups=0))
    assert line.startswith("SUMMARY rows=4/0 groups=0 ")
