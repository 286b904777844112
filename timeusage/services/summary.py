from __future__ import annotations

from ..models.pipeline_result import PipelineResult

"""SUMMARY line rendering.

Format:
SUMMARY rows={read}/{kept} groups={groups} columns={primary}/{work}/{other} elapsed_sec={elapsed}
"""


def _format_seconds(seconds: float) -> str:
    # Integers without a fraction; very small numbers without scientific notation
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        return f"{seconds:.6f}".rstrip("0").rstrip(".")
    return str(round(seconds, 3))


def render_summary_line(result: PipelineResult) -> str:
    """Render the SUMMARY line of a pipeline run.

    Examples:
        >>> from datetime import datetime, timezone
        >>> import pandas as pd
        >>> start = datetime(2024, 1, 1, 10, 0, 0, tzinfo=timezone.utc)
        >>> end = datetime(2024, 1, 1, 10, 0, 2, tzinfo=timezone.utc)
        >>> result = PipelineResult(
        ...     rows_read=10, rows_kept=8, groups=3,
        ...     primary_columns=5, work_columns=2, other_columns=9,
        ...     start_time=start, end_time=end, elapsed_seconds=2.0,
        ...     summary=pd.DataFrame(), grouped=pd.DataFrame(),
        ... )
        >>> render_summary_line(result)
        'SUMMARY rows=10/8 groups=3 columns=5/2/9 elapsed_sec=2'
    """
    return (
        f"SUMMARY rows={result.rows_read}/{result.rows_kept} "
        f"groups={result.groups} "
        f"columns={result.primary_columns}/{result.work_columns}/{result.other_columns} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
