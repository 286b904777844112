from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

import duckdb
import pandas as pd

from ..dataset.reader import DatasetError, read_dataset
from ..models.config_models import TimeUsageConfig
from ..models.pipeline_result import PipelineResult
from .aggregator import time_usage_grouped, time_usage_grouped_sql, time_usage_grouped_typed
from .classifier import classified_columns
from .projector import MissingColumnsError, time_usage_summary, time_usage_summary_typed

logger = logging.getLogger(__name__)

"""Service orchestration for the time usage pipeline.

read -> classify -> project -> group, then optionally cross-check the SQL
and typed aggregation paths against the direct one and write the grouped
table to CSV.
"""


class PipelineError(Exception):
    """Fatal pipeline error (bad dataset, schema mismatch, SQL failure, diverging paths, output write)."""


def cross_check(
    summed: pd.DataFrame,
    grouped: pd.DataFrame,
    conn: duckdb.DuckDBPyConnection,
    view_name: str = "summed",
) -> None:
    """Verify that the SQL and typed paths reproduce the direct grouping.

    Raises:
        PipelineError: if either path differs from ``grouped`` in any row.
    """
    expected = time_usage_summary_typed(grouped)

    from_sql = time_usage_summary_typed(time_usage_grouped_sql(summed, conn, view_name))
    if from_sql != expected:
        raise PipelineError(
            f"sql aggregation differs from direct aggregation "
            f"({len(from_sql)} vs {len(expected)} groups)"
        )

    from_typed = time_usage_grouped_typed(time_usage_summary_typed(summed))
    if from_typed != expected:
        raise PipelineError(
            f"typed aggregation differs from direct aggregation "
            f"({len(from_typed)} vs {len(expected)} groups)"
        )
    logger.debug(f"cross-check passed for {len(expected)} groups")


def write_grouped(grouped: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    grouped.to_csv(path, index=False)


def run_pipeline(cfg: TimeUsageConfig, conn: duckdb.DuckDBPyConnection) -> PipelineResult:
    """Run the whole pipeline for one configuration.

    Args:
        cfg: loaded configuration
        conn: DuckDB connection used by the SQL path (owned by the caller)

    Returns:
        PipelineResult with the summary, the grouped table and run metrics

    Raises:
        PipelineError: dataset, schema, sql, cross-check or output failure
    """
    start_time = datetime.now(UTC)

    source = Path(cfg.source_path)
    try:
        columns, raw = read_dataset(source)
    except DatasetError as e:
        raise PipelineError(f"dataset: {e}") from e
    logger.info(f"read {len(raw)} rows x {len(columns)} columns from {source}")

    primary, work, other = classified_columns(columns)
    logger.info(
        f"classified columns primary={len(primary)} work={len(work)} other={len(other)} "
        f"dropped={len(columns) - len(primary) - len(work) - len(other)}"
    )

    try:
        summed = time_usage_summary(primary, work, other, raw)
    except MissingColumnsError as e:
        raise PipelineError(f"schema: {e}") from e
    if summed.empty:
        logger.warning("no rows left after the labor force filter")

    grouped = time_usage_grouped(summed)

    if cfg.cross_check:
        try:
            cross_check(summed, grouped, conn, cfg.view_name)
        except duckdb.Error as e:
            raise PipelineError(f"sql: {e}") from e

    if cfg.output_path:
        output = Path(cfg.output_path)
        try:
            write_grouped(grouped, output)
        except OSError as e:
            raise PipelineError(f"output: {e}") from e
        logger.info(f"wrote {len(grouped)} groups to {output}")

    end_time = datetime.now(UTC)
    return PipelineResult(
        rows_read=len(raw),
        rows_kept=len(summed),
        groups=len(grouped),
        primary_columns=len(primary),
        work_columns=len(work),
        other_columns=len(other),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
        summary=summed,
        grouped=grouped,
    )
