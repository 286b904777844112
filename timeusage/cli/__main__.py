from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import duckdb
from dotenv import load_dotenv

from timeusage.config.loader import DEFAULT_CONFIG_PATH, ConfigError, load_config
from timeusage.logging.init import enable_debug, log_summary, setup_logging
from timeusage.models.pipeline_result import PipelineResult
from timeusage.models.time_usage_row import rows_to_frame
from timeusage.services.aggregator import (
    register_sql_functions,
    time_usage_grouped_sql,
    time_usage_grouped_typed,
)
from timeusage.services.orchestrator import PipelineError, run_pipeline
from timeusage.services.projector import time_usage_summary_typed
from timeusage.services.summary import render_summary_line

"""CLI entrypoint.

- Load .env (TIMEUSAGE_CONFIG may point at another config file)
- Load config
- Open an in-memory DuckDB connection for the SQL aggregation path
- Run the pipeline, optionally print the tables, log the SUMMARY line
"""

EXIT_SUCCESS = 0
EXIT_FATAL = 1

CONFIG_ENV_VAR = "TIMEUSAGE_CONFIG"


@contextmanager
def _duckdb_connection() -> Iterator[duckdb.DuckDBPyConnection]:
    """In-memory DuckDB connection with the pipeline's SQL functions registered."""
    conn = duckdb.connect(database=":memory:")
    try:
        register_sql_functions(conn)
        yield conn
    finally:
        conn.close()


def _load_env_file(path: Path, override: bool = False) -> None:
    """Load .env using python-dotenv; existing variables win unless override."""
    if path.exists():
        load_dotenv(dotenv_path=path, override=override)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Average daily time use by working status, sex and age")
    p.add_argument("--config", type=Path, default=None, help="Config file (default: config/timeusage.yml)")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--show", action="store_true", help="Print the summary and grouped tables")
    return p.parse_args(argv)


def _show_tables(result: PipelineResult, conn: duckdb.DuckDBPyConnection, view_name: str) -> None:
    """Print the summary and the grouped table from each aggregation path."""
    sql_grouped = time_usage_grouped_sql(result.summary, conn, view_name)
    typed_grouped = rows_to_frame(time_usage_grouped_typed(time_usage_summary_typed(result.summary)))
    print("========== timeUsageSummary ================")
    print(result.summary.head(20).to_string(index=False))
    print("========== timeUsageGrouped ================")
    print(result.grouped.to_string(index=False))
    print("========== timeUsageGroupedSql ================")
    print(sql_grouped.to_string(index=False))
    print("========== timeUsageGroupedTyped ================")
    print(typed_grouped.to_string(index=False))


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # Only read the process arguments when none are given; [] means "no flags"
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)
    _load_env_file(Path(".env"))

    config_path = args.config or Path(os.getenv(CONFIG_ENV_VAR, str(DEFAULT_CONFIG_PATH)))
    try:
        cfg = load_config(config_path)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    if args.debug:
        enable_debug()
        logger.debug("debug mode enabled")

    logger.info(f"Processing dataset: {cfg.source_path}")

    with _duckdb_connection() as conn:
        try:
            result = run_pipeline(cfg, conn)
        except PipelineError as e:
            logger.error(f"pipeline: {e}")
            return EXIT_FATAL

        if args.show or cfg.show_debug:
            try:
                _show_tables(result, conn, cfg.view_name)
            except duckdb.Error as e:
                logger.error(f"show: sql: {e}")
                return EXIT_FATAL

    log_summary(render_summary_line(result).removeprefix("SUMMARY "))
    return EXIT_SUCCESS


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
