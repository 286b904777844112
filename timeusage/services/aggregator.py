from __future__ import annotations

import logging
import statistics
from collections import defaultdict
from collections.abc import Iterable
from decimal import ROUND_HALF_UP, Decimal

import duckdb
import pandas as pd

from ..models.time_usage_row import GROUP_KEYS, MEASURES, SUMMARY_COLUMNS, TimeUsageRow

"""Grouping aggregators.

Average daily hours per (working, sex, age) group, rounded half-up to one
decimal and sorted by working status, sex and age. Three paths compute the
same table and are cross-checked by the orchestrator:

- time_usage_grouped: pandas groupby over the summary DataFrame
- time_usage_grouped_sql: SQL query over a DuckDB view of the summary
- time_usage_grouped_typed: plain Python over TimeUsageRow records
"""

__all__ = [
    "ROUND_FUNCTION",
    "round_half_up",
    "register_sql_functions",
    "time_usage_grouped",
    "time_usage_grouped_sql",
    "time_usage_grouped_sql_query",
    "time_usage_grouped_typed",
]

logger = logging.getLogger(__name__)

ROUND_FUNCTION = "round_half_up"

# Means of minute/60 values carry binary summation noise far below this
NOISE_QUANTUM = Decimal("1e-9")


def round_half_up(value: float, scale: int = 1) -> float:
    """Round half-up on the decimal value of ``value``.

    The value is first snapped to 9 decimals so that means computed with a
    different summation order (pandas, DuckDB, fsum) round the same way.

    >>> round_half_up(0.25)
    0.3
    >>> round_half_up(2.45)
    2.5
    """
    quantum = Decimal(1).scaleb(-scale)
    snapped = Decimal(repr(float(value))).quantize(NOISE_QUANTUM)
    return float(snapped.quantize(quantum, rounding=ROUND_HALF_UP))


def time_usage_grouped(summed: pd.DataFrame) -> pd.DataFrame:
    """Average the summary per (working, sex, age) group.

    Args:
        summed: DataFrame returned by time_usage_summary
    """
    grouped = (
        summed.groupby(list(GROUP_KEYS), sort=True)[list(MEASURES)]
        .mean()
        .reset_index()
    )
    for measure in MEASURES:
        grouped[measure] = grouped[measure].map(round_half_up).astype("float64")
    return (
        grouped[list(SUMMARY_COLUMNS)]
        .sort_values(list(GROUP_KEYS), kind="mergesort")
        .reset_index(drop=True)
    )


def register_sql_functions(conn: duckdb.DuckDBPyConnection) -> None:
    """Register round_half_up on the connection (once per connection)."""
    exists = conn.execute(
        "SELECT count(*) FROM duckdb_functions() WHERE function_name = ?",
        [ROUND_FUNCTION],
    ).fetchone()
    if exists and exists[0]:
        return
    conn.create_function(ROUND_FUNCTION, round_half_up, ["DOUBLE", "INTEGER"], "DOUBLE")


def time_usage_grouped_sql_query(view_name: str) -> str:
    """SQL query equivalent to time_usage_grouped over the named view."""
    return f"""SELECT
            working,
            sex,
            age,
            {ROUND_FUNCTION}(avg(primaryNeeds), 1) AS primaryNeeds,
            {ROUND_FUNCTION}(avg(work), 1) AS work,
            {ROUND_FUNCTION}(avg(other), 1) AS other
        FROM {view_name}
        GROUP BY
            working,
            sex,
            age
        ORDER BY
            working,
            sex,
            age"""


def time_usage_grouped_sql(
    summed: pd.DataFrame,
    conn: duckdb.DuckDBPyConnection,
    view_name: str = "summed",
) -> pd.DataFrame:
    """Same as time_usage_grouped, through a SQL query on ``conn``.

    The summary is registered as ``view_name`` for the duration of the query.
    """
    register_sql_functions(conn)
    conn.register(view_name, summed)
    try:
        result = conn.execute(time_usage_grouped_sql_query(view_name)).df()
    finally:
        conn.unregister(view_name)
    logger.debug(f"sql path returned {len(result)} groups from view {view_name}")
    return result[list(SUMMARY_COLUMNS)]


def time_usage_grouped_typed(summed: Iterable[TimeUsageRow]) -> list[TimeUsageRow]:
    """Same as time_usage_grouped, over typed records.

    The input holds one row per respondent; the output one row per group.
    """
    groups: dict[tuple[str, str, str], list[TimeUsageRow]] = defaultdict(list)
    for row in summed:
        groups[row.key].append(row)

    averaged = [
        TimeUsageRow(
            working,
            sex,
            age,
            round_half_up(statistics.fmean(r.primary_needs for r in members)),
            round_half_up(statistics.fmean(r.work for r in members)),
            round_half_up(statistics.fmean(r.other for r in members)),
        )
        for (working, sex, age), members in groups.items()
    ]
    return sorted(averaged, key=lambda r: r.key)
