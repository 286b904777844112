from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd

from ..models.time_usage_row import SUMMARY_COLUMNS, TimeUsageRow

"""Row projector.

Turns the wide survey table into one row per respondent with three labels
(working status, sex, age bracket) and three totals in hours (primary needs,
work, other). Respondents outside the labor force (telfs = 5) are dropped.
"""

__all__ = [
    "MissingColumnsError",
    "DEMOGRAPHIC_COLUMNS",
    "LABOR_FORCE_MAX",
    "MINUTES_PER_HOUR",
    "time_usage_summary",
    "time_usage_summary_typed",
]

logger = logging.getLogger(__name__)

DEMOGRAPHIC_COLUMNS = ("telfs", "tesex", "teage")

# telfs codes above this are "not in labor force"
LABOR_FORCE_MAX = 4

MINUTES_PER_HOUR = 60.0

# Inclusive age brackets; anything outside both is "elder"
YOUNG_AGES = (15, 22)
ACTIVE_AGES = (23, 55)


class MissingColumnsError(Exception):
    """Raised when the dataset lacks a column the projection needs."""


def _check_columns(df: pd.DataFrame, required: Sequence[str]) -> None:
    present = set(df.columns)
    missing = sorted({c for c in required if c not in present})
    if missing:
        raise MissingColumnsError(f"dataset missing columns: {missing}")


def _hours(df: pd.DataFrame, columns: Sequence[str]) -> np.ndarray:
    # An empty column group sums to 0.0
    return df[list(columns)].sum(axis=1).to_numpy(dtype="float64") / MINUTES_PER_HOUR


def time_usage_summary(
    primary_needs_columns: Sequence[str],
    work_columns: Sequence[str],
    other_columns: Sequence[str],
    df: pd.DataFrame,
) -> pd.DataFrame:
    """Project the survey table to the six summary columns.

    Resulting columns:
    - working: "working" if 1 <= telfs < 3, "not working" otherwise
    - sex: "male" if tesex = 1, "female" otherwise
    - age: "young" if 15 <= teage <= 22, "active" if 23 <= teage <= 55,
      "elder" otherwise
    - primaryNeeds, work, other: sum of the group's columns, in hours

    Rows with telfs > 4 are excluded.

    Raises:
        MissingColumnsError: a classified or demographic column is absent.
    """
    _check_columns(
        df, [*primary_needs_columns, *work_columns, *other_columns, *DEMOGRAPHIC_COLUMNS]
    )

    kept = df.loc[df["telfs"] <= LABOR_FORCE_MAX]
    logger.debug(f"labor force filter kept {len(kept)}/{len(df)} rows")

    telfs = kept["telfs"].to_numpy()
    tesex = kept["tesex"].to_numpy()
    teage = kept["teage"].to_numpy()

    working = np.where((telfs >= 1) & (telfs < 3), "working", "not working")
    sex = np.where(tesex == 1, "male", "female")
    age = np.where(
        (teage >= YOUNG_AGES[0]) & (teage <= YOUNG_AGES[1]),
        "young",
        np.where((teage >= ACTIVE_AGES[0]) & (teage <= ACTIVE_AGES[1]), "active", "elder"),
    )

    summary = pd.DataFrame(
        {
            "working": working.astype(object),
            "sex": sex.astype(object),
            "age": age.astype(object),
            "primaryNeeds": _hours(kept, primary_needs_columns),
            "work": _hours(kept, work_columns),
            "other": _hours(kept, other_columns),
        },
        columns=list(SUMMARY_COLUMNS),
    )
    return summary


def time_usage_summary_typed(summary: pd.DataFrame) -> list[TimeUsageRow]:
    """Convert a six-column summary (or grouped) DataFrame to typed rows."""
    _check_columns(summary, SUMMARY_COLUMNS)
    return [
        TimeUsageRow.from_record(record)
        for record in summary[list(SUMMARY_COLUMNS)].to_dict(orient="records")
    ]
