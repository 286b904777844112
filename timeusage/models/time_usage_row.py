from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

import pandas as pd

"""TimeUsageRow model: one row of the summarized data set.

The same shape is used for the per-respondent projection and for the
per-group averages; only the meaning of the numeric fields changes
(hours of one respondent vs. mean hours of a group).
"""

__all__ = [
    "TimeUsageRow",
    "GROUP_KEYS",
    "MEASURES",
    "SUMMARY_COLUMNS",
    "rows_to_frame",
]

# DataFrame column names, in output order
GROUP_KEYS = ("working", "sex", "age")
MEASURES = ("primaryNeeds", "work", "other")
SUMMARY_COLUMNS = GROUP_KEYS + MEASURES


@dataclass(frozen=True)
class TimeUsageRow:
    """Row of the summarized data set.

    working: "working" or "not working"
    sex: "male" or "female"
    age: "young", "active" or "elder"
    primary_needs: daily hours spent on primary needs
    work: daily hours spent working
    other: daily hours spent on other activities
    """
    working: str
    sex: str
    age: str
    primary_needs: float
    work: float
    other: float

    @property
    def key(self) -> tuple[str, str, str]:
        return (self.working, self.sex, self.age)

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> TimeUsageRow:
        """Build a row from a mapping keyed by the DataFrame column names."""
        return cls(
            working=str(record["working"]),
            sex=str(record["sex"]),
            age=str(record["age"]),
            primary_needs=float(record["primaryNeeds"]),
            work=float(record["work"]),
            other=float(record["other"]),
        )

    def as_record(self) -> dict[str, Any]:
        return {
            "working": self.working,
            "sex": self.sex,
            "age": self.age,
            "primaryNeeds": self.primary_needs,
            "work": self.work,
            "other": self.other,
        }


def rows_to_frame(rows: Iterable[TimeUsageRow]) -> pd.DataFrame:
    """DataFrame with the summary column names, one line per row."""
    return pd.DataFrame([row.as_record() for row in rows], columns=list(SUMMARY_COLUMNS))
