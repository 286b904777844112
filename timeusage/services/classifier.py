from __future__ import annotations

from collections.abc import Iterable

"""Activity column classifier.

The summary file holds the daily time (in minutes) each respondent spent on
hundreds of coded activities; "t010101" is time spent sleeping, "t110101"
time spent eating and drinking, and so on. Columns are grouped by activity
code prefix:

1. primary needs (sleeping, eating, personal care): t01, t03, t11, t1801, t1803
2. work: t05, t1805
3. other (leisure): t02, t04, t06-t10, t12-t16 and t18, except the t18
   travel codes already counted by the two groups above.

Any other column (identifier, demographics) is dropped.
"""

__all__ = [
    "PRIMARY_NEEDS_PREFIXES",
    "WORK_PREFIXES",
    "OTHER_PREFIXES",
    "OTHER_EXCLUDED_PREFIXES",
    "classified_columns",
    "is_primary_needs",
    "is_work",
    "is_other",
]

PRIMARY_NEEDS_PREFIXES = ("t01", "t03", "t11", "t1801", "t1803")
WORK_PREFIXES = ("t05", "t1805")
OTHER_PREFIXES = (
    "t02", "t04", "t06", "t07", "t08", "t09", "t10",
    "t12", "t13", "t14", "t15", "t16", "t18",
)
OTHER_EXCLUDED_PREFIXES = ("t1801", "t1803", "t1805")


def is_primary_needs(column: str) -> bool:
    return column.startswith(PRIMARY_NEEDS_PREFIXES)


def is_work(column: str) -> bool:
    return column.startswith(WORK_PREFIXES)


def is_other(column: str) -> bool:
    return column.startswith(OTHER_PREFIXES) and not column.startswith(OTHER_EXCLUDED_PREFIXES)


def classified_columns(column_names: Iterable[str]) -> tuple[list[str], list[str], list[str]]:
    """Partition column names into primary needs, work and other.

    Each returned list keeps the relative order of the input. A column lands
    in the first group it matches; unmatched columns are silently dropped.

    >>> classified_columns(["tucaseid", "t010101", "t050101", "t180101", "t180501", "t180601"])
    (['t010101', 't180101'], ['t050101', 't180501'], ['t180601'])
    """
    primary: list[str] = []
    work: list[str] = []
    other: list[str] = []
    for column in column_names:
        if is_primary_needs(column):
            primary.append(column)
        elif is_work(column):
            work.append(column)
        elif is_other(column):
            other.append(column)
    return primary, work, other
