from __future__ import annotations

from pathlib import Path

import pandas as pd

"""Summary CSV reader.

The first line of the file is the header. The first column is the
respondent identifier and is read as a string; every other column is a
number of minutes or a coded attribute and is read as float64. No field
is nullable: an empty cell or a non-numeric value in a numeric column is
a fatal error, never coerced.
"""

__all__ = [
    "DatasetError",
    "df_schema",
    "read_header",
    "read_dataset",
]


class DatasetError(Exception):
    """Raised when the source file cannot be turned into a typed table."""


def df_schema(column_names: list[str]) -> dict[str, str]:
    """Return the pandas dtype mapping for the given header.

    >>> df_schema(["tucaseid", "t010101", "teage"])
    {'tucaseid': 'string', 't010101': 'float64', 'teage': 'float64'}
    """
    return {
        name: "string" if index == 0 else "float64"
        for index, name in enumerate(column_names)
    }


def read_header(path: Path) -> list[str]:
    """Read only the header line of the CSV file."""
    try:
        header = pd.read_csv(path, nrows=0)
    except pd.errors.EmptyDataError as e:
        raise DatasetError(f"no header line: {path}") from e
    columns = [str(c).strip() for c in header.columns]
    if not columns:
        raise DatasetError(f"no header line: {path}")
    return columns


def read_dataset(path: Path) -> tuple[list[str], pd.DataFrame]:
    """Read the summary CSV file.

    Returns:
        The header column names (in file order) and the typed DataFrame.

    Raises:
        DatasetError: file missing, header missing, non-numeric or empty value.
    """
    if not path.exists():
        raise DatasetError(f"dataset file not found: {path}")

    columns = read_header(path)
    schema = df_schema(columns)
    try:
        # Only the empty string is NA; "NA"/"nan" in a numeric column must fail
        df = pd.read_csv(
            path,
            header=0,
            names=columns,
            dtype=schema,
            keep_default_na=False,
            na_values=[""],
        )
    except (ValueError, TypeError) as e:
        raise DatasetError(f"invalid value in {path.name}: {e}") from e

    empty = [name for name, has_na in df.isna().any().items() if has_na]
    if empty:
        raise DatasetError(f"empty values in {path.name} columns: {empty}")

    return columns, df
