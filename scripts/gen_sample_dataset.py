#!/usr/bin/env python3
"""Synthetic summary file generator.

Generates a CSV shaped like the ATUS summary file (atussum.csv): a string
respondent id, the demographic codes the pipeline reads (teage, tesex,
telfs), a few ignored attributes and a set of activity columns in minutes.
Each respondent's activity minutes add up to at most one day (1440).
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import numpy as np
import pandas as pd

MINUTES_PER_DAY = 1440

ACTIVITY_COLUMNS = [
    # primary needs
    "t010101", "t010102", "t010201", "t030101", "t110101", "t180101", "t180301",
    # work
    "t050101", "t050102", "t050201", "t180501",
    # other
    "t020101", "t020201", "t060101", "t120101", "t120303", "t130101", "t180201", "t180601",
    # unclassified (t17 does not exist in any group)
    "t170101",
]


def generate_summary_data(rows: int, seed: int = 42) -> pd.DataFrame:
    """Generate a synthetic summary DataFrame.

    Args:
        rows: Number of respondents
        seed: Random seed for reproducible data

    Returns:
        DataFrame with the summary file's column layout
    """
    np.random.seed(seed)

    data: dict[str, object] = {
        "tucaseid": [f"2003{j:010d}" for j in range(1, rows + 1)],
        "gemetsta": np.random.choice([1.0, 2.0], rows),
        "teage": np.random.randint(15, 86, rows).astype(float),
        "tesex": np.random.choice([1.0, 2.0], rows),
        "telfs": np.random.choice([1.0, 2.0, 3.0, 4.0, 5.0], rows),
        "tuyear": np.full(rows, 2003.0),
    }

    # Split each day across the activity columns
    weights = np.random.dirichlet(np.ones(len(ACTIVITY_COLUMNS)), rows)
    awake_share = np.random.uniform(0.85, 1.0, (rows, 1))
    minutes = np.floor(weights * awake_share * MINUTES_PER_DAY)
    for index, column in enumerate(ACTIVITY_COLUMNS):
        data[column] = minutes[:, index]

    return pd.DataFrame(data)


def create_summary_file(output_path: Path, rows: int, seed: int = 42) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df = generate_summary_data(rows, seed)
    df.to_csv(output_path, index=False)

    print(f"Created summary file: {output_path}")
    print(f"  Respondents: {rows:,}")
    print(f"  Columns: {len(df.columns)} ({len(ACTIVITY_COLUMNS)} activity columns)")


def main() -> int:
    """Main CLI interface for dataset generation."""
    parser = argparse.ArgumentParser(
        description="Generate a synthetic ATUS-like summary CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate default 10k respondents
  %(prog)s data/atussum.csv

  # Generate custom size dataset with a different seed
  %(prog)s data/atussum.csv --rows 200000 --seed 123
        """
    )

    parser.add_argument(
        "output",
        type=Path,
        help="Output CSV file path"
    )

    parser.add_argument(
        "--rows",
        type=int,
        default=10_000,
        help="Number of respondents (default: 10,000)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducible data (default: 42)"
    )

    args = parser.parse_args()

    if args.rows <= 0:
        print("Error: --rows must be positive", file=sys.stderr)
        return 1

    create_summary_file(args.output, args.rows, args.seed)
    return 0


if __name__ == "__main__":
    sys.exit(main())
