# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import duckdb
import pandas as pd
import pytest

# Activity columns used by the in-memory fixtures, with their expected group
PRIMARY_COLUMNS = ["t010101", "t030101", "t110101", "t180101"]
WORK_COLUMNS = ["t050101", "t180501"]
OTHER_COLUMNS = ["t020101", "t120101", "t180601"]


def make_respondent(
    case_id: str,
    telfs: float,
    tesex: float,
    teage: float,
    primary: float = 0.0,
    work: float = 0.0,
    other: float = 0.0,
) -> dict[str, object]:
    """One respondent row; each group's minutes go into its first column."""
    row: dict[str, object] = {"tucaseid": case_id}
    for column in PRIMARY_COLUMNS + WORK_COLUMNS + OTHER_COLUMNS:
        row[column] = 0.0
    row["t010101"] = float(primary)
    row["t050101"] = float(work)
    row["t020101"] = float(other)
    row["t170101"] = 15.0  # unclassified activity, must never be counted
    row["telfs"] = float(telfs)
    row["tesex"] = float(tesex)
    row["teage"] = float(teage)
    return row


def make_frame(rows: list[dict[str, object]]) -> pd.DataFrame:
    df = pd.DataFrame(rows)
    df["tucaseid"] = df["tucaseid"].astype("string")
    return df


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("TIMEUSAGE_CONFIG", raising=False)
        yield p


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_path: ./data/atussum.csv
view_name: summed
show_debug: false
cross_check: true
output_path: ./out/grouped.csv
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "timeusage.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


@pytest.fixture()
def two_respondents() -> pd.DataFrame:
    """Two working respondents of the same age and one outside the labor force."""
    return make_frame([
        make_respondent("20030100013280", telfs=1, tesex=1, teage=30, primary=600, work=120, other=180),
        make_respondent("20030100013344", telfs=2, tesex=2, teage=30, primary=480, work=240, other=240),
        make_respondent("20030100013352", telfs=5, tesex=1, teage=30, primary=900, work=0, other=540),
    ])


@pytest.fixture()
def mixed_respondents() -> pd.DataFrame:
    """Respondents spread over several groups, with uneven averages."""
    return make_frame([
        make_respondent("c01", telfs=1, tesex=1, teage=19, primary=700, work=300, other=200),
        make_respondent("c02", telfs=1, tesex=1, teage=21, primary=640, work=360, other=260),
        make_respondent("c03", telfs=3, tesex=2, teage=40, primary=650, work=0, other=500),
        make_respondent("c04", telfs=4, tesex=2, teage=60, primary=720, work=0, other=600),
        make_respondent("c05", telfs=2, tesex=2, teage=45, primary=590, work=480, other=170),
        make_respondent("c06", telfs=2, tesex=2, teage=50, primary=610, work=455, other=190),
        make_respondent("c07", telfs=1, tesex=1, teage=70, primary=660, work=120, other=400),
        make_respondent("c08", telfs=5, tesex=2, teage=80, primary=800, work=0, other=640),
        make_respondent("c09", telfs=4, tesex=1, teage=23, primary=605, work=0, other=555),
    ])


@pytest.fixture()
def write_dataset(temp_workdir: Path):
    """Write a DataFrame as data/atussum.csv and return its path."""
    def _write(df: pd.DataFrame, name: str = "atussum.csv") -> Path:
        path = temp_workdir / "data" / name
        df.to_csv(path, index=False)
        return path
    return _write


@pytest.fixture()
def duck_conn():
    conn = duckdb.connect(database=":memory:")
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture()
def respondents():
    """Build a survey DataFrame from keyword rows, e.g. respondents(dict(telfs=1, ...))."""
    def _build(*rows: dict[str, float]) -> pd.DataFrame:
        return make_frame([
            make_respondent(f"r{index:03d}", **row) for index, row in enumerate(rows, start=1)
        ])
    return _build
