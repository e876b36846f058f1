"""src/holtcast/io/readers.py"""

from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from holtcast.validation.schemas import SERIES_CANONICAL, assert_schema


logger = logging.getLogger(__name__)

DATE_ALIASES: tuple[str, ...] = ("date", "ds", "timestamp", "time")
VALUE_ALIASES: tuple[str, ...] = ("value", "y", "target")


# ---------- generic helpers ----------

def read_csv(path: Path) -> pd.DataFrame:
    if not path.exists():
        raise FileNotFoundError(f"Missing file:\n{path}")
    return pd.read_csv(path)


def _resolve_column(columns: list[str], explicit: str | None, aliases: tuple[str, ...], role: str) -> str:
    if explicit:
        key = explicit.strip().lower()
        if key not in columns:
            raise KeyError(f"{role} column '{explicit}' not found. Found columns: {columns}")
        return key
    for candidate in aliases:
        if candidate in columns:
            return candidate
    raise KeyError(f"No {role} column found (tried {list(aliases)}). Found columns: {columns}")


def parse_dates(raw: pd.Series) -> pd.Series:
    """
    Parse a date column into UTC instants.

    ISO-8601 is tried first; entries it rejects (e.g. 01/15/2024, 2024/01/15)
    get a second pass with per-element inference. Mixed UTC offsets are
    normalized to UTC. Anything still unparseable becomes NaT.
    """
    parsed = pd.to_datetime(raw, errors="coerce", utc=True, format="ISO8601")
    retry = parsed.isna() & raw.notna()
    if retry.any():
        fallback = pd.to_datetime(raw[retry].astype(str), errors="coerce", utc=True, format="mixed")
        # both passes may infer different resolutions
        parsed = parsed.dt.as_unit("ns")
        parsed.loc[retry] = fallback.dt.as_unit("ns")
    return parsed


# ---------- series reads ----------

def read_series_csv(path: Path, *, date_col: str | None = None, value_col: str | None = None) -> pd.DataFrame:
    """
    Standardize a CSV into:
        date, value

    Headers are trimmed and lower-cased before matching. Supports common
    column variants:
      - date / ds / timestamp / time
      - value / y / target

    Dates are parsed to UTC (see parse_dates). Rows with an unparseable date
    or non-numeric value are dropped and the result is sorted by date; a file
    where no row survives raises ValueError.
    """
    df = read_csv(Path(path))
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]
    columns = list(df.columns)

    dcol = _resolve_column(columns, date_col, DATE_ALIASES, "date")
    vcol = _resolve_column(columns, value_col, VALUE_ALIASES, "value")

    out = pd.DataFrame(
        {
            "date": parse_dates(df[dcol]),
            "value": pd.to_numeric(df[vcol], errors="coerce"),
        }
    )
    n_raw = len(out)
    out = out.dropna(subset=["date", "value"]).copy()
    out = out[out["value"].abs() != float("inf")].copy()
    if len(out) < n_raw:
        logger.warning("Dropped %d of %d rows with unparseable date or value from %s", n_raw - len(out), n_raw, path)
    if n_raw and out.empty:
        raise ValueError(f"No rows with a parseable {dcol!r} date and numeric {vcol!r} value in {path}")

    out["value"] = out["value"].astype(float)
    out = out.sort_values("date", kind="mergesort").reset_index(drop=True)
    assert_schema(out, SERIES_CANONICAL)
    return out


def to_series(df: pd.DataFrame) -> tuple[list[str], list[float]]:
    """Split a canonical series frame into UTC ISO timestamps and float values."""
    assert_schema(df, SERIES_CANONICAL)
    dates = pd.to_datetime(df["date"], utc=True)
    timestamps = [ts.isoformat() for ts in dates]
    values = [float(v) for v in df["value"].to_numpy(dtype=float)]
    return timestamps, values
