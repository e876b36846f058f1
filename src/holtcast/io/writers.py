"""src/holtcast/io/writers.py"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pandas as pd


def ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def write_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> Path:
    """Write DataFrame to CSV (ensures parent folder exists)."""
    ensure_parent_dir(path)
    df.to_csv(path, index=index)
    return path


def write_json(payload: dict[str, Any], path: Path) -> Path:
    """Write a JSON document (ensures parent folder exists)."""
    ensure_parent_dir(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2, ensure_ascii=False)
    return path


def write_forecast_artifact(df: pd.DataFrame, path: Path) -> Path:
    """
    Write a forecast table with defensive normalization:
    - ISO dates (date only when there is no time component)
    - lower-case Kind labels
    """
    out = df.copy()
    if "Date" in out.columns:
        dates = pd.to_datetime(out["Date"])
        has_time = bool((dates.dropna() != dates.dropna().dt.normalize()).any())
        out["Date"] = dates.dt.strftime("%Y-%m-%dT%H:%M:%S" if has_time else "%Y-%m-%d")
    if "Kind" in out.columns:
        out["Kind"] = out["Kind"].astype(str).str.strip().str.lower()

    return write_csv(out, path, index=False)
