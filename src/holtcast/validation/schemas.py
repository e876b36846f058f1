"""src/holtcast/validation/schemas.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

import pandas as pd


HORIZON_MIN = 1
HORIZON_MAX = 365


@dataclass(frozen=True)
class SchemaSpec:
    """Minimal schema specification for a DataFrame."""
    name: str
    required_cols: tuple[str, ...]
    dtype_hints: dict[str, str] | None = None  # datetime | float | string, checked by validate_df


@dataclass(frozen=True)
class ForecastRequest:
    """A validated forecast call: aligned timestamps/values plus horizon."""
    timestamps: tuple[Any, ...]
    values: tuple[float, ...]
    horizon: int


def _missing_cols(df: pd.DataFrame, required: Iterable[str]) -> list[str]:
    req = list(required)
    return [c for c in req if c not in df.columns]


SERIES_CANONICAL = SchemaSpec(
    name="series_canonical",
    required_cols=("date", "value"),
    dtype_hints={"date": "datetime", "value": "float"},
)

FORECAST_FRAME = SchemaSpec(
    name="forecast_frame",
    required_cols=("Date", "Kind", "Actual", "Fitted", "Residual", "Forecast"),
    dtype_hints={
        "Date": "datetime",
        "Kind": "string",
        "Actual": "float",
        "Fitted": "float",
        "Residual": "float",
        "Forecast": "float",
    },
)


def assert_schema(df: pd.DataFrame, spec: SchemaSpec) -> None:
    """Raise a KeyError if required columns are missing."""
    missing = _missing_cols(df, spec.required_cols)
    if missing:
        raise KeyError(
            f"{spec.name}: missing columns {missing}. Found: {list(df.columns)}"
        )
