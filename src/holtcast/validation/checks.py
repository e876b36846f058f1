"""src/holtcast/validation/checks.py"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Sequence

import pandas as pd

from holtcast.common.utils import is_finite_number
from holtcast.validation.schemas import HORIZON_MAX, HORIZON_MIN, ForecastRequest, SchemaSpec, assert_schema


@dataclass(frozen=True)
class CheckResult:
    ok: bool
    errors: tuple[str, ...]

    def raise_if_failed(self) -> None:
        if not self.ok:
            msg = "\n".join(self.errors) if self.errors else "Validation failed."
            raise ValueError(msg)


def check_lengths(timestamps: Sequence[Any], values: Sequence[Any]) -> list[str]:
    errs: list[str] = []
    if len(timestamps) != len(values):
        errs.append(f"timestamps and values length mismatch: {len(timestamps)} != {len(values)}")
    if len(values) == 0:
        errs.append("values: at least one observation is required")
    return errs


def check_values(values: Sequence[Any]) -> list[str]:
    errs: list[str] = []
    bad = [i for i, v in enumerate(values) if not is_finite_number(v)]
    if bad:
        errs.append(f"values: expected finite numbers; bad_count={len(bad)}; sample_positions={bad[:10]}")
    return errs


def check_timestamps(timestamps: Sequence[Any]) -> list[str]:
    errs: list[str] = []
    bad: list[int] = []
    for i, ts in enumerate(timestamps):
        if isinstance(ts, (datetime, date, pd.Timestamp)):
            continue
        if not isinstance(ts, str) or not ts.strip():
            bad.append(i)
    if bad:
        errs.append(f"timestamps: expected non-empty strings; bad_count={len(bad)}; sample_positions={bad[:10]}")
    return errs


def check_horizon(horizon: Any) -> list[str]:
    if isinstance(horizon, bool) or not isinstance(horizon, numbers.Integral):
        return [f"horizon: expected an integer, got {type(horizon).__name__}"]
    if not HORIZON_MIN <= horizon <= HORIZON_MAX:
        return [f"horizon: expected [{HORIZON_MIN}..{HORIZON_MAX}], got {horizon}"]
    return []


def validate_request(timestamps: Sequence[Any], values: Sequence[Any], horizon: Any) -> CheckResult:
    """Boundary checks run before the series reaches the forecaster."""
    errors: list[str] = []
    errors.extend(check_lengths(timestamps, values))
    errors.extend(check_values(values))
    errors.extend(check_timestamps(timestamps))
    errors.extend(check_horizon(horizon))
    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))


def build_request(timestamps: Sequence[Any], values: Sequence[Any], horizon: Any) -> ForecastRequest:
    """Validate and freeze a forecast request; raises ValueError listing every failed check."""
    validate_request(timestamps, values, horizon).raise_if_failed()
    return ForecastRequest(
        timestamps=tuple(timestamps),
        values=tuple(float(v) for v in values),
        horizon=int(horizon),
    )


_DTYPE_PREDICATES: dict[str, Callable[[Any], bool]] = {
    "datetime": pd.api.types.is_datetime64_any_dtype,
    "float": pd.api.types.is_numeric_dtype,
    "string": lambda s: pd.api.types.is_string_dtype(s) or pd.api.types.is_object_dtype(s),
}


def check_dtypes(df: pd.DataFrame, hints: dict[str, str] | None) -> list[str]:
    errs: list[str] = []
    for col, kind in (hints or {}).items():
        if col not in df.columns:
            continue
        predicate = _DTYPE_PREDICATES.get(kind)
        if predicate is None:
            errs.append(f"{col}: unknown dtype hint '{kind}'")
        elif not predicate(df[col]):
            errs.append(f"{col}: expected {kind} dtype, found {df[col].dtype}")
    return errs


def validate_df(df: pd.DataFrame, *, schema: SchemaSpec | None = None, min_rows: int = 0) -> CheckResult:
    errors: list[str] = []

    if schema is not None:
        try:
            assert_schema(df, schema)
        except KeyError as e:
            errors.append(str(e))
            return CheckResult(ok=False, errors=tuple(errors))
        errors.extend(check_dtypes(df, schema.dtype_hints))

    if len(df) < min_rows:
        errors.append(f"expected at least {min_rows} rows, found {len(df)}")

    return CheckResult(ok=(len(errors) == 0), errors=tuple(errors))
