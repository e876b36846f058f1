"""tests/unit/test_validation.py"""

from __future__ import annotations

import math
from datetime import datetime

import numpy as np
import pandas as pd
import pytest

from holtcast.validation.checks import build_request, check_dtypes, validate_df, validate_request
from holtcast.validation.schemas import FORECAST_FRAME, SERIES_CANONICAL, SchemaSpec


def test_valid_request_passes() -> None:
    res = validate_request(["2024-01-01", "2024-01-02"], [1.0, 2], 30)
    assert res.ok
    res.raise_if_failed()  # should not raise


def test_build_request_freezes_values() -> None:
    req = build_request(["2024-01-01", datetime(2024, 1, 2)], [np.float64(1.5), np.int64(2)], np.int64(7))
    assert req.values == (1.5, 2.0)
    assert req.horizon == 7
    assert isinstance(req.timestamps, tuple)


def test_length_mismatch_fails() -> None:
    res = validate_request(["2024-01-01"], [1.0, 2.0], 5)
    assert not res.ok
    assert any("length mismatch" in e for e in res.errors)


def test_empty_series_fails() -> None:
    with pytest.raises(ValueError, match="at least one observation"):
        build_request([], [], 5)


@pytest.mark.parametrize("horizon", [0, 366, -1, 2.5, "10", True, None])
def test_out_of_range_or_non_integer_horizon(horizon) -> None:
    res = validate_request(["2024-01-01"], [1.0], horizon)
    assert not res.ok
    assert any(e.startswith("horizon") for e in res.errors)


@pytest.mark.parametrize("horizon", [1, 365])
def test_horizon_bounds_are_inclusive(horizon: int) -> None:
    assert validate_request(["2024-01-01"], [1.0], horizon).ok


def test_non_finite_values_fail() -> None:
    res = validate_request(["a", "b", "c", "d"], [1.0, math.nan, math.inf, "3"], 3)
    assert not res.ok
    assert any("bad_count=3" in e for e in res.errors)


def test_blank_timestamps_fail() -> None:
    res = validate_request(["2024-01-01", "  ", None], [1.0, 2.0, 3.0], 3)
    assert not res.ok
    assert any(e.startswith("timestamps") and "bad_count=2" in e for e in res.errors)


def test_all_errors_reported_together() -> None:
    with pytest.raises(ValueError) as exc:
        build_request(["2024-01-01"], [math.nan, 1.0], 0)
    msg = str(exc.value)
    assert "length mismatch" in msg
    assert "values" in msg
    assert "horizon" in msg


def test_validate_df_schema_and_rows() -> None:
    df = pd.DataFrame({"date": pd.to_datetime(["2024-01-01"]), "value": [1.0]})
    assert validate_df(df, schema=SERIES_CANONICAL, min_rows=1).ok
    assert not validate_df(df, schema=SERIES_CANONICAL, min_rows=2).ok
    assert not validate_df(df, schema=FORECAST_FRAME).ok


def test_validate_df_checks_dtype_hints() -> None:
    df = pd.DataFrame({"date": ["2024-01-01"], "value": ["1.0"]})
    res = validate_df(df, schema=SERIES_CANONICAL)
    assert not res.ok
    assert any(e.startswith("date: expected datetime") for e in res.errors)
    assert any(e.startswith("value: expected float") for e in res.errors)

    tz_aware = pd.DataFrame({"date": pd.to_datetime(["2024-01-01"], utc=True), "value": [1]})
    assert validate_df(tz_aware, schema=SERIES_CANONICAL).ok


def test_unknown_dtype_hint_reported() -> None:
    spec = SchemaSpec(name="odd", required_cols=("x",), dtype_hints={"x": "decimal"})
    assert check_dtypes(pd.DataFrame({"x": [1.0]}), spec.dtype_hints) == ["x: unknown dtype hint 'decimal'"]
    assert check_dtypes(pd.DataFrame({"x": [1.0]}), None) == []
