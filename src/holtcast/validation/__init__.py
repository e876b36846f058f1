"""src/holtcast/validation/__init__.py"""

from __future__ import annotations

from .checks import CheckResult, build_request, validate_df, validate_request
from .schemas import (
    FORECAST_FRAME,
    HORIZON_MAX,
    HORIZON_MIN,
    SERIES_CANONICAL,
    ForecastRequest,
    SchemaSpec,
    assert_schema,
)

__all__ = [
    # checks
    "CheckResult",
    "validate_request",
    "build_request",
    "validate_df",
    # schemas
    "ForecastRequest",
    "SchemaSpec",
    "assert_schema",
    "SERIES_CANONICAL",
    "FORECAST_FRAME",
    "HORIZON_MIN",
    "HORIZON_MAX",
]
