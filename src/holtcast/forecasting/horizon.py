"""src/holtcast/forecasting/horizon.py"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
import pandas as pd

from holtcast.features.frequency import FrequencyClassification, UNKNOWN
from holtcast.forecasting.auto import ForecastOutcome


def _step_offset(frequency: FrequencyClassification) -> pd.DateOffset:
    if frequency.kind == "monthly":
        return pd.DateOffset(months=1)
    if frequency.kind == "weekly":
        return pd.DateOffset(days=7)
    # daily and unknown both step by one day
    return pd.DateOffset(days=1)


def future_index(last_timestamp: Any, horizon: int, frequency: FrequencyClassification = UNKNOWN) -> pd.DatetimeIndex:
    """Labels for the horizon steps following last_timestamp."""
    last = pd.Timestamp(last_timestamp)
    offset = _step_offset(frequency)
    return pd.DatetimeIndex([last + offset * i for i in range(1, int(horizon) + 1)])


def forecast_frame(
    outcome: ForecastOutcome,
    timestamps: Sequence[Any],
    observed: Sequence[float],
    frequency: FrequencyClassification = UNKNOWN,
) -> pd.DataFrame:
    """
    Long table of the in-sample fit followed by the forecast.

    Columns: Date, Kind (actual|forecast), Actual, Fitted, Residual, Forecast
    """
    # naive UTC; inputs may carry different offsets across a DST change
    dates = pd.to_datetime(pd.Series(list(timestamps), dtype="object"), format="ISO8601", utc=True).dt.tz_convert(None)
    hist = pd.DataFrame(
        {
            "Date": dates.to_numpy(),
            "Kind": "actual",
            "Actual": np.asarray(observed, dtype=float),
            "Fitted": np.asarray(outcome.fitted, dtype=float),
            "Residual": np.asarray(outcome.residuals, dtype=float),
            "Forecast": np.nan,
        }
    )

    if outcome.horizon == 0:
        return hist.reset_index(drop=True)

    if len(dates):
        future_dates = future_index(dates.iloc[-1], outcome.horizon, frequency).to_numpy()
    else:
        future_dates = np.full(outcome.horizon, np.datetime64("NaT"), dtype="datetime64[ns]")
    fut = pd.DataFrame(
        {
            "Date": future_dates,
            "Kind": "forecast",
            "Actual": np.nan,
            "Fitted": np.nan,
            "Residual": np.nan,
            "Forecast": np.asarray(outcome.forecast, dtype=float),
        }
    )
    if hist.empty:
        return fut
    return pd.concat([hist, fut], ignore_index=True)
