"""src/holtcast/forecasting/__init__.py"""

from .auto import ForecastOutcome, auto_forecast
from .horizon import forecast_frame, future_index

__all__ = [
    "ForecastOutcome",
    "auto_forecast",
    "forecast_frame",
    "future_index",
]
