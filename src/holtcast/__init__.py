"""src/holtcast/__init__.py"""

from .features.frequency import FrequencyClassification, detect_frequency
from .forecasting.auto import ForecastOutcome, auto_forecast
from .modeling.holt import SmoothingResult, holt_linear
from .modeling.holt_winters import holt_winters_additive

__all__ = [
    "FrequencyClassification",
    "detect_frequency",
    "SmoothingResult",
    "holt_linear",
    "holt_winters_additive",
    "ForecastOutcome",
    "auto_forecast",
]

__version__ = "0.1.0"
