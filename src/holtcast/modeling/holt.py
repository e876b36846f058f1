"""src/holtcast/modeling/holt.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


@dataclass(frozen=True)
class SmoothingResult:
    """
    Output of a single smoothing run.

    fitted / residuals are aligned with the input series,
    forecast has one value per horizon step.
    """
    fitted: np.ndarray
    forecast: np.ndarray
    residuals: np.ndarray


def _as_series(series: Iterable[float]) -> np.ndarray:
    return np.asarray(list(series), dtype=float)


def holt_linear(series: Iterable[float], horizon: int, alpha: float, beta: float) -> SmoothingResult:
    """
    Double exponential smoothing (Holt's linear trend).

      level_t  = alpha * y_t + (1 - alpha) * (level_{t-1} + trend_{t-1})
      trend_t  = beta * (level_t - level_{t-1}) + (1 - beta) * trend_{t-1}
      fitted_t = level_t + trend_t
      yhat_{n+h} = level_n + h * trend_n

    Series shorter than 2 points get a flat forecast of the last value
    (0 when empty) and zero residuals.
    """
    y = _as_series(series)
    steps = max(int(horizon), 0)
    n = y.size

    if n < 2:
        last = float(y[-1]) if n else 0.0
        return SmoothingResult(
            fitted=y.copy(),
            forecast=np.full(shape=(steps,), fill_value=last, dtype=float),
            residuals=np.zeros(n, dtype=float),
        )

    fitted = np.empty(n, dtype=float)
    residuals = np.empty(n, dtype=float)

    level = float(y[0])
    trend = float(y[1] - y[0])
    for t in range(n):
        value = float(y[t])
        prev_level = level
        level = alpha * value + (1.0 - alpha) * (level + trend)
        trend = beta * (level - prev_level) + (1.0 - beta) * trend
        fitted[t] = level + trend
        residuals[t] = value - fitted[t]

    horizon_steps = np.arange(1, steps + 1, dtype=float)
    forecast = level + horizon_steps * trend
    return SmoothingResult(fitted=fitted, forecast=forecast.astype(float), residuals=residuals)
