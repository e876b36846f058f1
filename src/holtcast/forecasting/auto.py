"""src/holtcast/forecasting/auto.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

import numpy as np

from holtcast.features.frequency import FrequencyClassification, detect_frequency
from holtcast.modeling.grid import DEFAULT_GRID, ParameterGrid, SmoothingParams
from holtcast.modeling.selection import Method, SearchStats, grid_search


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastOutcome:
    """Winning model, its coefficients and its fitted/forecast/residual series."""
    method: Method
    horizon: int
    params: SmoothingParams
    fitted: np.ndarray
    forecast: np.ndarray
    residuals: np.ndarray

    def to_dict(self) -> dict[str, Any]:
        return {
            "method": self.method,
            "horizon": int(self.horizon),
            "params": self.params.as_dict(),
            "fitted": [float(v) for v in self.fitted],
            "forecast": [float(v) for v in self.forecast],
            "residuals": [float(v) for v in self.residuals],
        }


def auto_forecast(
    series: Iterable[float],
    timestamps: Sequence[Any],
    horizon: int,
    *,
    grid: ParameterGrid | None = None,
    timeout: float | None = None,
    frequency: FrequencyClassification | None = None,
) -> ForecastOutcome:
    """
    Detect the sampling frequency, grid-search both smoothing models and
    return the candidate with the lowest in-sample SSE.

    timestamps are only used for frequency detection; they are assumed to be
    sorted and aligned with series. Pass frequency to skip detection.
    """
    y = np.asarray(list(series), dtype=float)
    steps = max(int(horizon), 0)

    freq = frequency if frequency is not None else detect_frequency(timestamps)
    logger.info("Forecasting %d points, horizon=%d, frequency=%s (period=%d)", y.size, steps, freq.kind, freq.period)

    stats = SearchStats()
    best = grid_search(y, steps, freq, grid=grid or DEFAULT_GRID, timeout=timeout, stats=stats)

    logger.info(
        "Selected %s %s after %d candidates",
        best.method,
        best.params.as_dict(),
        stats.total,
    )
    return ForecastOutcome(
        method=best.method,
        horizon=steps,
        params=best.params,
        fitted=best.result.fitted,
        forecast=best.result.forecast,
        residuals=best.result.residuals,
    )
