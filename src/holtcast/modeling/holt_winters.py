"""src/holtcast/modeling/holt_winters.py"""

from __future__ import annotations

import logging
from typing import Iterable

import numpy as np

from holtcast.modeling.holt import SmoothingResult, holt_linear


logger = logging.getLogger(__name__)


def initial_seasonals(y: np.ndarray, season_length: int) -> np.ndarray:
    """
    Initial additive seasonal indices.

    The series is cut into floor(n / season_length) complete seasons. The index
    for offset i is the mean, across seasons, of y at that offset minus the
    season's own mean. Offsets without data get 0.
    """
    n = y.size
    n_seasons = n // season_length
    season_means = [
        float(np.mean(y[s * season_length:min((s + 1) * season_length, n)]))
        for s in range(n_seasons)
    ]

    seasonals = np.zeros(season_length, dtype=float)
    for i in range(season_length):
        total = 0.0
        count = 0
        for s in range(n_seasons):
            idx = s * season_length + i
            if idx < n:
                total += float(y[idx]) - season_means[s]
                count += 1
        seasonals[i] = total / count if count > 0 else 0.0
    return seasonals


def holt_winters_additive(
    series: Iterable[float],
    horizon: int,
    season_length: int,
    alpha: float,
    beta: float,
    gamma: float,
) -> SmoothingResult:
    """
    Triple exponential smoothing with additive seasonality.

    Needs at least season_length + 2 points; shorter series are handed to
    holt_linear with the same alpha/beta (gamma unused).

    The seasonal array is updated in place while walking the series, so the
    index used at step t is the one left by step t - season_length.
    """
    y = np.asarray(list(series), dtype=float)
    n = y.size
    season_length = int(season_length)

    if season_length < 1 or n < season_length + 2:
        logger.debug("n=%d too short for season_length=%d; using holt_linear", n, season_length)
        return holt_linear(y, horizon, alpha, beta)

    steps = max(int(horizon), 0)
    seasonals = initial_seasonals(y, season_length)

    level = float(y[0] - seasonals[0])
    trend = float((y[season_length] - y[0]) / season_length)

    fitted = np.empty(n, dtype=float)
    residuals = np.empty(n, dtype=float)

    for t in range(n):
        season_idx = t % season_length
        value = float(y[t])
        prev_level = level
        prev_season = seasonals[season_idx]
        level = alpha * (value - prev_season) + (1.0 - alpha) * (level + trend)
        trend = beta * (level - prev_level) + (1.0 - beta) * trend
        seasonals[season_idx] = gamma * (value - level) + (1.0 - gamma) * prev_season
        fitted[t] = level + trend + seasonals[season_idx]
        residuals[t] = value - fitted[t]

    forecast = np.empty(steps, dtype=float)
    for i in range(1, steps + 1):
        forecast[i - 1] = level + i * trend + seasonals[(n + i - 1) % season_length]

    return SmoothingResult(fitted=fitted, forecast=forecast, residuals=residuals)
