"""src/holtcast/modeling/selection.py"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Literal

import numpy as np

from holtcast.features.frequency import FrequencyClassification
from holtcast.modeling.evaluation import sse
from holtcast.modeling.grid import DEFAULT_GRID, ParameterGrid, SmoothingParams
from holtcast.modeling.holt import SmoothingResult, holt_linear
from holtcast.modeling.holt_winters import holt_winters_additive


logger = logging.getLogger(__name__)

Method = Literal["holt_winters_additive", "holt_linear"]

HOLT_WINTERS_ADDITIVE: Method = "holt_winters_additive"
HOLT_LINEAR: Method = "holt_linear"

FALLBACK_PARAMS = SmoothingParams(alpha=0.2, beta=0.1)


@dataclass(frozen=True)
class Candidate:
    method: Method
    params: SmoothingParams
    result: SmoothingResult
    score: float


@dataclass
class SearchStats:
    """Counters filled in by grid_search, mostly for logging and tests."""
    seasonal_evaluated: int = 0
    trend_evaluated: int = 0
    timed_out: bool = False

    @property
    def total(self) -> int:
        return self.seasonal_evaluated + self.trend_evaluated


def _evaluate(method: Method, params: SmoothingParams, y: np.ndarray, horizon: int) -> Candidate:
    if method == HOLT_WINTERS_ADDITIVE:
        result = holt_winters_additive(
            y,
            horizon,
            int(params.season_length or 0),
            params.alpha,
            params.beta,
            float(params.gamma or 0.0),
        )
    else:
        result = holt_linear(y, horizon, params.alpha, params.beta)
    return Candidate(method=method, params=params, result=result, score=sse(y, result.fitted))


def grid_search(
    series: Iterable[float],
    horizon: int,
    frequency: FrequencyClassification,
    *,
    grid: ParameterGrid = DEFAULT_GRID,
    timeout: float | None = None,
    stats: SearchStats | None = None,
) -> Candidate:
    """
    Exhaustive search over the coefficient grid, minimizing in-sample SSE.

    Order: seasonal grid first (only when a period was detected), then the
    trend grid. A candidate replaces the running best only if its score is
    strictly lower, so ties go to the earliest candidate.

    timeout (seconds) stops the search early and keeps the best so far.
    """
    y = np.asarray(list(series), dtype=float)
    stats = stats if stats is not None else SearchStats()

    plan: list[tuple[Method, SmoothingParams]] = []
    if frequency.is_seasonal:
        plan.extend((HOLT_WINTERS_ADDITIVE, p) for p in grid.seasonal(frequency.period))
    plan.extend((HOLT_LINEAR, p) for p in grid.trend())

    started = time.monotonic()
    best: Candidate | None = None

    for method, params in plan:
        cand = _evaluate(method, params, y, horizon)
        if method == HOLT_WINTERS_ADDITIVE:
            stats.seasonal_evaluated += 1
        else:
            stats.trend_evaluated += 1

        if best is None or cand.score < best.score:
            best = cand

        if timeout is not None and (time.monotonic() - started) >= timeout:
            stats.timed_out = True
            logger.warning(
                "Grid search stopped after %d/%d candidates (timeout=%.3fs)",
                stats.total,
                len(plan),
                timeout,
            )
            break

    if best is None:
        # Only reachable with an empty grid
        logger.warning("No grid candidates evaluated; using holt_linear alpha=0.2 beta=0.1")
        best = _evaluate(HOLT_LINEAR, FALLBACK_PARAMS, y, horizon)

    logger.debug(
        "Grid search: %d seasonal + %d trend candidates; best=%s %s SSE=%.6g",
        stats.seasonal_evaluated,
        stats.trend_evaluated,
        best.method,
        best.params.as_dict(),
        best.score,
    )
    return best
