"""src/holtcast/features/frequency.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal, Sequence

import numpy as np
import pandas as pd


logger = logging.getLogger(__name__)

FrequencyKind = Literal["daily", "weekly", "monthly", "unknown"]


@dataclass(frozen=True)
class FrequencyClassification:
    """
    Detected sampling frequency and the seasonal period used for modeling.

    period == 0 means no seasonal model should be attempted.
    """
    kind: FrequencyKind
    period: int

    @property
    def is_seasonal(self) -> bool:
        return self.period > 0


DAILY = FrequencyClassification(kind="daily", period=7)
WEEKLY = FrequencyClassification(kind="weekly", period=52)
MONTHLY = FrequencyClassification(kind="monthly", period=12)
UNKNOWN = FrequencyClassification(kind="unknown", period=0)

# (low, high) open bounds on the median gap in days; first match wins.
_GAP_BANDS: tuple[tuple[float, float, FrequencyClassification], ...] = (
    (25.0, 32.0, MONTHLY),
    (6.0, 8.0, WEEKLY),
    (0.9, 1.2, DAILY),
)

_EPOCH = pd.Timestamp("1970-01-01", tz="UTC")


def to_day_instants(timestamps: Sequence[Any]) -> np.ndarray:
    """
    Parse timestamps into fractional days since the epoch (UTC).

    Unparseable entries become NaN instead of raising.
    """
    parsed = pd.to_datetime(
        pd.Series(list(timestamps), dtype="object"),
        errors="coerce",
        utc=True,
        format="ISO8601",
    )
    days = (parsed - _EPOCH) / pd.Timedelta(days=1)
    return days.to_numpy(dtype=float, na_value=np.nan)


def gap_days(timestamps: Sequence[Any]) -> np.ndarray:
    """Finite gaps in days between successive sorted instants."""
    instants = np.sort(to_day_instants(timestamps))
    gaps = np.diff(instants)
    return gaps[np.isfinite(gaps)]


def detect_frequency(timestamps: Sequence[Any]) -> FrequencyClassification:
    """
    Classify the sampling frequency from the median spacing of timestamps.

    The bands are loose on purpose so weekends and holidays in daily data,
    or 28..31 day months, still land in the right bucket.
    """
    if len(timestamps) < 3:
        return UNKNOWN

    gaps = gap_days(timestamps)
    if gaps.size == 0:
        return UNKNOWN

    median = float(np.median(gaps))
    for low, high, freq in _GAP_BANDS:
        if low < median < high:
            logger.debug("Median gap %.3f days -> %s (period=%d)", median, freq.kind, freq.period)
            return freq

    logger.debug("Median gap %.3f days matched no frequency band", median)
    return UNKNOWN
