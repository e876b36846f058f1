"""src/holtcast/modeling/evaluation.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np


def _to_valid_arrays(y_true: Iterable[float], y_pred: Iterable[float]) -> tuple[np.ndarray, np.ndarray]:
    yt = np.asarray(list(y_true), dtype=float)
    yp = np.asarray(list(y_pred), dtype=float)
    valid = np.isfinite(yt) & np.isfinite(yp)
    return yt[valid], yp[valid]


def sse(observed: np.ndarray, fitted: np.ndarray) -> float:
    """Sum of squared in-sample errors; used to rank grid candidates."""
    total = 0.0
    for y, f in zip(observed, fitted):
        e = float(y) - float(f)
        total += e * e
    return total


def rmse(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.sqrt(np.mean((y_true - y_pred) ** 2)))


def mae(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    return float(np.mean(np.abs(y_true - y_pred)))


def smape(y_true: np.ndarray, y_pred: np.ndarray) -> float:
    if y_true.size == 0:
        return float("nan")
    denom = (np.abs(y_true) + np.abs(y_pred)) / 2.0
    denom = np.where(denom == 0, 1.0, denom)
    return float(np.mean(np.abs(y_true - y_pred) / denom) * 100.0)


@dataclass(frozen=True)
class MetricPack:
    sse: float
    rmse: float
    mae: float
    smape: float

    def as_dict(self) -> dict[str, float]:
        # Keep stable key names for JSON/CSV exports
        return {
            "SSE": float(self.sse),
            "RMSE": float(self.rmse),
            "MAE": float(self.mae),
            "SMAPE": float(self.smape),
        }


def compute_metrics(y_true: Iterable[float], y_pred: Iterable[float]) -> MetricPack:
    yt, yp = _to_valid_arrays(y_true, y_pred)
    return MetricPack(
        sse=sse(yt, yp),
        rmse=rmse(yt, yp),
        mae=mae(yt, yp),
        smape=smape(yt, yp),
    )
