"""src/holtcast/modeling/__init__.py"""

from .evaluation import MetricPack, compute_metrics, sse
from .grid import DEFAULT_GRID, ParameterGrid, SmoothingParams
from .holt import SmoothingResult, holt_linear
from .holt_winters import holt_winters_additive
from .selection import HOLT_LINEAR, HOLT_WINTERS_ADDITIVE, Candidate, SearchStats, grid_search

__all__ = [
    "SmoothingResult",
    "holt_linear",
    "holt_winters_additive",
    "SmoothingParams",
    "ParameterGrid",
    "DEFAULT_GRID",
    "MetricPack",
    "compute_metrics",
    "sse",
    "Candidate",
    "SearchStats",
    "grid_search",
    "HOLT_LINEAR",
    "HOLT_WINTERS_ADDITIVE",
]
