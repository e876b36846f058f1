"""src/holtcast/modeling/grid.py"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Mapping

DEFAULT_ALPHAS: tuple[float, ...] = (0.1, 0.2, 0.3, 0.5, 0.8)
DEFAULT_BETAS: tuple[float, ...] = (0.05, 0.1, 0.2, 0.3)
DEFAULT_GAMMAS: tuple[float, ...] = (0.05, 0.1, 0.2)


@dataclass(frozen=True)
class SmoothingParams:
    """Smoothing coefficients; gamma/season_length only set for Holt-Winters."""
    alpha: float
    beta: float
    gamma: float | None = None
    season_length: int | None = None

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"alpha": float(self.alpha), "beta": float(self.beta)}
        if self.gamma is not None:
            out["gamma"] = float(self.gamma)
        if self.season_length is not None:
            out["season_length"] = int(self.season_length)
        return out


@dataclass(frozen=True)
class ParameterGrid:
    """
    Coefficient grids for the exhaustive search.

    Iteration order is part of the contract: ties are resolved in favour of
    whichever candidate is produced first.
    """
    alphas: tuple[float, ...] = DEFAULT_ALPHAS
    betas: tuple[float, ...] = DEFAULT_BETAS
    gammas: tuple[float, ...] = DEFAULT_GAMMAS

    def seasonal(self, season_length: int) -> Iterator[SmoothingParams]:
        for alpha in self.alphas:
            for beta in self.betas:
                for gamma in self.gammas:
                    yield SmoothingParams(alpha=alpha, beta=beta, gamma=gamma, season_length=season_length)

    def trend(self) -> Iterator[SmoothingParams]:
        for alpha in self.alphas:
            for beta in self.betas:
                yield SmoothingParams(alpha=alpha, beta=beta)

    @property
    def n_seasonal(self) -> int:
        return len(self.alphas) * len(self.betas) * len(self.gammas)

    @property
    def n_trend(self) -> int:
        return len(self.alphas) * len(self.betas)

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any] | None) -> "ParameterGrid":
        """Build a grid from config keys alpha/beta/gamma; absent keys keep defaults."""
        if not overrides:
            return DEFAULT_GRID

        def _pick(key: str, default: tuple[float, ...]) -> tuple[float, ...]:
            values = overrides.get(key)
            if not values:
                return default
            return tuple(float(v) for v in values)

        return cls(
            alphas=_pick("alpha", DEFAULT_ALPHAS),
            betas=_pick("beta", DEFAULT_BETAS),
            gammas=_pick("gamma", DEFAULT_GAMMAS),
        )


DEFAULT_GRID = ParameterGrid()
