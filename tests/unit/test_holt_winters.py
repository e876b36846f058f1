"""tests/unit/test_holt_winters.py"""

from __future__ import annotations

import numpy as np
import pytest

import holtcast.modeling.holt_winters as hw_mod
from holtcast.modeling.holt import holt_linear
from holtcast.modeling.holt_winters import holt_winters_additive, initial_seasonals


def test_initial_seasonals_average_deviation_from_season_mean() -> None:
    # two seasons of length 3: means 2 and 5
    y = np.array([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 100.0])  # trailing partial season ignored
    s = initial_seasonals(y, 3)
    np.testing.assert_allclose(s, [-1.0, 0.0, 1.0])


def test_short_series_falls_back_to_holt(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[float, float]] = []

    def spy(series, horizon, alpha, beta):
        calls.append((alpha, beta))
        return holt_linear(series, horizon, alpha, beta)

    monkeypatch.setattr(hw_mod, "holt_linear", spy)

    y = [float(v) for v in range(8)]  # season_length 7 needs 9 points
    res = holt_winters_additive(y, horizon=3, season_length=7, alpha=0.3, beta=0.1, gamma=0.2)
    expected = holt_linear(y, 3, 0.3, 0.1)

    assert calls == [(0.3, 0.1)]
    np.testing.assert_array_equal(res.fitted, expected.fitted)
    np.testing.assert_array_equal(res.forecast, expected.forecast)
    np.testing.assert_array_equal(res.residuals, expected.residuals)


@pytest.mark.parametrize("n", [0, 1, 2])
def test_degenerate_lengths_never_raise(n: int) -> None:
    y = [5.0] * n
    res = holt_winters_additive(y, horizon=2, season_length=4, alpha=0.5, beta=0.1, gamma=0.1)
    assert res.fitted.size == n
    assert res.forecast.size == 2


def test_minimum_length_runs_seasonal_path(monkeypatch: pytest.MonkeyPatch) -> None:
    def fail(*args, **kwargs):
        raise AssertionError("holt_linear fallback should not be used")

    monkeypatch.setattr(hw_mod, "holt_linear", fail)
    y = [3.0, 5.0, 4.0, 6.0, 8.0, 7.0, 9.0, 11.0, 10.0]  # season 7 + 2
    res = holt_winters_additive(y, horizon=7, season_length=7, alpha=0.2, beta=0.1, gamma=0.1)
    assert res.fitted.size == 9
    assert res.forecast.size == 7
    np.testing.assert_allclose(res.fitted + res.residuals, y, atol=1e-12)


def test_recurrence_by_hand() -> None:
    # season_length=2, y=[1, 3, 2, 4], alpha=beta=gamma=0.5
    # seasons: [1,3] mean 2, [2,4] mean 3 -> seasonal = [-1, 1]
    # level0 = 1 - (-1) = 2, trend0 = (2 - 1) / 2 = 0.5
    # t0 idx0: level=0.5*(1+1)+0.5*2.5=2.25  trend=0.5*0.25+0.5*0.5=0.375
    #          s0=0.5*(1-2.25)+0.5*(-1)=-1.125  fitted=2.25+0.375-1.125=1.5
    # t1 idx1: level=0.5*(3-1)+0.5*2.625=2.3125  trend=0.5*0.0625+0.5*0.375=0.21875
    #          s1=0.5*(3-2.3125)+0.5*1=0.84375  fitted=2.3125+0.21875+0.84375=3.375
    res = holt_winters_additive([1.0, 3.0, 2.0, 4.0], horizon=2, season_length=2, alpha=0.5, beta=0.5, gamma=0.5)
    np.testing.assert_allclose(res.fitted[:2], [1.5, 3.375])
    np.testing.assert_allclose(res.residuals[:2], [-0.5, -0.375])


def test_forecast_uses_cyclic_seasonal_index() -> None:
    # constant level, pure seasonal pattern, gamma=0 keeps indices fixed
    pattern = [-2.0, 0.0, 2.0]
    y = [10.0 + pattern[t % 3] for t in range(12)]
    res = holt_winters_additive(y, horizon=6, season_length=3, alpha=0.5, beta=0.1, gamma=0.0)
    np.testing.assert_allclose(res.fitted, y, atol=1e-9)
    # n=12 -> first forecast step uses index (12 + 1 - 1) % 3 = 0
    np.testing.assert_allclose(res.forecast, [8.0, 10.0, 12.0, 8.0, 10.0, 12.0], atol=1e-9)


def test_outputs_finite_for_finite_input(weekly_pattern_series: list[float]) -> None:
    res = holt_winters_additive(weekly_pattern_series, horizon=14, season_length=7, alpha=0.8, beta=0.3, gamma=0.2)
    assert np.isfinite(res.fitted).all()
    assert np.isfinite(res.forecast).all()
    np.testing.assert_allclose(res.fitted + res.residuals, weekly_pattern_series, atol=1e-9)
