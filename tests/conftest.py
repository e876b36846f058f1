"""tests/conftest.py"""

from __future__ import annotations

from datetime import date, timedelta
from pathlib import Path

import pandas as pd
import pytest
import yaml

from holtcast.common.config import AppConfig, load_config


def iso_dates(n: int, *, step_days: int = 1, start: date = date(2024, 1, 1)) -> list[str]:
    return [(start + timedelta(days=step_days * i)).isoformat() for i in range(n)]


def monthly_dates(n: int, *, start: str = "2020-01-01") -> list[str]:
    return [d.date().isoformat() for d in pd.date_range(start, periods=n, freq="MS")]


@pytest.fixture
def oscillating_series() -> list[float]:
    # period-4-like pattern with an upward drift
    return [10.0, 12.0, 13.0, 12.0, 15.0, 16.0, 17.0, 16.0, 19.0, 20.0, 21.0, 20.0]


@pytest.fixture
def weekly_pattern_series() -> list[float]:
    week = [5.0, 7.0, 9.0, 8.0, 6.0, 3.0, 2.0]
    return [v + 0.25 * i for i, v in enumerate(week * 4)]


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    # Emulate repository root in temp dir
    (tmp_path / "configs").mkdir(parents=True, exist_ok=True)
    (tmp_path / "data").mkdir(parents=True, exist_ok=True)
    return tmp_path


def write_config(project_root: Path, **forecast_overrides) -> Path:
    raw = {
        "paths": {"forecasts_dir": "artifacts/forecasts"},
        "logging": {"level": "DEBUG"},
        "forecast": {"horizon": 7, "timeout_seconds": None, **forecast_overrides},
    }
    path = project_root / "configs" / "config.yaml"
    path.write_text(yaml.safe_dump(raw), encoding="utf-8")
    return path


@pytest.fixture
def cfg(project_root: Path) -> AppConfig:
    return load_config(write_config(project_root))


def write_series_csv(path: Path, dates: list[str], values: list[float], *, headers: tuple[str, str] = ("date", "value")) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame({headers[0]: dates, headers[1]: values}).to_csv(path, index=False)
    return path
