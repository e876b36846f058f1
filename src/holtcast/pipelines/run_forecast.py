"""src/holtcast/pipelines/run_forecast.py"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from holtcast.common.config import AppConfig
from holtcast.features.frequency import FrequencyClassification, detect_frequency
from holtcast.forecasting.auto import ForecastOutcome, auto_forecast
from holtcast.forecasting.horizon import forecast_frame
from holtcast.io.readers import read_series_csv, to_series
from holtcast.io.writers import write_forecast_artifact, write_json
from holtcast.modeling.evaluation import MetricPack, compute_metrics
from holtcast.modeling.grid import ParameterGrid
from holtcast.validation.checks import build_request, validate_df
from holtcast.validation.schemas import FORECAST_FRAME


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ForecastRun:
    outcome: ForecastOutcome
    frequency: FrequencyClassification
    metrics: MetricPack
    table_path: Path
    summary_path: Path

    def summary(self) -> dict[str, Any]:
        return {
            "method": self.outcome.method,
            "horizon": int(self.outcome.horizon),
            "frequency": {"kind": self.frequency.kind, "period": int(self.frequency.period)},
            "params": self.outcome.params.as_dict(),
            "in_sample": self.metrics.as_dict(),
            "forecast": [float(v) for v in self.outcome.forecast],
        }


def _resolve(cfg: AppConfig, maybe_path: str | Path) -> Path:
    """Resolve relative paths against project_root."""
    p = Path(maybe_path)
    return p if p.is_absolute() else (cfg.project_root / p).resolve()


def run_forecast(
    cfg: AppConfig,
    input_path: str | Path,
    *,
    horizon: int | None = None,
    output_dir: str | Path | None = None,
    date_col: str | None = None,
    value_col: str | None = None,
) -> ForecastRun:
    """
    CSV in, forecast artifacts out:
      1) read + clean the series (date/value aliases, sorted)
      2) validate the request (lengths, finite values, horizon range)
      3) auto_forecast: frequency detection + grid search
      4) write <stem>_forecast.csv (fit + forecast rows) and <stem>_forecast.json
    """
    input_path = _resolve(cfg, input_path)
    steps = int(horizon) if horizon is not None else cfg.horizon

    if output_dir is not None:
        out_dir = _resolve(cfg, output_dir)
    else:
        out_dir = cfg.paths.get("forecasts_dir", cfg.project_root / "artifacts" / "forecasts")
    out_dir.mkdir(parents=True, exist_ok=True)

    series_df = read_series_csv(input_path, date_col=date_col, value_col=value_col)
    timestamps, values = to_series(series_df)
    request = build_request(timestamps, values, steps)
    logger.info("Loaded %d observations from %s", len(request.values), input_path)

    frequency = detect_frequency(request.timestamps)
    outcome = auto_forecast(
        request.values,
        request.timestamps,
        request.horizon,
        grid=ParameterGrid.from_mapping(cfg.grid),
        timeout=cfg.timeout_seconds,
        frequency=frequency,
    )
    metrics = compute_metrics(request.values, outcome.fitted)

    table = forecast_frame(outcome, request.timestamps, request.values, frequency)
    validate_df(table, schema=FORECAST_FRAME, min_rows=len(request.values) + request.horizon).raise_if_failed()

    stem = input_path.stem
    table_path = write_forecast_artifact(table, out_dir / f"{stem}_forecast.csv")

    run = ForecastRun(
        outcome=outcome,
        frequency=frequency,
        metrics=metrics,
        table_path=table_path,
        summary_path=out_dir / f"{stem}_forecast.json",
    )
    write_json(run.summary(), run.summary_path)

    logger.info("Forecasting complete.")
    logger.info("Saved forecast table: %s", table_path)
    logger.info("Saved forecast summary: %s", run.summary_path)
    return run
