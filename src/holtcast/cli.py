"""src/holtcast/cli.py"""

from __future__ import annotations

from typing import Optional

import typer
from rich import print

from holtcast.common.config import load_config
from holtcast.common.logging import setup_logging
from holtcast.features.frequency import detect_frequency
from holtcast.io.readers import read_series_csv, to_series
from holtcast.pipelines.run_forecast import run_forecast

app = typer.Typer(help="Holt / Holt-Winters auto-forecasting CLI")

DEFAULT_CONFIG = "configs/config.yaml"


@app.command()
def forecast(
    input_path: str = typer.Argument(..., help="CSV with a date column and a value column"),
    horizon: Optional[int] = typer.Option(None, help="Steps to forecast (1..365); defaults to forecast.horizon"),
    output_dir: Optional[str] = typer.Option(None, help="Where to write artifacts; defaults to paths.forecasts_dir"),
    date_col: Optional[str] = typer.Option(None, help="Date column name (default: date/ds/timestamp/time)"),
    value_col: Optional[str] = typer.Option(None, help="Value column name (default: value/y/target)"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Fit Holt and Holt-Winters over the coefficient grid and forecast the best one."""
    cfg = load_config(config_path)
    setup_logging(cfg)
    cfg.ensure_directories()

    try:
        run = run_forecast(
            cfg,
            input_path,
            horizon=horizon,
            output_dir=output_dir,
            date_col=date_col,
            value_col=value_col,
        )
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"[bold red]Forecast failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    summary = run.summary()
    print("[bold green]Forecasting complete.[/bold green]")
    print(f"Frequency: {summary['frequency']['kind']} (period={summary['frequency']['period']})")
    print(f"Method: [bold]{summary['method']}[/bold] {summary['params']}")
    print(f"In-sample RMSE: {summary['in_sample']['RMSE']:.4f}  MAE: {summary['in_sample']['MAE']:.4f}")
    print(f"  - {run.table_path}")
    print(f"  - {run.summary_path}")


@app.command()
def detect(
    input_path: str = typer.Argument(..., help="CSV with a date column and a value column"),
    date_col: Optional[str] = typer.Option(None, help="Date column name"),
    value_col: Optional[str] = typer.Option(None, help="Value column name"),
    config_path: str = typer.Option(DEFAULT_CONFIG, help="Path to YAML config"),
) -> None:
    """Print the detected sampling frequency and seasonal period."""
    cfg = load_config(config_path)
    setup_logging(cfg)

    try:
        timestamps, _ = to_series(read_series_csv(cfg.project_root / input_path, date_col=date_col, value_col=value_col))
    except (FileNotFoundError, KeyError, ValueError) as e:
        print(f"[bold red]Detection failed:[/bold red] {e}")
        raise typer.Exit(code=1)

    freq = detect_frequency(timestamps)
    print(f"{len(timestamps)} timestamps -> [bold]{freq.kind}[/bold] (period={freq.period})")


if __name__ == "__main__":
    app()
