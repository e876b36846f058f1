"""src/holtcast/io/__init__.py"""
from .readers import parse_dates, read_csv, read_series_csv, to_series
from .writers import ensure_parent_dir, write_csv, write_forecast_artifact, write_json

__all__ = [
    "parse_dates",
    "read_csv",
    "read_series_csv",
    "to_series",
    "ensure_parent_dir",
    "write_csv",
    "write_json",
    "write_forecast_artifact",
]
