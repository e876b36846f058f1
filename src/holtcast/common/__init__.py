"""src/holtcast/common/__init__.py"""

from .config import AppConfig, load_config
from .logging import setup_logging

__all__ = [
    "AppConfig",
    "load_config",
    "setup_logging",
]
