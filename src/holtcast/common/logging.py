"""src/holtcast/common/logging.py"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from holtcast.common.config import AppConfig


# capped at WARNING unless `logging.quiet` replaces the list
DEFAULT_QUIET_LOGGERS: tuple[str, ...] = ("asyncio",)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(value: object, default: int = logging.INFO) -> int:
    return getattr(logging, str(value).upper(), default) if value is not None else default


def setup_logging(cfg: AppConfig) -> Path | None:
    """
    Configure root logging from the `logging:` config section.

        level: INFO
        file: artifacts/logs/holtcast.log   # optional, rotated at ~2 MB
        quiet: [asyncio]                    # loggers capped at WARNING

    Returns the resolved log file path, if any.
    """
    level = _resolve_level(cfg.logging.get("level", "INFO"))

    handlers: list[logging.Handler] = []

    console = logging.StreamHandler()
    console.setLevel(level)
    handlers.append(console)

    lf: Path | None = None
    log_file = cfg.logging.get("file")
    if log_file:
        lf = (cfg.project_root / Path(log_file)).resolve()
        lf.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(lf, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
        file_handler.setLevel(level)
        handlers.append(file_handler)

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    quiet = cfg.logging.get("quiet", DEFAULT_QUIET_LOGGERS) or ()
    for name in quiet:
        logging.getLogger(str(name)).setLevel(max(level, logging.WARNING))

    logging.getLogger("holtcast").debug("Logging configured: level=%s file=%s", logging.getLevelName(level), lf)
    return lf
