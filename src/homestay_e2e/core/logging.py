"""Logging helpers."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_FILENAME = "e2e.log"
_NOISY_LOGGERS = ("asyncio",)


def configure_logging(
    level: str, log_dir: Path, *, quiet_loggers: Iterable[str] = _NOISY_LOGGERS
) -> Path:
    """Configure logging for manual runs outside pytest; return the log file path.

    Under pytest the same format comes from ``log_format`` in pyproject.toml.
    """
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level {level!r}")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILENAME

    logging.basicConfig(
        level=resolved,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, encoding="utf-8"),
        ],
    )
    for name in quiet_loggers:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))
    return log_file
