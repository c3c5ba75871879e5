from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# LOG_LEVEL: 0 silences everything, 1 is INFO, 2 is DEBUG.
LEVEL_MAP = {
    0: logging.CRITICAL + 1,
    1: logging.INFO,
    2: logging.DEBUG,
}


def resolve_level(raw_level: Optional[str]) -> int:
    try:
        log_level = int(raw_level) if raw_level is not None else 1
    except ValueError:
        log_level = 1
    return LEVEL_MAP.get(log_level, logging.ERROR)


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    if level is None:
        level = os.environ.get("LOG_LEVEL")
    if log_file is None:
        log_file = os.environ.get("LOG_FILE")

    resolved = resolve_level(level)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(resolved)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.touch()
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(resolved)
    root_logger.addHandler(handler)
    return root_logger
