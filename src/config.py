from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    seed_data: bool = True
    log_level: str = "1"
    log_file: Optional[str] = None


def _parse_port(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PORT
    try:
        port = int(raw)
    except (ValueError, TypeError) as e:
        logger.warning(f"Invalid PORT value: {raw}. Error: {e}. Using default: {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 1 <= port <= 65535:
        logger.warning(f"PORT value {port} is out of range (1-65535). Using default: {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


def _parse_bool(name: str, raw: Optional[str], default: bool) -> bool:
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    logger.warning(f"Invalid {name} value: {raw}. Using default: {default}")
    return default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    env = os.environ if environ is None else environ
    return Settings(
        host=env.get("HOST") or DEFAULT_HOST,
        port=_parse_port(env.get("PORT")),
        seed_data=_parse_bool("SEED_DATA", env.get("SEED_DATA"), True),
        log_level=env.get("LOG_LEVEL", "1"),
        log_file=env.get("LOG_FILE") or None,
    )
