"""
Runtime settings read from the environment (and a local .env file, if present).
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from api.client import API_URL_ENV, DEFAULT_API_URL
from data.storage import default_session_dir

TIMEOUT_ENV = "SPACETRADERS_TIMEOUT"
LOG_LEVEL_ENV = "LOG_LEVEL"


class ConfigError(Exception):
    """An environment setting has a value that cannot be used."""


@dataclass
class Settings:
    api_url: str = DEFAULT_API_URL
    session_dir: str = ""
    timeout: float = 30.0
    log_level: str = "WARNING"


def _timeout_from_env() -> float:
    raw = os.getenv(TIMEOUT_ENV, "30")
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigError(f"{TIMEOUT_ENV} must be a number of seconds, got {raw!r}")
    if timeout <= 0:
        raise ConfigError(f"{TIMEOUT_ENV} must be positive, got {raw!r}")
    return timeout


def _log_level_from_env() -> str:
    level = os.getenv(LOG_LEVEL_ENV, "WARNING").upper()
    # getLevelName maps known names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigError(f"{LOG_LEVEL_ENV} must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL; got {level!r}")
    return level


def load_settings() -> Settings:
    load_dotenv()
    return Settings(
        api_url=os.getenv(API_URL_ENV) or DEFAULT_API_URL,
        session_dir=default_session_dir(),
        timeout=_timeout_from_env(),
        log_level=_log_level_from_env(),
    )
