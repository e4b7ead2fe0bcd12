from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from intern_tracker.core.exceptions import ConfigError
from intern_tracker.logging_config import LOG_FORMAT_ENV

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "INTERN_TRACKER_LOG_LEVEL"

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
VALID_LOG_FORMATS = {"json", "plain"}


@dataclass
class AppConfig:
    """
    Application-level settings (as opposed to UserPrefs, which the user changes through the UI).

    - log_level: name of a logging level
    - log_format: "json" or "plain", passed to configure_logging
    - user_prefs_path: where preferences.json lives
    """
    log_level: str = "INFO"
    log_format: str = "json"
    user_prefs_path: Path = field(default_factory=lambda: Path("preferences.json"))


def validate_config(config: AppConfig) -> None:
    if config.log_level not in VALID_LOG_LEVELS:
        raise ConfigError(f"log_level must be one of {sorted(VALID_LOG_LEVELS)}, got '{config.log_level}'")
    if config.log_format not in VALID_LOG_FORMATS:
        raise ConfigError(f"log_format must be one of {sorted(VALID_LOG_FORMATS)}, got '{config.log_format}'")


def load_config(path: str | Path) -> AppConfig:
    """
    Load config.json, falling back to defaults for a missing file or missing keys.

    Environment variables INTERN_TRACKER_LOG_LEVEL / INTERN_TRACKER_LOG_FORMAT win over the file.
    A relative user_prefs_path is resolved against the config file's directory.

    :raises ConfigError: if the file is not valid JSON or holds invalid values
    """
    config_path = Path(path)
    raw: dict = {}

    if config_path.is_file():
        try:
            raw = json.loads(config_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{config_path} is not valid JSON: {exc}") from exc
        if not isinstance(raw, dict):
            raise ConfigError(f"{config_path} must contain a JSON object")
    else:
        logger.info("Config file not found, using defaults", extra={"config_path": str(config_path)})

    prefs_path = Path(raw.get("user_prefs_path", "preferences.json"))
    if not prefs_path.is_absolute():
        prefs_path = config_path.parent / prefs_path

    config = AppConfig(
        log_level=str(os.getenv(LOG_LEVEL_ENV, raw.get("log_level", "INFO"))).upper(),
        log_format=str(os.getenv(LOG_FORMAT_ENV, raw.get("log_format", "json"))).lower(),
        user_prefs_path=prefs_path,
    )
    validate_config(config)
    return config
