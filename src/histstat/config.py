"""Configuration management using TOML + environment variables."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomllib
    except ModuleNotFoundError:
        import tomli as tomllib  # type: ignore[no-redef]

from histstat.errors import ConfigError
from histstat.services.locator import HISTORY_KEYWORD, KNOWN_SHELLS
from histstat.utils.formatting import DEFAULT_COUNT

CONFIG_DIR_NAME = ".histstat"
CONFIG_FILE_NAME = "config.toml"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class DisplayConfig:
    count: int = DEFAULT_COUNT
    table: bool = False


@dataclass
class LocatorConfig:
    keyword: str = HISTORY_KEYWORD
    shells: list[str] = field(default_factory=lambda: list(KNOWN_SHELLS))


@dataclass
class LoggingConfig:
    level: str = "WARNING"


@dataclass
class AppConfig:
    display: DisplayConfig = field(default_factory=DisplayConfig)
    locator: LocatorConfig = field(default_factory=LocatorConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def config_path(home: Path) -> Path:
    """Return the config file location, honouring HISTSTAT_CONFIG."""
    if env_path := os.environ.get("HISTSTAT_CONFIG"):
        return Path(env_path).expanduser()
    return home / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _parse_count(value: object, source: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{source} must be an integer, got {value!r}")
    try:
        count = int(value)  # type: ignore[call-overload]
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{source} must be an integer, got {value!r}") from e
    if count < 0:
        raise ConfigError(f"{source} must not be negative, got {count}")
    return count


def _parse_flag(value: object, source: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{source} must be true or false, got {value!r}")
    return value


def _parse_level(value: object, source: str) -> str:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        raise ConfigError(f"{source} must be one of {', '.join(LOG_LEVELS)}, got {value!r}")
    return level


def load_config(path: Path | None = None) -> AppConfig:
    """Load configuration from TOML file with env var overrides.

    A missing file yields the defaults. The file is never written.
    """
    config = AppConfig()

    if path is not None and path.is_file():
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid config file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"cannot read config file {path}: {e}") from e

        display = data.get("display", {})
        if "count" in display:
            config.display.count = _parse_count(display["count"], "display.count")
        if "table" in display:
            config.display.table = _parse_flag(display["table"], "display.table")

        locator = data.get("locator", {})
        config.locator.keyword = str(locator.get("keyword", config.locator.keyword))
        shells = locator.get("shells", config.locator.shells)
        if not isinstance(shells, list) or not shells:
            raise ConfigError("locator.shells must be a non-empty list of names")
        config.locator.shells = [str(s) for s in shells]

        logging_cfg = data.get("logging", {})
        if "level" in logging_cfg:
            config.logging.level = _parse_level(logging_cfg["level"], "logging.level")

    # Environment variable overrides
    if env_count := os.environ.get("HISTSTAT_COUNT"):
        config.display.count = _parse_count(env_count, "HISTSTAT_COUNT")
    if env_log_level := os.environ.get("HISTSTAT_LOG_LEVEL"):
        config.logging.level = _parse_level(env_log_level, "HISTSTAT_LOG_LEVEL")

    return config
