"""Configuration management for Daily Hub."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

DAILYHUB_HOME = Path(os.environ.get("DAILYHUB_HOME", Path.home() / "dailyhub"))
CONFIG_FILE = DAILYHUB_HOME / "config" / "dailyhub.conf"

TAB_NAMES = ("notes", "tasks", "calendar")
TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class Config:
    """Daily Hub configuration."""

    initial_tab: str = "notes"
    fade_duration_ms: int = 400
    animations: bool = True
    strict_toggle: bool = False
    # Telegram bot settings
    telegram_bot_token: str = ""
    telegram_allowed_users: list[int] = field(default_factory=list)


def _parse_bool(key: str, value: str, default: bool) -> bool:
    lowered = value.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    logger.warning(f"Invalid boolean for {key.upper()}: {value!r}")
    return default


def _strip_value(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value.startswith('"') or value.startswith("'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        if end_quote != -1:
            return value[1:end_quote]
        return value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from dailyhub.conf file."""
    config = Config()
    path = path or CONFIG_FILE

    if not path.exists():
        return config

    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _strip_value(value.strip())

        match key:
            case "initial_tab":
                if value.lower() in TAB_NAMES:
                    config.initial_tab = value.lower()
                else:
                    logger.warning(f"Unknown INITIAL_TAB {value!r}, using {config.initial_tab}")
            case "fade_duration_ms":
                try:
                    duration = int(value)
                except ValueError:
                    logger.warning(f"Invalid FADE_DURATION_MS: {value!r}")
                    continue
                if duration < 0:
                    logger.warning(f"FADE_DURATION_MS must not be negative: {duration}")
                    continue
                config.fade_duration_ms = duration
            case "animations":
                config.animations = _parse_bool(key, value, config.animations)
            case "strict_toggle":
                config.strict_toggle = _parse_bool(key, value, config.strict_toggle)
            case "telegram_bot_token":
                config.telegram_bot_token = value
            case "telegram_allowed_users":
                try:
                    config.telegram_allowed_users = [
                        int(u.strip()) for u in value.split(",") if u.strip()
                    ]
                except ValueError:
                    logger.warning(f"Invalid TELEGRAM_ALLOWED_USERS: {value!r}")
            case _:
                logger.debug(f"Ignoring unknown config key {key.upper()}")

    return config
