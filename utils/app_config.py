"""Pre-UI bootstrap configuration. Zero imports from the rest of the app
except constants.

Stores user preferences that must be known before the window opens
(e.g. api_url). Config lives in ~/.expense_tracker/config.json.
"""
import json
import os
from pathlib import Path

from utils.constants import (
    DEFAULT_API_URL,
    DEFAULT_APPEARANCE_MODE,
    DEFAULT_CURRENCY_SYMBOL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_REQUEST_TIMEOUT,
)

CONFIG_DIR = Path.home() / ".expense_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULTS = {
    "api_url": DEFAULT_API_URL,
    "request_timeout": DEFAULT_REQUEST_TIMEOUT,
    "appearance_mode": DEFAULT_APPEARANCE_MODE,
    "currency_symbol": DEFAULT_CURRENCY_SYMBOL,
    "log_level": DEFAULT_LOG_LEVEL,
}


def load_config(path: Path | None = None) -> dict:
    """Returns {} on missing or corrupt file; never raises."""
    try:
        with open(path or CONFIG_FILE, "r", encoding="utf-8") as f:
            config = json.load(f)
    except Exception:
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict, path: Path | None = None) -> None:
    """Creates the config folder if needed; atomic write via .tmp + os.replace()."""
    target = path or CONFIG_FILE
    target.parent.mkdir(parents=True, exist_ok=True)
    tmp = target.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, target)
    except Exception:
        try:
            tmp.unlink(missing_ok=True)
        except Exception:
            pass


def get_setting(key: str, config: dict | None = None):
    """Return config[key], falling back to the built-in default."""
    if config is None:
        config = load_config()
    value = config.get(key)
    if value is None or value == "":
        return DEFAULTS.get(key)
    return value


def get_api_url(config: dict | None = None) -> str:
    return str(get_setting("api_url", config))


def get_request_timeout(config: dict | None = None) -> float:
    try:
        return float(get_setting("request_timeout", config))
    except (TypeError, ValueError):
        return float(DEFAULT_REQUEST_TIMEOUT)


def set_api_url(url: str | None) -> None:
    """Update api_url in config and save."""
    config = load_config()
    if url is None:
        config.pop("api_url", None)
    else:
        config["api_url"] = url
    save_config(config)
