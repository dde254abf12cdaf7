"""CLI configuration helpers for options persistence and logging setup."""
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass
from pathlib import Path

from pokebattle.data.images import DEFAULT_IMAGE_URL_TEMPLATE

LOG_LEVEL_ENV_VAR = "POKEBATTLE_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"
_VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(slots=True)
class AppConfig:
    """User-tunable settings for the console front end."""

    definitions_path: str | None = None
    image_url_template: str = DEFAULT_IMAGE_URL_TEMPLATE
    log_level: str = _DEFAULT_LOG_LEVEL
    dice_seed: int | None = None


def get_user_data_dir() -> Path:
    """Return the per-user data directory."""
    if os.name == "nt":
        base = os.environ.get("APPDATA")
        if base:
            return Path(base) / "PokeBattle"
        return Path.home() / "PokeBattle"
    return Path.home() / ".config" / "pokebattle"


def get_default_config_path() -> Path:
    """Return the default per-user config path."""
    return get_user_data_dir() / "config.json"


def _normalize_log_level(value: object) -> str:
    if isinstance(value, str) and value.upper() in _VALID_LOG_LEVELS:
        return value.upper()
    return _DEFAULT_LOG_LEVEL


def _normalize_template(value: object) -> str:
    if isinstance(value, str) and "{key}" in value:
        return value
    return DEFAULT_IMAGE_URL_TEMPLATE


def _normalize_optional_str(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def _normalize_seed(value: object) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def load_config(path: Path | None = None) -> AppConfig:
    """Load config from disk, fall back to defaults, then apply environment overrides."""
    config_path = path or get_default_config_path()
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        raw = {}
    if not isinstance(raw, dict):
        raw = {}

    config = AppConfig(
        definitions_path=_normalize_optional_str(raw.get("definitions_path")),
        image_url_template=_normalize_template(raw.get("image_url_template")),
        log_level=_normalize_log_level(raw.get("log_level")),
        dice_seed=_normalize_seed(raw.get("dice_seed")),
    )
    env_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if env_level:
        config.log_level = _normalize_log_level(env_level)
    return config


def save_config(config: AppConfig, path: Path | None = None) -> None:
    """Persist config to disk."""
    config_path = path or get_default_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    payload = asdict(config)
    payload["log_level"] = _normalize_log_level(payload["log_level"])
    payload["image_url_template"] = _normalize_template(payload["image_url_template"])
    config_path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


def configure_logging(level: str) -> None:
    """Route library log records to stderr for the console session."""
    logging.basicConfig(
        level=getattr(logging, _normalize_log_level(level)),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
