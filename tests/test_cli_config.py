import json
import logging
from pathlib import Path

from pokebattle.data.images import DEFAULT_IMAGE_URL_TEMPLATE
from pokebattle.presentation.cli import config as cli_config
from pokebattle.presentation.cli.config import AppConfig, load_config, save_config


def test_load_config_missing_file_returns_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(cli_config.LOG_LEVEL_ENV_VAR, raising=False)

    config = load_config(tmp_path / "nope.json")

    assert config == AppConfig()
    assert config.image_url_template == DEFAULT_IMAGE_URL_TEMPLATE


def test_load_config_malformed_values_fall_back(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(cli_config.LOG_LEVEL_ENV_VAR, raising=False)
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"log_level": "loud", "image_url_template": "no-placeholder", "dice_seed": "7"}),
        encoding="utf-8",
    )

    config = load_config(path)

    assert config.log_level == "WARNING"
    assert config.image_url_template == DEFAULT_IMAGE_URL_TEMPLATE
    assert config.dice_seed is None


def test_load_config_invalid_json_returns_defaults(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.delenv(cli_config.LOG_LEVEL_ENV_VAR, raising=False)
    path = tmp_path / "config.json"
    path.write_text("[1, 2", encoding="utf-8")

    assert load_config(path) == AppConfig()


def test_save_then_load_round_trip_with_env_override(tmp_path: Path, monkeypatch) -> None:
    path = tmp_path / "nested" / "config.json"
    save_config(
        AppConfig(
            definitions_path="/srv/defs",
            image_url_template="https://img.test/{key}.png",
            log_level="debug",
            dice_seed=3,
        ),
        path,
    )
    monkeypatch.setenv(cli_config.LOG_LEVEL_ENV_VAR, "error")

    config = load_config(path)

    assert json.loads(path.read_text(encoding="utf-8"))["log_level"] == "DEBUG"
    assert config.definitions_path == "/srv/defs"
    assert config.image_url_template == "https://img.test/{key}.png"
    assert config.dice_seed == 3
    assert config.log_level == "ERROR"


def test_user_data_dir_posix(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setattr(cli_config.os, "name", "posix")
    monkeypatch.setattr(cli_config.Path, "home", classmethod(lambda cls: tmp_path))

    assert cli_config.get_default_config_path() == tmp_path / ".config" / "pokebattle" / "config.json"


def test_configure_logging_sets_root_level(monkeypatch) -> None:
    calls = {}
    monkeypatch.setattr(cli_config.logging, "basicConfig", lambda **kwargs: calls.update(kwargs))

    cli_config.configure_logging("info")

    assert calls["level"] == logging.INFO
