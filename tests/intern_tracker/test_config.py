from __future__ import annotations

import json
from pathlib import Path

import pytest

from intern_tracker.config import AppConfig, load_config
from intern_tracker.core.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    monkeypatch.delenv("INTERN_TRACKER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("INTERN_TRACKER_LOG_FORMAT", raising=False)


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "config.json")

    assert config == AppConfig(user_prefs_path=tmp_path / "preferences.json")


def test_values_read_from_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "debug", "log_format": "plain", "user_prefs_path": "prefs/p.json"}))

    config = load_config(path)

    assert config.log_level == "DEBUG"
    assert config.log_format == "plain"
    assert config.user_prefs_path == tmp_path / "prefs" / "p.json"


def test_absolute_prefs_path_kept(tmp_path):
    absolute = (tmp_path / "elsewhere" / "p.json").resolve()
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"user_prefs_path": str(absolute)}))

    assert load_config(path).user_prefs_path == absolute


def test_env_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"log_level": "INFO", "log_format": "json"}))
    monkeypatch.setenv("INTERN_TRACKER_LOG_LEVEL", "warning")
    monkeypatch.setenv("INTERN_TRACKER_LOG_FORMAT", "PLAIN")

    config = load_config(path)

    assert config.log_level == "WARNING"
    assert config.log_format == "plain"


@pytest.mark.parametrize(
    "content",
    [
        "{broken",
        "[]",
        json.dumps({"log_level": "LOUD"}),
        json.dumps({"log_format": "xml"}),
    ],
)
def test_invalid_config_rejected(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content)

    with pytest.raises(ConfigError):
        load_config(path)


def test_accepts_string_path(tmp_path):
    assert isinstance(load_config(str(tmp_path / "config.json")).user_prefs_path, Path)
