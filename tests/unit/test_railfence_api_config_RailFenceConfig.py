"""Unit tests for railfence.api.config.RailFenceConfig module."""

import json

import pytest

from railfence.api.config import RailFenceConfig, get_home_dir

pytestmark = pytest.mark.config


def test_load_without_file_returns_defaults(railfence_home):
    config = RailFenceConfig.load()
    assert config.log.level == "INFO"
    assert config.display.format == "text"
    assert not railfence_home.exists()


def test_load_reads_sections(railfence_home):
    railfence_home.mkdir()
    (railfence_home / "config.json").write_text(json.dumps({"log": {"level": "DEBUG"}, "display": {"format": "json"}}))

    config = RailFenceConfig.load()

    assert config.log.level == "DEBUG"
    assert config.display.format == "json"


def test_load_partial_file_fills_defaults(railfence_home):
    railfence_home.mkdir()
    (railfence_home / "config.json").write_text(json.dumps({"display": {"format": "yaml"}}))

    config = RailFenceConfig.load()

    assert config.log.level == "INFO"
    assert config.display.format == "yaml"


def test_load_invalid_json(railfence_home):
    railfence_home.mkdir()
    (railfence_home / "config.json").write_text("{not json")

    with pytest.raises(ValueError, match="Invalid JSON"):
        RailFenceConfig.load()


def test_load_rejects_unknown_section(railfence_home):
    railfence_home.mkdir()
    (railfence_home / "config.json").write_text(json.dumps({"rails": 3}))

    with pytest.raises(ValueError, match="Configuration validation error: rails"):
        RailFenceConfig.load()


def test_load_rejects_bad_level(railfence_home):
    railfence_home.mkdir()
    (railfence_home / "config.json").write_text(json.dumps({"log": {"level": "LOUD"}}))

    with pytest.raises(ValueError, match="log.level"):
        RailFenceConfig.load()


def test_load_rejects_non_object(railfence_home):
    railfence_home.mkdir()
    (railfence_home / "config.json").write_text("[1, 2]")

    with pytest.raises(ValueError, match="expected a JSON object"):
        RailFenceConfig.load()


def test_to_dict():
    assert RailFenceConfig().to_dict() == {"log": {"level": "INFO"}, "display": {"format": "text"}}


def test_get_config_path_uses_home(railfence_home):
    assert RailFenceConfig.get_config_path() == railfence_home.resolve() / "config.json"


def test_get_home_dir_defaults_to_user_home(monkeypatch, tmp_path):
    monkeypatch.delenv("RAILFENCE_HOME")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".railfence"
    assert get_home_dir("config.json") == tmp_path / ".railfence" / "config.json"
