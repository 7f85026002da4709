"""
Testing settings and presets.
"""

import pytest

from codebreaker.config import DEFAULT_COLORS, load_settings, parse_colors, preset_config
from codebreaker.errors import InvalidConfiguration


def test_medium_preset_matches_classic_game():
    config = preset_config("medium")
    assert config.holes == 4
    assert config.max_guesses == 12
    assert config.colors == DEFAULT_COLORS


def test_defaults_without_environment():
    settings = load_settings()
    assert settings.difficulty == "medium"
    assert settings.colors is None
    assert settings.log_level == "WARNING"
    assert settings.engine_config() == preset_config("medium")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("CODEBREAKER_DIFFICULTY", "Hard")
    monkeypatch.setenv("CODEBREAKER_COLORS", "Red, blue,,green")
    monkeypatch.setenv("CODEBREAKER_MAX_GUESSES", "3")
    monkeypatch.setenv("CODEBREAKER_LOG_LEVEL", "debug")

    settings = load_settings()
    config = settings.engine_config()
    assert settings.difficulty == "hard"
    assert settings.log_level == "DEBUG"
    assert config.holes == 5
    assert config.colors == ["red", "blue", "green"]
    assert config.max_guesses == 3


def test_bad_integer_in_environment(monkeypatch):
    monkeypatch.setenv("CODEBREAKER_HOLES", "four")
    with pytest.raises(InvalidConfiguration):
        load_settings()


def test_out_of_range_override_is_invalid(monkeypatch):
    monkeypatch.setenv("CODEBREAKER_HOLES", "0")
    settings = load_settings()
    with pytest.raises(InvalidConfiguration):
        settings.engine_config()


def test_parse_colors():
    assert parse_colors(None) is None
    assert parse_colors(" , ") is None
    assert parse_colors("Yellow,brown") == ["yellow", "brown"]


def test_overrides_mark_settings_as_custom(monkeypatch):
    assert load_settings().is_custom is False
    monkeypatch.setenv("CODEBREAKER_HOLES", "2")
    assert load_settings().is_custom is True
