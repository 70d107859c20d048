"""Tests for configuration loading."""

import pytest

from yasumi.config import LANGUAGE_ENV_VAR, Config
from yasumi.errors import ConfigError


def test_default_language():
    """Japanese names are the default."""
    assert Config().language == "ja"


def test_from_env(monkeypatch):
    """The language is read from the environment, case-insensitively."""
    monkeypatch.setenv(LANGUAGE_ENV_VAR, "EN")
    assert Config.from_env() == Config(language="en")


def test_from_env_unset(monkeypatch):
    """Without the variable there is no environment config."""
    monkeypatch.delenv(LANGUAGE_ENV_VAR, raising=False)
    assert Config.from_env() is None


def test_invalid_language():
    """Unknown languages are rejected."""
    with pytest.raises(ConfigError):
        Config(language="fr")


def test_save_and_load(tmp_path):
    """A saved config loads back unchanged."""
    path = tmp_path / "yasumi" / "config.ini"
    Config(language="en").save(path)

    assert path.is_file()
    assert Config.load(path) == Config(language="en")


def test_load_missing_file(tmp_path):
    """A missing file gives no config."""
    assert Config.load(tmp_path / "missing.ini") is None


def test_load_without_language(tmp_path):
    """A file without the language key falls back to Japanese."""
    path = tmp_path / "config.ini"
    path.write_text("[yasumi]\n", encoding="utf-8")
    assert Config.load(path) == Config()


def test_load_invalid_language(tmp_path):
    """A file with an unknown language is rejected."""
    path = tmp_path / "config.ini"
    path.write_text("[yasumi]\nlanguage = de\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        Config.load(path)
