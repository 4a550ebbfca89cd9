# tests/test_config.py
"""
Settings parsing and language selection.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from random_word.config import (
    SUPPORTED_LANGUAGES,
    LogFormat,
    WordSettings,
    get_config,
    reset_config,
    set_config,
)
from random_word.errors import WordListConfigError
from random_word.lang import Lang, build_lang_enum


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("LANGUAGES", "DATA_DIR", "STRICT_SCHEMA", "EAGER_INDEX", "LOG_LEVEL", "LOG_FORMAT"):
        monkeypatch.delenv(f"RANDOM_WORD_{key}", raising=False)
    return monkeypatch


def test_defaults(clean_env):
    cfg = WordSettings()
    assert cfg.enabled_languages == tuple(SUPPORTED_LANGUAGES)
    assert cfg.STRICT_SCHEMA is True
    assert cfg.EAGER_INDEX is False
    assert cfg.LOG_LEVEL == "WARNING"
    assert cfg.LOG_FORMAT is LogFormat.CONSOLE
    assert (cfg.resolved_data_dir() / "en" / "core.json").is_file()


def test_languages_from_env(clean_env):
    clean_env.setenv("RANDOM_WORD_LANGUAGES", " fr, EN,fr ")
    assert WordSettings().enabled_languages == ("fr", "en")


def test_unknown_language_is_rejected(clean_env):
    with pytest.raises(ValidationError):
        WordSettings(LANGUAGES="en,xx")
    with pytest.raises(ValidationError):
        WordSettings(LANGUAGES=" , ")


def test_get_config_wraps_validation_errors(clean_env):
    clean_env.setenv("RANDOM_WORD_LANGUAGES", "klingon")
    reset_config()
    with pytest.raises(WordListConfigError):
        get_config()


def test_get_config_is_a_singleton(clean_env):
    assert get_config() is get_config()
    custom = WordSettings(EAGER_INDEX=True)
    set_config(custom)
    assert get_config() is custom


def test_set_config_type_check():
    with pytest.raises(TypeError):
        set_config({"LANGUAGES": "en"})


def test_booleans_and_log_settings_from_env(clean_env):
    clean_env.setenv("RANDOM_WORD_STRICT_SCHEMA", "false")
    clean_env.setenv("RANDOM_WORD_EAGER_INDEX", "1")
    clean_env.setenv("RANDOM_WORD_LOG_LEVEL", "debug")
    clean_env.setenv("RANDOM_WORD_LOG_FORMAT", "json")

    cfg = WordSettings()
    assert cfg.STRICT_SCHEMA is False
    assert cfg.EAGER_INDEX is True
    assert cfg.LOG_LEVEL == "DEBUG"
    assert cfg.LOG_FORMAT is LogFormat.JSON


def test_invalid_log_level(clean_env):
    with pytest.raises(ValidationError):
        WordSettings(LOG_LEVEL="chatty")


def test_relative_data_dir(clean_env):
    cfg = WordSettings(DATA_DIR="words")
    assert cfg.resolved_data_dir() == Path("words")


def test_default_lang_has_every_supported_language():
    assert [m.value for m in Lang] == list(SUPPORTED_LANGUAGES)
    assert Lang.EN == "en"
    assert Lang("fr") is Lang.FR
    assert str(Lang.ZH) == "zh"
    assert Lang.DE.display_name == "German"
    assert Lang.ES.code == "es"


def test_unselected_language_has_no_member():
    subset = build_lang_enum(("en", "fr"), name="SubsetLang")

    assert [m.name for m in subset] == ["EN", "FR"]
    with pytest.raises(AttributeError):
        subset.DE
    with pytest.raises(ValueError):
        subset("de")


def test_build_lang_enum_rejects_unknown_codes():
    with pytest.raises(ValueError):
        build_lang_enum(["en", "xx"])


def test_data_dir_expands_user_and_env(clean_env, tmp_path):
    clean_env.setenv("WORDS_HOME", str(tmp_path))
    cfg = WordSettings(DATA_DIR="$WORDS_HOME/lists")
    assert cfg.resolved_data_dir() == tmp_path / "lists"
