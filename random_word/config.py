# random_word/config.py
"""
random_word/config.py
---------------------

Configuration knobs for the word list subsystem.

Settings are read from environment variables (prefix ``RANDOM_WORD_``) or a
local ``.env`` file, validated by pydantic, and exposed through a
process-wide instance:

- RANDOM_WORD_LANGUAGES
    Comma-separated ISO 639-1 codes to enable, or "all".
    Only enabled languages become `Lang` members.
    Default: "all"

- RANDOM_WORD_DATA_DIR
    Root directory holding one sub-directory of JSON shards per language.
    Default: "" (the data bundled with the package)

- RANDOM_WORD_STRICT_SCHEMA
    If true, a malformed shard aborts loading; otherwise it is logged and
    skipped.
    Default: true

- RANDOM_WORD_EAGER_INDEX
    If true, the length / first-character index is built as soon as a
    language's words are loaded instead of on the first filtered query.
    Default: false

- RANDOM_WORD_LOG_LEVEL / RANDOM_WORD_LOG_FORMAT
    Used by `random_word.logging_config.configure_logging`.

Typical usage
=============

    from random_word.config import get_config

    cfg = get_config()
    print(cfg.enabled_languages)

    # Adjust at runtime (e.g. in tests)
    set_config(WordSettings(DATA_DIR="tests/data"))
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Tuple

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import WordListConfigError

# ISO 639-1 code -> English name. Order is the canonical `Lang` order.
SUPPORTED_LANGUAGES: Dict[str, str] = {
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "zh": "Chinese",
}

_ALL = "all"
_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


def _bundled_data_dir() -> Path:
    return Path(__file__).resolve().parent / "data"


def _split_codes(raw: str) -> Tuple[str, ...]:
    codes = []
    for part in raw.split(","):
        code = part.strip().lower()
        if code and code not in codes:
            codes.append(code)
    return tuple(codes)


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class WordSettings(BaseSettings):
    """
    Central configuration for random_word.
    Strictly typed and validated via Pydantic.
    """

    # --- Language selection ---
    LANGUAGES: str = _ALL

    # --- Word Store ---
    DATA_DIR: str = ""
    STRICT_SCHEMA: bool = True
    EAGER_INDEX: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    model_config = SettingsConfigDict(
        env_prefix="RANDOM_WORD_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("LANGUAGES")
    @classmethod
    def _check_languages(cls, value: str) -> str:
        raw = (value or "").strip().lower()
        if raw == _ALL:
            return _ALL
        codes = _split_codes(raw)
        if not codes:
            raise ValueError("at least one language code must be enabled")
        unknown = [c for c in codes if c not in SUPPORTED_LANGUAGES]
        if unknown:
            raise ValueError(
                f"unsupported language code(s): {', '.join(unknown)}; "
                f"expected any of: {', '.join(SUPPORTED_LANGUAGES)}"
            )
        return ",".join(codes)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = (value or "").strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def enabled_languages(self) -> Tuple[str, ...]:
        """Enabled codes, in canonical order for "all", else as configured."""
        if self.LANGUAGES == _ALL:
            return tuple(SUPPORTED_LANGUAGES)
        return _split_codes(self.LANGUAGES)

    def resolved_data_dir(self) -> Path:
        """
        Return the directory that holds the per-language shard folders.

        - Empty DATA_DIR means the data bundled with the package.
        - Expands ~ and env vars; a relative path is taken as given.
        """
        if not self.DATA_DIR.strip():
            return _bundled_data_dir()
        return Path(os.path.expandvars(os.path.expanduser(self.DATA_DIR.strip())))


# Singleton configuration instance
_CONFIG: Optional[WordSettings] = None


def get_config() -> WordSettings:
    """
    Return the global WordSettings instance, creating it from the
    environment on first use.
    """
    global _CONFIG
    if _CONFIG is None:
        try:
            _CONFIG = WordSettings()
        except ValidationError as e:
            raise WordListConfigError(f"Invalid random_word settings: {e}") from e
    return _CONFIG


def set_config(config: WordSettings) -> None:
    """
    Replace the global WordSettings instance.

    Useful for tests and for applications that want to inject config
    from a central settings module. `Lang` is built at import time, so
    changing LANGUAGES here does not add or remove members.
    """
    global _CONFIG
    if not isinstance(config, WordSettings):
        raise TypeError("config must be a WordSettings instance")
    _CONFIG = config


def reset_config() -> None:
    """Forget the global instance; the next get_config() re-reads the environment."""
    global _CONFIG
    _CONFIG = None


__all__ = [
    "SUPPORTED_LANGUAGES",
    "LogFormat",
    "WordSettings",
    "get_config",
    "set_config",
    "reset_config",
]
