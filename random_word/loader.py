# random_word/loader.py
"""
random_word/loader.py
=====================

Reads the per-language word lists (the Word Store) from JSON shards.

Layout
------
The data root (bundled with the package unless RANDOM_WORD_DATA_DIR says
otherwise) holds one directory per ISO 639-1 code:

    data/
        en/
            core.json
        fr/
            core.json
        ...

Every `*.json` file in a language directory is a shard. Shards are read
in sorted filename order and their `words` arrays are concatenated in
that order, so the resulting corpus order is deterministic. Duplicates
are kept as-is.

Error behaviour
---------------
- Missing language directory -> `WordListNotFound`.
- Undecodable or schema-invalid shard -> `WordListSchemaError` in strict
  mode (the default); otherwise the shard is logged and skipped.
- Zero words after merging -> `EmptyCorpusError`.

This module does not cache; see `random_word.cache`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Tuple

from .config import SUPPORTED_LANGUAGES, get_config
from .errors import EmptyCorpusError, WordListNotFound, WordListSchemaError
from .logging_config import get_logger
from .schema import raise_if_invalid, summarize_issues, validate_word_list_structure

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Path resolution
# ---------------------------------------------------------------------------


def _data_root() -> Path:
    return get_config().resolved_data_dir()


def _language_dir(lang_code: str) -> Path:
    """
    e.g., "fr" -> <data_root>/fr/
    """
    return _data_root() / lang_code


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise WordListSchemaError(str(path), f"JSON decode error: {e}") from e
    except OSError as e:
        raise WordListSchemaError(str(path), f"read error: {e}") from e


def _load_shard(lang_code: str, path: Path, *, strict: bool) -> List[str]:
    """
    Read and validate one shard, returning its words.

    In non-strict mode a bad shard yields an empty list.
    """
    try:
        raw = _read_json(path)
    except WordListSchemaError as e:
        if strict:
            raise
        logger.warning("word_shard_skipped", lang=lang_code, file=path.name, error=e.detail)
        return []

    issues = validate_word_list_structure(lang_code, raw)
    for issue in issues:
        if issue.level == "warning":
            logger.warning(
                "word_shard_schema_warning",
                lang=lang_code,
                file=path.name,
                path=issue.path,
                message=issue.message,
            )

    if summarize_issues(issues)["error"]:
        if strict:
            raise_if_invalid(lang_code, raw, path=str(path))
        for issue in issues:
            if issue.level == "error":
                logger.error(
                    "word_shard_schema_error",
                    lang=lang_code,
                    file=path.name,
                    path=issue.path,
                    message=issue.message,
                )
        logger.warning("word_shard_skipped", lang=lang_code, file=path.name)
        return []

    return raw["words"]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_words(lang_code: str) -> Tuple[str, ...]:
    """
    Load and merge every shard for a language.

    Args:
        lang_code: ISO 639-1 code such as "en" or "zh".

    Returns:
        The corpus as a tuple, in shard order then file order.

    Raises:
        ValueError: empty language code.
        WordListNotFound: no directory for the language.
        WordListSchemaError: a shard is malformed (strict mode).
        EmptyCorpusError: the merged corpus has no words.
    """
    lang = (lang_code or "").strip().lower()
    if not lang:
        raise ValueError("Language code must be a non-empty string.")

    lang_dir = _language_dir(lang)
    if not lang_dir.is_dir():
        raise WordListNotFound(lang, f"Word list directory not found: {lang_dir}")

    strict = get_config().STRICT_SCHEMA
    words: List[str] = []
    shards = sorted(lang_dir.glob("*.json"))
    for path in shards:
        words.extend(_load_shard(lang, path, strict=strict))

    if not words:
        raise EmptyCorpusError(lang)

    logger.info("word_store_loaded", lang=lang, shards=len(shards), count=len(words))
    return tuple(words)


def available_languages() -> List[str]:
    """
    Return supported language codes that have a shard directory on disk,
    in canonical order.
    """
    root = _data_root()
    if not root.is_dir():
        return []
    return [
        code
        for code in SUPPORTED_LANGUAGES
        if (root / code).is_dir() and any((root / code).glob("*.json"))
    ]


__all__ = ["load_words", "available_languages"]
