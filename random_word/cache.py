# random_word/cache.py
"""
random_word/cache.py
--------------------

In-memory caching of per-language Word Stores and their indexes.

Goals
=====
- Read each language's shards at most once per process.
- Build each language's WordIndex at most once per process.
- Thread-safe: concurrent first access never builds two copies.
- Small, testable API to inspect, preload or clear cached data.

Implementation notes
====================
- Keys are `Lang` values (ISO 639-1 codes); only enabled languages can be
  cached.
- Lookups of cached entries take no lock. Construction happens under a
  re-entrant lock with a second lookup inside it.
- Cached values are immutable (tuples / WordIndex), so once published
  they are safe to share.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, List, Optional

from .config import get_config
from .index import WordIndex, Words
from .lang import Lang, LangLike, resolve_lang
from .loader import load_words
from .logging_config import get_logger

logger = get_logger(__name__)

# ---------------------------------------------------------------------------
# Internal state
# ---------------------------------------------------------------------------

# Map: language code -> corpus
_WORDS_CACHE: Dict[str, Words] = {}

# Map: language code -> WordIndex
_INDEX_CACHE: Dict[str, WordIndex] = {}

# Lock for cache mutations / double-checked creation
_CACHE_LOCK = threading.RLock()


def _code(lang: LangLike) -> str:
    return resolve_lang(lang).value


def _words_locked(code: str) -> Words:
    # Caller holds _CACHE_LOCK.
    words = _WORDS_CACHE.get(code)
    if words is None:
        words = load_words(code)
        _WORDS_CACHE[code] = words
    return words


def _build_index(code: str, words: Words) -> WordIndex:
    index = WordIndex.build(code, words)
    logger.debug(
        "word_index_built",
        lang=code,
        words=index.size,
        lengths=len(index.by_length),
        first_chars=len(index.by_first_char),
    )
    return index


# ---------------------------------------------------------------------------
# Core cache API
# ---------------------------------------------------------------------------


def get_words(lang: LangLike) -> Words:
    """
    Return the corpus for `lang`, loading and caching it on first use.

    With EAGER_INDEX enabled, the first load also builds the index.

    Raises:
        LanguageNotEnabled: `lang` is not an enabled language.
        WordListNotFound / WordListSchemaError / EmptyCorpusError: from the loader.
    """
    code = _code(lang)

    existing = _WORDS_CACHE.get(code)
    if existing is not None:
        return existing

    with _CACHE_LOCK:
        words = _words_locked(code)
        if get_config().EAGER_INDEX and code not in _INDEX_CACHE:
            _INDEX_CACHE[code] = _build_index(code, words)
        return words


def get_or_build_index(lang: LangLike) -> WordIndex:
    """
    Return the WordIndex for `lang`, building and caching it if needed.

    Raises the same errors as `get_words`.
    """
    code = _code(lang)

    existing = _INDEX_CACHE.get(code)
    if existing is not None:
        return existing

    with _CACHE_LOCK:
        existing = _INDEX_CACHE.get(code)
        if existing is not None:
            return existing

        index = _build_index(code, _words_locked(code))
        _INDEX_CACHE[code] = index
        return index


def clear_cache(lang: Optional[LangLike] = None) -> None:
    """
    Clear cached corpora and indexes.

    Args:
        lang: if provided, clears only that language; otherwise clears all.
    """
    with _CACHE_LOCK:
        if lang is None:
            _WORDS_CACHE.clear()
            _INDEX_CACHE.clear()
            return
        code = _code(lang)
        _WORDS_CACHE.pop(code, None)
        _INDEX_CACHE.pop(code, None)


def cached_languages() -> List[str]:
    """
    Return codes of languages whose corpus is currently cached.
    """
    with _CACHE_LOCK:
        return sorted(_WORDS_CACHE.keys())


def preload_languages(langs: Optional[Iterable[LangLike]] = None) -> None:
    """
    Load corpora and build indexes ahead of time.

    Defaults to every enabled language. Errors are propagated; the caller
    should decide whether to catch and continue.
    """
    for lang in (Lang if langs is None else langs):
        get_or_build_index(lang)


# Alias commonly used name in application startup code.
warmup_languages = preload_languages


__all__ = [
    "get_words",
    "get_or_build_index",
    "clear_cache",
    "cached_languages",
    "preload_languages",
    "warmup_languages",
]
