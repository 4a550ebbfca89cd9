# random_word/__init__.py
"""
random_word
-----------

Random words, and words filtered by length or first character, from
fixed per-language word lists.

    from random_word import Lang
    import random_word

    random_word.all(Lang.EN)                # every English word
    random_word.gen(Lang.EN)                # one at random
    random_word.all_len(5, Lang.EN)         # all 5-letter words, or None
    random_word.gen_len(5, Lang.EN)         # one of them, or None
    random_word.all_starts_with("c", Lang.FR)
    random_word.gen_starts_with("c", Lang.FR)

Supported languages: German (de), English (en), Spanish (es),
French (fr), Chinese (zh). Only the languages enabled through
RANDOM_WORD_LANGUAGES exist as `Lang` members; the rest are never loaded.

Layout
======
- loader.py: reads JSON shards into the Word Store
- schema.py: shard validation
- index.py: length / first-character buckets
- cache.py: build-once, thread-safe caching of both
- config.py / logging_config.py / errors.py: settings, logging, exceptions

Results are tuples shared by all callers. A filter with no matches
returns None.
"""

from __future__ import annotations

import random
from typing import Optional

from .cache import (
    cached_languages,
    clear_cache,
    get_or_build_index,
    get_words,
    preload_languages,
    warmup_languages,
)
from .config import SUPPORTED_LANGUAGES, WordSettings, get_config, set_config
from .errors import (
    EmptyCorpusError,
    LanguageNotEnabled,
    WordListConfigError,
    WordListError,
    WordListNotFound,
    WordListSchemaError,
)
from .index import WordIndex, Words
from .lang import Lang, LangLike, LanguageCode, resolve_lang
from .loader import available_languages, load_words
from .logging_config import configure_logging


def _choose(words: Optional[Words], rng: Optional[random.Random]) -> Optional[str]:
    if not words:
        return None
    return (rng or random).choice(words)


# ---------------------------------------------------------------------------
# Unfiltered
# ---------------------------------------------------------------------------


def all(lang: LangLike) -> Words:
    """
    Return every word of the given language, in word list order.

        >>> words = all(Lang.EN)
        >>> len(words) > 0
        True
    """
    return get_words(lang)


def gen(lang: LangLike, *, rng: Optional[random.Random] = None) -> str:
    """
    Return a uniformly random word of the given language.

        >>> gen(Lang.EN) in all(Lang.EN)
        True
    """
    word = _choose(get_words(lang), rng)
    if word is None:
        raise EmptyCorpusError(resolve_lang(lang).value)
    return word


# ---------------------------------------------------------------------------
# By length
# ---------------------------------------------------------------------------


def all_len(length: int, lang: LangLike) -> Optional[Words]:
    """
    Return all words with exactly `length` characters, or None if there
    are none.

        >>> all_len(0, Lang.EN) is None
        True
    """
    return get_or_build_index(lang).words_of_length(length)


def gen_len(length: int, lang: LangLike, *, rng: Optional[random.Random] = None) -> Optional[str]:
    """Return a random word with exactly `length` characters, or None."""
    return _choose(all_len(length, lang), rng)


# ---------------------------------------------------------------------------
# By first character
# ---------------------------------------------------------------------------


def all_starts_with(char: str, lang: LangLike) -> Optional[Words]:
    """
    Return all words whose first character is `char`, or None.

    Matching is exact: "a" and "A" are different keys.
    """
    return get_or_build_index(lang).words_starting_with(char)


def gen_starts_with(char: str, lang: LangLike, *, rng: Optional[random.Random] = None) -> Optional[str]:
    """Return a random word whose first character is `char`, or None."""
    return _choose(all_starts_with(char, lang), rng)


# `all` is left out so star-imports never shadow the builtin.
__all__ = [
    # Queries
    "gen",
    "all_len",
    "gen_len",
    "all_starts_with",
    "gen_starts_with",
    # Languages
    "Lang",
    "LanguageCode",
    "LangLike",
    "resolve_lang",
    "SUPPORTED_LANGUAGES",
    # Word Store / index
    "load_words",
    "available_languages",
    "WordIndex",
    "Words",
    # Cache controls
    "get_words",
    "get_or_build_index",
    "clear_cache",
    "cached_languages",
    "preload_languages",
    "warmup_languages",
    # Config / logging
    "WordSettings",
    "get_config",
    "set_config",
    "configure_logging",
    # Errors
    "WordListError",
    "WordListNotFound",
    "WordListSchemaError",
    "EmptyCorpusError",
    "LanguageNotEnabled",
    "WordListConfigError",
]
