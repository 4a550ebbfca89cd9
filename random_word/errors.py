# random_word/errors.py
"""
random_word/errors.py
---------------------

Custom exception types for the word list subsystem.

These are intentionally small and descriptive so that callers can
distinguish between:

    - missing word list data
    - malformed word list shards
    - corrupted (empty) corpora
    - configuration problems

Running out of matches for a length or first-character filter is NOT an
error: the query functions return ``None`` for that.

Typical usage:

    from random_word.errors import WordListError, WordListNotFound

    try:
        words = load_words("fr")
    except WordListNotFound as e:
        log.error("no_word_list", lang="fr", error=str(e))
"""

from __future__ import annotations


class WordListError(Exception):
    """
    Base class for all word-list-related errors.

    Catch this if you want to handle any word list problem in a single
    place; catch subclasses for more fine-grained handling.
    """


class WordListNotFound(WordListError):
    """
    Raised when no word list directory can be located for a language.

    Typically thrown by:
        - random_word.loader.load_words(lang_code)
    """

    def __init__(self, language: str, message: str | None = None) -> None:
        if message is None:
            message = f"Word list for language '{language}' not found."
        super().__init__(message)
        self.language = language


class WordListSchemaError(WordListError):
    """
    Raised when a word list shard does not match the expected schema.

    Examples:
        - Not valid JSON
        - Missing or non-list ``words`` section
        - Empty or non-string words
    """

    def __init__(self, path: str, detail: str | None = None) -> None:
        msg = f"Invalid word list schema in '{path}'."
        if detail:
            msg += f" Detail: {detail}"
        super().__init__(msg)
        self.path = path
        self.detail = detail


class EmptyCorpusError(WordListError):
    """
    Raised when a supported language loads zero words.

    This means the packaged data is broken, not that the caller did
    something wrong.
    """

    def __init__(self, language: str) -> None:
        super().__init__(f"Word list for language '{language}' is empty.")
        self.language = language


class LanguageNotEnabled(WordListError, ValueError):
    """
    Raised when a language code is not one of the enabled `Lang` members.
    """

    def __init__(self, language: str, enabled: tuple[str, ...] = ()) -> None:
        message = f"Language '{language}' is not enabled."
        if enabled:
            message += f" Enabled languages: {', '.join(enabled)}."
        super().__init__(message)
        self.language = language
        self.enabled = enabled


class WordListConfigError(WordListError):
    """
    Raised for configuration problems:
        - unknown language codes
        - unusable data directories
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)


__all__ = [
    "WordListError",
    "WordListNotFound",
    "WordListSchemaError",
    "EmptyCorpusError",
    "LanguageNotEnabled",
    "WordListConfigError",
]
