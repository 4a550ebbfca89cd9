# random_word/lang.py
"""
random_word/lang.py

The `Lang` enumeration of enabled word list languages.

`Lang` is assembled once, at import time, from the configured language
selection (``RANDOM_WORD_LANGUAGES``). A language that was not selected
simply has no member, so ``Lang.DE`` fails with ``AttributeError`` the
moment it is referenced rather than somewhere inside a query, and its
word data is never read.

Members are named by upper-cased ISO 639-1 code and compare equal to the
code string:

    >>> Lang.EN == "en"
    True
    >>> Lang("fr") is Lang.FR
    True
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Union

from .config import SUPPORTED_LANGUAGES, get_config
from .errors import LanguageNotEnabled


class LanguageCode(str, Enum):
    """Base for `Lang`; carries the helpers shared by every member."""

    @property
    def code(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return SUPPORTED_LANGUAGES[self.value]

    def __str__(self) -> str:
        return self.value


def build_lang_enum(codes: Iterable[str], name: str = "Lang") -> type:
    """
    Create a `LanguageCode` enumeration holding exactly `codes`.

    Codes must come from SUPPORTED_LANGUAGES; anything else is rejected.
    """
    members = []
    for code in codes:
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language code: {code!r}")
        members.append((code.upper(), code))
    return LanguageCode(name, members, module=__name__)


Lang = build_lang_enum(get_config().enabled_languages)

LangLike = Union[LanguageCode, str]


def resolve_lang(lang: LangLike) -> LanguageCode:
    """
    Coerce a `Lang` member or its code string into a `Lang` member.

    Raises:
        LanguageNotEnabled: the code is not an enabled language.
    """
    if isinstance(lang, Lang):
        return lang
    code = str(lang).strip().lower() if lang is not None else ""
    try:
        return Lang(code)
    except ValueError:
        raise LanguageNotEnabled(code, tuple(m.value for m in Lang)) from None


__all__ = ["Lang", "LanguageCode", "LangLike", "build_lang_enum", "resolve_lang"]
