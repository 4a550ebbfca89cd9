# random_word/index.py
"""
random_word/index.py

In-memory index over one language's word tuple.

Two bucketings are built in a single pass over the corpus:

  * by length: len(word) (Unicode code points) -> words of that length
  * by first character: word[0] -> words starting with it

Buckets keep the corpus order (a stable partition, never sorted) and are
frozen into tuples behind read-only mappings, so an index can be shared
freely between threads once built.

Keys are compared exactly: no case folding, no Unicode normalization.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

Words = Tuple[str, ...]


def _freeze(buckets: Dict) -> Mapping:
    return MappingProxyType({key: tuple(words) for key, words in buckets.items()})


@dataclass(frozen=True, eq=False)
class WordIndex:
    """
    Length and first-character lookups for a single corpus.

    Build with `WordIndex.build(language, words)`; the constructor is for
    callers that already hold frozen buckets.
    """

    language: str
    by_length: Mapping[int, Words] = field(repr=False)
    by_first_char: Mapping[str, Words] = field(repr=False)
    size: int = 0

    @classmethod
    def build(cls, language: str, words: Iterable[str]) -> "WordIndex":
        by_length: Dict[int, List[str]] = defaultdict(list)
        by_first_char: Dict[str, List[str]] = defaultdict(list)
        size = 0
        for word in words:
            by_length[len(word)].append(word)
            # empty words have no first character
            if word:
                by_first_char[word[0]].append(word)
            size += 1
        return cls(
            language=language,
            by_length=_freeze(by_length),
            by_first_char=_freeze(by_first_char),
            size=size,
        )

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def words_of_length(self, length: int) -> Optional[Words]:
        """
        Words of exactly `length` characters, or None if there are none.

        Raises:
            ValueError: `length` is not a non-negative int.
        """
        if isinstance(length, bool) or not isinstance(length, int):
            raise ValueError(f"Word length must be an int, got {length!r}.")
        if length < 0:
            raise ValueError(f"Word length must be >= 0, got {length}.")
        return self.by_length.get(length)

    def words_starting_with(self, char: str) -> Optional[Words]:
        """
        Words whose first character is exactly `char`, or None.

        Raises:
            ValueError: `char` is not a single character.
        """
        if not isinstance(char, str) or len(char) != 1:
            raise ValueError(f"Expected a single character, got {char!r}.")
        return self.by_first_char.get(char)

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def lengths(self) -> List[int]:
        return sorted(self.by_length)

    def first_chars(self) -> List[str]:
        return sorted(self.by_first_char)


__all__ = ["WordIndex", "Words"]
