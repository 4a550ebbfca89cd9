# random_word/schema.py
"""
random_word/schema.py
=====================

Lightweight schema and validation helpers for word list JSON shards.

A shard is expected to look like:

    {
      "meta": {"language": "en", "name": "English", "schema_version": 1},
      "words": ["apple", "banana", ...]
    }

The goal is basic structural sanity, not an exhaustive format definition:

- Top-level object is a dict.
- `meta` is a dict whose `language` matches the directory it lives in.
- `words` is a list of non-empty strings.
- Track a simple schema version for future migrations.

Diagnostics have stable paths (e.g. "words[17]") and deterministic
ordering so CI output does not flap.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping

from .errors import WordListSchemaError

SCHEMA_VERSION: int = 1


# ---------------------------------------------------------------------------
# Public issue model
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SchemaIssue:
    """
    A single validation issue detected in a word list shard.

    Fields:
        path:
            Where the issue occurred, e.g. "meta.language" or "words[3]".
        message:
            Human-readable description of the problem.
        level:
            "error" or "warning". Errors reject the shard; warnings are
            informational.
    """

    path: str
    message: str
    level: str = "error"  # "error" | "warning"


def _issue(path: str, message: str, *, level: str = "error") -> SchemaIssue:
    if level not in {"error", "warning"}:
        level = "error"
    return SchemaIssue(path=path, message=message, level=level)


# ---------------------------------------------------------------------------
# Section validators
# ---------------------------------------------------------------------------


def _validate_meta(lang_code: str, data: Mapping[str, Any]) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    meta = data.get("meta")

    if meta is None:
        issues.append(_issue("meta", "Missing 'meta' section.", level="warning"))
        return issues

    if not isinstance(meta, Mapping):
        issues.append(_issue("meta", "'meta' must be an object (dict)."))
        return issues

    lang = meta.get("language")
    if lang is None:
        issues.append(
            _issue("meta.language", "Missing 'language' field in meta.", level="warning")
        )
    elif not isinstance(lang, str):
        issues.append(_issue("meta.language", "'language' field in meta must be a string."))
    elif lang_code and lang.strip().lower() != lang_code:
        issues.append(
            _issue(
                "meta.language",
                f"Language mismatch: meta.language={lang!r}, expected {lang_code!r}.",
            )
        )

    schema_ver = meta.get("schema_version")
    if schema_ver is None:
        issues.append(
            _issue(
                "meta.schema_version",
                f"Missing 'schema_version' in meta; current version is {SCHEMA_VERSION}.",
                level="warning",
            )
        )
    elif isinstance(schema_ver, bool) or not isinstance(schema_ver, int):
        issues.append(_issue("meta.schema_version", "'schema_version' must be an integer."))
    elif schema_ver != SCHEMA_VERSION:
        issues.append(
            _issue(
                "meta.schema_version",
                f"schema_version={schema_ver} does not match current version {SCHEMA_VERSION}.",
                level="warning",
            )
        )

    return issues


def _validate_words(data: Mapping[str, Any]) -> List[SchemaIssue]:
    words = data.get("words")
    if words is None:
        return [_issue("words", "Missing 'words' section.")]
    if not isinstance(words, list):
        return [_issue("words", "'words' must be a list of strings.")]

    issues: List[SchemaIssue] = []
    for i, word in enumerate(words):
        if not isinstance(word, str):
            issues.append(_issue(f"words[{i}]", f"Word must be a string, got {type(word).__name__}."))
        elif not word:
            issues.append(_issue(f"words[{i}]", "Word must not be empty."))
    return issues


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def validate_word_list_structure(lang_code: str, data: Any) -> List[SchemaIssue]:
    """
    Validate the structure of a parsed word list shard.

    Args:
        lang_code:
            Language code (e.g. "en") of the directory the shard came from.
        data:
            Parsed JSON object.

    Returns:
        A list of SchemaIssue objects, sorted by (path, message). Empty
        means the shard passes.
    """
    if not isinstance(data, dict):
        return [_issue("", "Top-level word list JSON must be an object (dict).")]

    issues: List[SchemaIssue] = []
    issues.extend(_validate_meta(lang_code, data))
    issues.extend(_validate_words(data))
    return sorted(issues, key=lambda i: (i.path, i.message))


def raise_if_invalid(lang_code: str, data: Any, *, path: str = "<memory>") -> None:
    """
    Validate a shard and raise WordListSchemaError if any *errors* are found.

    Warnings do not cause an exception.
    """
    errors = [i for i in validate_word_list_structure(lang_code, data) if i.level == "error"]
    if not errors:
        return
    detail = "; ".join(f"{e.path or '<root>'}: {e.message}" for e in errors)
    raise WordListSchemaError(path, detail)


def summarize_issues(issues: List[SchemaIssue]) -> Dict[str, int]:
    """Count issues per level, e.g. {"error": 1, "warning": 2}."""
    counts: Dict[str, int] = {"error": 0, "warning": 0}
    for issue in issues:
        counts[issue.level] = counts.get(issue.level, 0) + 1
    return counts


__all__ = [
    "SCHEMA_VERSION",
    "SchemaIssue",
    "validate_word_list_structure",
    "raise_if_invalid",
    "summarize_issues",
]
