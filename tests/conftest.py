# tests/conftest.py
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

from random_word import cache
from random_word.config import WordSettings, reset_config, set_config


class ShardWriter:
    """Writes word list shards under a temporary data root."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def write(
        self,
        lang: str,
        words: Optional[List[Any]] = None,
        *,
        name: str = "core.json",
        meta: Optional[Dict[str, Any]] = None,
        raw: Optional[str] = None,
    ) -> Path:
        lang_dir = self.root / lang
        lang_dir.mkdir(parents=True, exist_ok=True)
        path = lang_dir / name
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
            return path
        payload = {
            "meta": meta if meta is not None else {"language": lang, "schema_version": 1},
            "words": words if words is not None else [],
        }
        path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
        return path


@pytest.fixture(autouse=True)
def isolated_state():
    """Every test starts from environment settings and an empty cache."""
    reset_config()
    cache.clear_cache()
    yield
    reset_config()
    cache.clear_cache()


@pytest.fixture
def shards(tmp_path):
    """A temporary data root that the loader is pointed at."""
    set_config(WordSettings(DATA_DIR=str(tmp_path)))
    return ShardWriter(tmp_path)


@pytest.fixture
def lenient_shards(tmp_path):
    """Same as `shards`, but malformed shards are skipped instead of fatal."""
    set_config(WordSettings(DATA_DIR=str(tmp_path), STRICT_SCHEMA=False))
    return ShardWriter(tmp_path)
