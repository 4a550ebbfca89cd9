# tests/test_logging_config.py
import json
import logging

import pytest
import structlog

import random_word
from random_word import Lang
from random_word.config import WordSettings
from random_word.logging_config import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    structlog.reset_defaults()
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


def test_json_output(capsys):
    configure_logging(WordSettings(LOG_FORMAT="json", LOG_LEVEL="INFO"))

    structlog.get_logger().info("word_store_loaded", lang="en", count=3)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "word_store_loaded"
    assert record["level"] == "info"
    assert record["lang"] == "en"
    assert record["count"] == 3
    assert "timestamp" in record


def test_level_filter(capsys):
    configure_logging(WordSettings(LOG_FORMAT="json", LOG_LEVEL="ERROR"))

    log = structlog.get_logger()
    log.info("quiet")
    log.error("loud")

    err = capsys.readouterr().err
    assert "quiet" not in err
    assert "loud" in err


def test_console_output(capsys):
    configure_logging(WordSettings(LOG_FORMAT="console", LOG_LEVEL="WARNING"))

    structlog.get_logger().warning("word_shard_skipped", file="b.json")

    err = capsys.readouterr().err
    assert "word_shard_skipped" in err
    assert "b.json" in err


def test_library_is_quiet_until_configured(capsys):
    structlog.reset_defaults()

    random_word.all(Lang.ZH)
    random_word.all_len(1, Lang.ZH)

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "word_store_loaded" not in captured.err
    assert "word_index_built" not in captured.err


def test_library_events_reach_stdlib_loggers(caplog):
    structlog.reset_defaults()
    caplog.set_level(logging.DEBUG, logger="random_word")

    random_word.all_len(5, Lang.EN)

    by_logger = {r.name: r.getMessage() for r in caplog.records}
    assert "word_store_loaded" in by_logger["random_word.loader"]
    assert "word_index_built" in by_logger["random_word.cache"]
