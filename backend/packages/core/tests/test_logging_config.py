"""Tests for structured log rendering."""

import json
import logging

import pytest

from frogcrypto_core import get_logger, init_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_logs_carry_extra_fields(capsys, restore_root_logger) -> None:
    init_logging("INFO", json_logs=True)

    get_logger("frogcrypto.test").info("Granted frog", extra={"feed_id": "feed-1", "frog_id": 7})

    line = capsys.readouterr().out.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "Granted frog"
    assert record["level"] == "info"
    assert record["logger"] == "frogcrypto.test"
    assert record["feed_id"] == "feed-1"
    assert record["frog_id"] == 7
    assert "timestamp" in record


def test_level_filters_records(capsys, restore_root_logger) -> None:
    init_logging("WARNING", json_logs=True)

    get_logger("frogcrypto.test").info("hidden")

    assert capsys.readouterr().out == ""


def test_console_logs_include_extra_fields(capsys, restore_root_logger) -> None:
    init_logging("INFO", json_logs=False)

    get_logger("frogcrypto.test").warning("Feed poll rejected", extra={"reason": "cooldown"})

    out = capsys.readouterr().out
    assert "Feed poll rejected" in out
    assert "reason" in out
    assert "cooldown" in out
