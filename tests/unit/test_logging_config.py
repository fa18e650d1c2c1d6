import json
import logging

from utils.logging_config import get_logger


def test_logger_is_configured_once():
    first = get_logger("tests.logging.once")
    second = get_logger("tests.logging.once")
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False


def test_records_are_json_with_source_location(capsys):
    logger = get_logger("tests.logging.json")
    logger.error("Profile lookup failed", extra={"table": "dev.table"})

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["levelname"] == "ERROR"
    assert record["message"] == "Profile lookup failed"
    assert record["table"] == "dev.table"
    assert record["pathname"].endswith("test_logging_config.py")
    assert isinstance(record["lineno"], int)


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    logger = get_logger("tests.logging.level")
    assert logger.level == logging.WARNING


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "verbose")
    logger = get_logger("tests.logging.unknown_level")
    assert logger.level == logging.INFO
