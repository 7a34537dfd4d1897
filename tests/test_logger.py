"""Tests for logging setup"""

import json
import logging

import pytest

from limetools.utils.logger import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_json_lines_written_to_file(tmp_path):
    log_file = tmp_path / "logs" / "limetools.log"
    setup_logging(level="INFO", fmt="json", file_path=str(log_file))

    get_logger("limetools.test").info("User created", email="a@x.com")
    for handler in logging.getLogger().handlers:
        handler.flush()

    line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "User created"
    assert event["email"] == "a@x.com"
    assert event["level"] == "info"
    assert event["logger"] == "limetools.test"


def test_level_filters_lower_events(tmp_path):
    log_file = tmp_path / "app.log"
    setup_logging(level="WARNING", fmt="json", file_path=str(log_file))

    get_logger("limetools.test").info("hidden")
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert log_file.read_text(encoding="utf-8") == ""
