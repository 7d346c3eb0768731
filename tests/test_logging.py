"""
Tests for logging setup.
"""

import logging

import pytest
from rich.logging import RichHandler

from uploadkit.utils.logging import (
    ConsoleFormatter,
    FileFormatter,
    _parse_level,
    get_logger,
    setup_logging,
    setup_logging_from_config,
)


@pytest.fixture(autouse=True)
def _restore_uploadkit_logger():
    logger = logging.getLogger("uploadkit")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestParseLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), (logging.ERROR, logging.ERROR), ("nope", logging.INFO)],
    )
    def test_parse(self, value, expected):
        assert _parse_level(value) == expected


class TestSetupLogging:
    def test_rich_console_by_default(self):
        logger = setup_logging("DEBUG")
        assert logger.name == "uploadkit"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_plain_console(self):
        logger = setup_logging("INFO", use_rich=False)
        handler = logger.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert isinstance(handler.formatter, ConsoleFormatter)

    def test_custom_format(self):
        logger = setup_logging("INFO", use_rich=False, format_string="%(message)s")
        assert logger.handlers[0].formatter._fmt == "%(message)s"

    def test_no_console(self):
        logger = setup_logging("INFO", console_enabled=False)
        assert logger.handlers == []

    def test_idempotent(self):
        setup_logging("INFO")
        logger = setup_logging("INFO")
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "uploadkit.log"
        logger = setup_logging("DEBUG", log_file=log_file, console_enabled=False)
        get_logger("uploadkit.test").debug("declared resize")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "uploadkit.test: declared resize" in content
        assert isinstance(logger.handlers[0].formatter, FileFormatter)


class TestSetupFromConfig:
    def test_logging_section(self, tmp_path):
        logger = setup_logging_from_config(
            {"logging": {"level": "WARNING", "console_type": "plain", "file": "out.log"}}, project_dir=tmp_path
        )
        assert logger.level == logging.WARNING
        files = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert files and files[0].baseFilename == str(tmp_path / "out.log")
        assert not any(isinstance(h, RichHandler) for h in logger.handlers)

    def test_flat_section(self):
        logger = setup_logging_from_config({"level": "ERROR", "console_enabled": False})
        assert logger.level == logging.ERROR
        assert logger.handlers == []

    def test_defaults_without_section(self):
        logger = setup_logging_from_config({})
        assert logger.level == logging.INFO
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)


class TestFormatters:
    def test_console_formatter_adds_location_for_errors(self):
        record = logging.LogRecord("uploadkit", logging.ERROR, "/x/dispatcher.py", 42, "failed", None, None)
        assert "dispatcher.py:42 - failed" in ConsoleFormatter().format(record)

    def test_console_formatter_info(self):
        record = logging.LogRecord("uploadkit", logging.INFO, "/x/dispatcher.py", 42, "ran", None, None)
        out = ConsoleFormatter().format(record)
        assert out.startswith("INFO: ")
        assert out.endswith(" - ran")
