"""Tests for logging configuration"""
import logging

import pytest

from git_status_line import logging_config
from git_status_line.logging_config import ColoredFormatter, get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


class TestGetLogger:
    """Test logger naming."""

    def test_package_module_name_unchanged(self):
        assert get_logger("git_status_line.parser").name == "git_status_line.parser"

    def test_service_module_name_unchanged(self):
        name = "git_status_line.services.git_service"
        assert get_logger(name).name == name

    def test_other_names_moved_under_package(self):
        assert get_logger("parser").name == "git_status_line.parser"


class TestSetupLogging:
    """Test log levels and handlers."""

    def test_default_level(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_level(self):
        setup_logging(verbose=True)
        assert logging.getLogger().level == logging.INFO

    def test_debug_writes_log_file(self, temp_dir, monkeypatch):
        log_file = temp_dir / "logs" / "git-status-line.log"
        monkeypatch.setattr(logging_config, "get_log_file", lambda: log_file)

        setup_logging(debug=True)
        root_logger = logging.getLogger()

        assert root_logger.level == logging.DEBUG
        assert any(isinstance(h, logging.FileHandler) for h in root_logger.handlers)
        assert log_file.parent.is_dir()

    def test_colored_formatter_plain_when_not_a_tty(self):
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = logging.LogRecord("x", logging.ERROR, __file__, 1, "boom", None, None)
        # pytest captures stderr, so it is never a TTY here
        assert formatter.format(record) == "ERROR boom"
