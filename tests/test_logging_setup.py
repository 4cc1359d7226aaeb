import logging
from logging.handlers import RotatingFileHandler

import pytest

from paper_trading.infrastructure.logging.setup import CONSOLE_HANDLER_NAME, configure_logging


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after each test."""
    root = logging.getLogger()
    handlers_before = list(root.handlers)
    level_before = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in handlers_before:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level_before)


def _file_handlers(root, path):
    return [
        h
        for h in root.handlers
        if isinstance(h, RotatingFileHandler) and h.baseFilename == str(path)
    ]


def test_repeated_calls_do_not_duplicate_handlers(root_logger, tmp_path):
    log_file = tmp_path / "logs" / "paper_trading.log"

    configure_logging("INFO", str(log_file))
    configure_logging("INFO", str(log_file))

    console = [h for h in root_logger.handlers if h.get_name() == CONSOLE_HANDLER_NAME]
    assert len(console) == 1
    assert len(_file_handlers(root_logger, log_file)) == 1


def test_file_handler_rotates_at_two_mebibytes(root_logger, tmp_path):
    log_file = tmp_path / "nested" / "dir" / "app.log"

    configure_logging("INFO", str(log_file))

    assert log_file.parent.is_dir()
    handler = _file_handlers(root_logger, log_file)[0]
    assert handler.maxBytes == 2 * 1024 * 1024
    assert handler.backupCount == 3


def test_records_reach_the_file(root_logger, tmp_path):
    log_file = tmp_path / "app.log"
    configure_logging("INFO", str(log_file))

    logging.getLogger("paper_trading.tests").warning("Trade rejected: Insufficient funds for AAPL")
    for handler in _file_handlers(root_logger, log_file):
        handler.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "WARNING paper_trading.tests: Trade rejected: Insufficient funds for AAPL" in content


def test_level_is_applied_and_file_is_optional(root_logger):
    handlers_before = len(root_logger.handlers)

    configure_logging("DEBUG")

    assert root_logger.level == logging.DEBUG
    assert not any(isinstance(h, RotatingFileHandler) for h in root_logger.handlers[handlers_before:])
