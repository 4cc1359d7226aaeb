"""
Process-wide logging configuration.

Modules log through logging.getLogger(__name__); only the composition root
calls configure_logging().
"""

import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
CONSOLE_HANDLER_NAME = "paper_trading.console"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Attach a console handler and, optionally, a rotating file handler to the root logger.

    Safe to call more than once: handlers already installed are not duplicated.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(h.get_name() == CONSOLE_HANDLER_NAME for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = os.path.abspath(log_file)
        if not any(
            isinstance(h, RotatingFileHandler) and getattr(h, "baseFilename", "") == log_path
            for h in root_logger.handlers
        ):
            os.makedirs(os.path.dirname(log_path), exist_ok=True)
            file_handler = RotatingFileHandler(log_path, maxBytes=2 * 1024 * 1024, backupCount=3)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)
