"""
logger.py

Configures the application-wide logger using Python's standard `logging` module.

A single logger named 'argument_miner' (accessible via `get_logger`) is set up
on first access with two handlers:

1.  Stream Handler (stdout):
    - Level: `DEBUG` and above.
    - Format: Time, Level, Message.

2.  File Handler:
    - Writes to `config["paths"]["logs_dir"]/argument_miner.log`
      (defaults to `./logs/argument_miner.log`).
    - Level: `INFO` and above.
    - Format: Timestamp, Level, LoggerName:FuncName:LineNo, Message.
    - Failures to create the file are logged and file logging is skipped.

Subsequent calls to `get_logger` return the same configured instance.
"""

import logging
import sys
from pathlib import Path

from argument_miner.config import config

_logger_instance = None
_DEFAULT_LOG_DIR = "./logs"
_DEFAULT_LOG_FILENAME = "argument_miner.log"
_APP_LOGGER_NAME = "argument_miner"


def _setup_logger() -> logging.Logger:
    """
    Internal function to configure and return the singleton logger instance.

    Called by `get_logger`; performs the setup only once.
    """
    global _logger_instance
    if _logger_instance:
        return _logger_instance

    logger = logging.getLogger(_APP_LOGGER_NAME)
    logger.setLevel(logging.DEBUG)

    if logger.hasHandlers():
        logger.handlers.clear()

    file_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d - %(message)s"
    )
    console_formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-8s | %(message)s", datefmt="%H:%M:%S"
    )

    try:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)
    except Exception as e:
        logging.basicConfig(level=logging.WARNING)
        logging.error(f"Failed to configure console logging: {e}", exc_info=True)

    log_dir_path_str = _DEFAULT_LOG_DIR
    try:
        log_dir_path_str = config.get("paths", {}).get("logs_dir", _DEFAULT_LOG_DIR)
        log_dir = Path(log_dir_path_str)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = log_dir / _DEFAULT_LOG_FILENAME

        file_handler = logging.FileHandler(log_file_path, encoding="utf-8")
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.error(
            f"Failed to create log directory or file at '{log_dir_path_str}': {e}. File logging disabled."
        )
    except Exception as e:
        logger.error(f"Unexpected error configuring file logging: {e}", exc_info=True)

    _logger_instance = logger
    return _logger_instance


def get_logger() -> logging.Logger:
    """
    Public function to retrieve the application's configured logger instance.

    Returns:
        logging.Logger: The application's configured logger instance.
    """
    return _setup_logger()
