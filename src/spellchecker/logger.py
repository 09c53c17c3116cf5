"""Structured logging (timestamp, document, mistakes, etc.)."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/spellchecker.log"
_LOG_LEVEL = logging.INFO

LOG_FORMAT = (
    "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
    "module=%(module)s | funcName=%(funcName)s | "
    "lineno=%(lineno)d | message=%(message)s"
)


def setup_logging(
    log_file: Path = LOG_FILE_PATH,
    level: Union[int, str] = _LOG_LEVEL,
) -> logging.Handler:
    """Route the root logger to a rotating log file.

    Any handlers already attached to the root logger are removed first,
    so calling this twice does not duplicate records.

    Args:
        log_file (Path): The file the records are written to. Its parent
        directory is created when missing.
        level (Union[int, str]): The level of the root logger.

    Returns:
        logging.Handler: The installed file handler.

    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    return file_handler


def log_check(
    document: Path,
    words_checked: int,
    mistakes: int,
    execution_time_ms: float,
) -> None:
    """Log the details of a document check using the configured
    logging system.

    Args:
        document (Path): The document that was checked.
        words_checked (int): How many tokens were looked up.
        mistakes (int): How many of them were misspelt.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Document: '%s', Words: %d, Mistakes: %d, Execution Time: %.2f ms",
        document,
        words_checked,
        mistakes,
        execution_time_ms,
    )
