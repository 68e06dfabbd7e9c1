"""Structured logging for trie operations."""

import logging
import logging.handlers
from pathlib import Path
from typing import Union

LOG_FILE_PATH = Path(__file__).parent.parent.parent / "logs/visualizer.log"
_LOG_LEVEL = logging.INFO

_file_handler: Union[logging.Handler, None] = None


def setup_logging(
    log_file: Path = LOG_FILE_PATH,
    level: Union[int, str] = _LOG_LEVEL,
) -> logging.Handler:
    """Attach a rotating file handler to the root logger.

    Calling this again replaces the handler installed by a previous call.

    Args:
        log_file (Path): Where to write the log records.
        level (int | str): The root logger level.

    Returns:
        logging.Handler: The installed file handler.

    """
    global _file_handler

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    if _file_handler is not None:
        root_logger.removeHandler(_file_handler)
        _file_handler.close()

    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    formatter = logging.Formatter(
        "level=%(levelname)s | time=%(asctime)s | process=%(process)d | "
        "thread=%(thread)d | module=%(module)s | funcName=%(funcName)s | "
        "lineno=%(lineno)d | message=%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)
    _file_handler = file_handler

    print(f"[LOGGER] Writing logs to {log_file}")
    return file_handler


def teardown_logging() -> None:
    """Detach and close the handler installed by `setup_logging`."""
    global _file_handler
    if _file_handler is not None:
        logging.getLogger().removeHandler(_file_handler)
        _file_handler.close()
        _file_handler = None


def log_operation(
    operation: str,
    word: str,
    result: bool,
    execution_time_ms: float,
) -> None:
    """Log the details of one trie operation.

    Args:
        operation (str): The operation name, e.g. "insert".
        word (str): The normalized word or prefix.
        result (bool): The boolean outcome of the operation.
        execution_time_ms (float): The execution time in milliseconds.

    """
    logging.info(
        "Operation: %s, Word: '%s', Result: %s, Execution Time: %.3f ms",
        operation,
        word,
        result,
        execution_time_ms,
    )
