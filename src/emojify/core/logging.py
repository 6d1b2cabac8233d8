"""Logging setup for the emojify command line.

Library modules only create loggers under the ``emojify`` namespace and the
package installs a ``NullHandler``, so importing emojify never writes
anything. The CLI calls :func:`setup_logging`, which routes the whole
namespace through a queue to a rotating log file and, optionally, stdout.

Environment:
    EMOJIFY_LOG_DIR           directory for the log file (default ~/.emojify/logs)
    EMOJIFY_LOG_FILE          file name (default emojify.log)
    EMOJIFY_LOG_MAX_BYTES     rotation size
    EMOJIFY_LOG_BACKUP_COUNT  rotated files kept
    EMOJIFY_LOG_LEVEL         overrides the configured level
    EMOJIFY_CONSOLE_LOGS      "1"/"true"/"yes" also logs to stdout
"""

import atexit
import logging
import os
import sys
import threading
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import SimpleQueue

PACKAGE_LOGGER = "emojify"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_lock = threading.Lock()
_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes"}


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


def log_file_path() -> Path:
    env_dir = os.environ.get("EMOJIFY_LOG_DIR")
    logs_dir = Path(env_dir) if env_dir else Path.home() / ".emojify" / "logs"
    return logs_dir / os.environ.get("EMOJIFY_LOG_FILE", "emojify.log")


def _file_handler() -> logging.Handler | None:
    path = log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            path,
            maxBytes=_env_int("EMOJIFY_LOG_MAX_BYTES", 10 * 1024 * 1024),
            backupCount=_env_int("EMOJIFY_LOG_BACKUP_COUNT", 5),
            encoding="utf-8",
        )
    except OSError:
        # Unwritable log dir: run without a file sink
        return None


def _build_handlers(include_console: bool, include_file: bool) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if include_file:
        handler = _file_handler()
        if handler is not None:
            handlers.append(handler)
    if include_console:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(
    log_level: str = "INFO",
    include_console: bool | None = None,
    include_file: bool = True,
) -> logging.Logger:
    """Attach the queue-backed sinks to the ``emojify`` logger.

    Safe to call repeatedly: sinks are created once, later calls only change
    the level.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        include_console: Also log to stdout. None reads EMOJIFY_CONSOLE_LOGS.
        include_file: Log to the rotating file

    Returns:
        The package logger

    """
    global _listener, _queue_handler

    level = logging.getLevelName(os.environ.get("EMOJIFY_LOG_LEVEL", log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    with _lock:
        if _listener is None:
            if include_console is None:
                include_console = _env_flag("EMOJIFY_CONSOLE_LOGS")
            handlers = _build_handlers(include_console, include_file)
            if handlers:
                queue: SimpleQueue = SimpleQueue()
                _listener = QueueListener(queue, *handlers, respect_handler_level=True)
                _listener.start()
                atexit.register(shutdown_logging)

                _queue_handler = QueueHandler(queue)
                logger.addHandler(_queue_handler)
                logger.propagate = False

        if _listener is not None:
            for handler in _listener.handlers:
                handler.setLevel(level)

    return logger


def shutdown_logging() -> None:
    """Flush and detach the sinks installed by :func:`setup_logging`."""
    global _listener, _queue_handler
    with _lock:
        if _listener is not None:
            _listener.stop()
            for handler in _listener.handlers:
                handler.close()
            _listener = None
        if _queue_handler is not None:
            logger = logging.getLogger(PACKAGE_LOGGER)
            logger.removeHandler(_queue_handler)
            logger.propagate = True
            _queue_handler = None


__all__ = ["PACKAGE_LOGGER", "log_file_path", "setup_logging", "shutdown_logging"]
