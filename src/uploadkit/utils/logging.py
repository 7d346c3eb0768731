"""
Logging configuration for uploadkit.

Console output goes through rich by default; an optional file handler writes
plain, parseable lines.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


class FileFormatter(logging.Formatter):
    """Formatter for file logs - clean and parseable."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s", datefmt="%Y-%m-%d %H:%M:%S")


class ConsoleFormatter(logging.Formatter):
    """Plain console format: ``LEVEL: time - msg``, with file:line for errors."""

    def __init__(self) -> None:
        super().__init__(datefmt="%Y-%m-%d %H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        prefix = f"{record.levelname}: {self.formatTime(record)}"
        if record.levelno >= logging.ERROR and record.pathname:
            return f"{prefix} - {Path(record.pathname).name}:{record.lineno} - {record.getMessage()}"
        return f"{prefix} - {record.getMessage()}"


LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _parse_level(level: str | int) -> int:
    """Parse a level name or number; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        return LEVEL_MAP.get(level.upper(), logging.INFO)
    return logging.INFO


def setup_logging(
    level: str | int = logging.INFO,
    log_file: str | Path | None = None,
    format_string: str | None = None,
    file_mode: str = "a",
    console: Console | None = None,
    console_enabled: bool = True,
    use_rich: bool = True,
) -> logging.Logger:
    """
    Setup logging configuration for uploadkit.

    Args:
        level: Logging level as string (DEBUG, INFO, etc.) or int (default: INFO)
        log_file: Optional file path to write logs to (default: None, console only)
        format_string: Optional format string for the plain console handler
        file_mode: 'a' to append to the log file, 'w' to overwrite (default: 'a')
        console: Optional rich Console for the rich handler (default: stderr)
        console_enabled: Whether to log to the console at all (default: True)
        use_rich: Use rich's RichHandler for console output (default: True)

    Returns:
        The ``uploadkit`` logger
    """
    logger = logging.getLogger("uploadkit")

    # Only this logger's handlers; root and children are left alone
    logger.handlers.clear()

    level_int = _parse_level(level)
    logger.setLevel(level_int)

    if console_enabled:
        if use_rich:
            logger.addHandler(
                RichHandler(
                    level=level_int,
                    console=console or Console(stderr=True),
                    show_time=True,
                    show_path=True,
                    markup=False,
                    rich_tracebacks=True,
                    log_time_format="[%X]",
                )
            )
        else:
            formatter: logging.Formatter = (
                logging.Formatter(format_string) if format_string is not None else ConsoleFormatter()
            )
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(level_int)
            console_handler.setFormatter(formatter)
            logger.addHandler(console_handler)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode=file_mode)
        # File captures everything the logger lets through
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(FileFormatter())
        logger.addHandler(file_handler)

    logger.propagate = True
    return logger


def setup_logging_from_config(
    config: dict[str, Any], project_dir: Path | None = None, console: Console | None = None
) -> logging.Logger:
    """
    Setup logging from the ``logging`` section of an uploadkit config.

    Recognised keys: ``level``, ``file``, ``file_mode``, ``format``,
    ``console_enabled`` and ``console_type`` (``rich`` or ``plain``). Unlike
    a full application, no log file is written unless ``file`` is set.

    Args:
        config: Configuration dictionary (with a 'logging' key, or the section itself)
        project_dir: Directory relative log file paths are resolved against
        console: Optional rich Console for the rich handler

    Returns:
        The ``uploadkit`` logger
    """
    logging_config = config.get("logging")
    if logging_config is None:
        logging_config = config if ("level" in config or "file" in config) else {}

    log_file = logging_config.get("file")
    if log_file and project_dir:
        log_file = Path(log_file)
        if not log_file.is_absolute():
            log_file = project_dir / log_file

    console_enabled = logging_config.get("console_enabled", True)
    return setup_logging(
        level=logging_config.get("level", logging.INFO),
        log_file=log_file,
        format_string=logging_config.get("format"),
        file_mode=logging_config.get("file_mode", "a"),
        console=console,
        console_enabled=console_enabled,
        use_rich=logging_config.get("console_type", "rich") == "rich",
    )


_logging_setup_done = False
_logging_setup_lock = threading.Lock()


def _auto_setup_logging() -> None:
    """
    Configure logging from the global config, once, if one has been set.

    Called from get_logger() so library code logs correctly even when the
    application never called setup_logging_from_config() itself.
    """
    global _logging_setup_done

    if _logging_setup_done:
        return

    uploadkit_logger = logging.getLogger("uploadkit")
    if uploadkit_logger.handlers:
        _logging_setup_done = True
        return

    with _logging_setup_lock:
        if _logging_setup_done or uploadkit_logger.handlers:
            _logging_setup_done = True
            return

        from uploadkit.config.singleton import get_config

        config_obj = get_config()
        if config_obj is not None and "logging" in config_obj:
            setup_logging_from_config(config_obj.data)
            _logging_setup_done = True


def get_logger(name: str = "uploadkit") -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (default: "uploadkit")

    Returns:
        Logger instance
    """
    _auto_setup_logging()

    logger = logging.getLogger(name)
    logger.propagate = True
    return logger
