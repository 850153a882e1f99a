"""
Logging helpers for the layout engine: handler setup for the ``wink_layout``
logger hierarchy, a colouring console formatter and phase timing.
"""

import logging
import os
import sys
import time
from datetime import datetime
from typing import Dict, Optional

LOG_LEVELS = {name: getattr(logging, name) for name in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")}

ROOT_LOGGER_NAME = "wink_layout"

CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s"

# ANSI escape sequences per level name
ANSI_RESET = '\033[0m'
LEVEL_COLORS = {
    'DEBUG': '\033[34m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[31m\033[1m',
}


class LogFormatter(logging.Formatter):
    """Console formatter that colours the level name."""

    def __init__(self, colored: bool = True, *args, **kwargs):
        """
        Initialize formatter.

        Args:
            colored: Whether to wrap level names in ANSI colours (never on Windows)
            *args: Passed to ``logging.Formatter``
            **kwargs: Passed to ``logging.Formatter``
        """
        super().__init__(*args, **kwargs)
        self.colored = colored and sys.platform != 'win32'

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        color = LEVEL_COLORS.get(record.levelname)
        if not self.colored or color is None:
            return text
        return text.replace(record.levelname, f"{color}{record.levelname}{ANSI_RESET}", 1)


def setup_logging(log_file: Optional[str] = None,
                  console_level: str = "INFO",
                  file_level: str = "DEBUG",
                  component: Optional[str] = None,
                  colored: bool = True) -> logging.Logger:
    """
    Attach console (and optionally file) handlers to the package logger.

    Calling it again for a logger that already has handlers changes nothing.

    Args:
        log_file: Path of a log file, or None to log to the console only
        console_level: Level name for the console handler
        file_level: Level name for the file handler
        component: Configure ``wink_layout.<component>`` instead of the package logger
        colored: Colour level names on the console

    Returns:
        logging.Logger: The configured logger
    """
    name = f"{ROOT_LOGGER_NAME}.{component}" if component else ROOT_LOGGER_NAME
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    console_level_no = LOG_LEVELS.get(console_level, logging.INFO)
    file_level_no = LOG_LEVELS.get(file_level, logging.DEBUG)
    logger.setLevel(min(console_level_no, file_level_no) if log_file else console_level_no)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(console_level_no)
    console_handler.setFormatter(LogFormatter(colored=colored, fmt=CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(file_level_no)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        logger.addHandler(file_handler)

    return logger


def get_default_log_file() -> str:
    """Dated log file under ``~/.wink_layout/logs``. The directory is not created here."""
    log_dir = os.path.join(os.path.expanduser("~"), ".wink_layout", "logs")
    return os.path.join(log_dir, f"wink_layout_{datetime.now():%Y-%m-%d}.log")


def log_exception(logger: logging.Logger, exception: Exception,
                  message: str = "An exception occurred") -> None:
    """
    Log an exception at ERROR level together with its traceback.

    Args:
        logger: Logger to use
        exception: The caught exception
        message: Context prefixed to the exception text
    """
    logger.error(f"{message}: {exception}",
                 exc_info=(type(exception), exception, exception.__traceback__))


class PerformanceLogger:
    """Times named phases of a component and logs their durations."""

    def __init__(self, logger: logging.Logger, component: str):
        self.logger = logger
        self.component = component
        self.start_times: Dict[str, float] = {}

    def start(self, name: str) -> None:
        self.start_times[name] = time.perf_counter()

    def end(self, name: str, level: str = "DEBUG") -> float:
        """
        Stop timing a phase and log how long it took.

        Args:
            name: Phase name given to ``start``
            level: Level name to log at

        Returns:
            float: Duration in seconds, 0.0 if the phase was never started
        """
        started = self.start_times.pop(name, None)
        if started is None:
            self.logger.warning(f"No start time found for {name}")
            return 0.0

        duration = time.perf_counter() - started
        self.log(name, duration, level)
        return duration

    def log(self, name: str, duration: float, level: str = "DEBUG") -> None:
        self.logger.log(LOG_LEVELS.get(level.upper(), logging.DEBUG),
                        f"{self.component} {name} took {duration:.4f} seconds")
