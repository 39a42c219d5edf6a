"""
Infrastructure layer - logging.

Single place where the root logger is configured for the portal.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Dict


_LEVELS = {
    'DEBUG': logging.DEBUG,
    'INFO': logging.INFO,
    'WARNING': logging.WARNING,
    'ERROR': logging.ERROR,
    'CRITICAL': logging.CRITICAL
}


class LoggerManager:
    """Unified logger manager"""

    _loggers: Dict[str, logging.Logger] = {}
    _configured: bool = False
    _log_file: Optional[Path] = None

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        Get or create a configured logger.

        Args:
            name: logger name, usually ``__name__``

        Returns:
            the logger instance
        """
        if not cls._configured:
            cls._configure_logging()

        if name not in cls._loggers:
            cls._loggers[name] = logging.getLogger(name)

        return cls._loggers[name]

    @classmethod
    def _configure_logging(cls):
        if cls._configured:
            return

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.INFO)

        # Streamlit (and pytest) may already own the root handlers
        if root_logger.handlers:
            cls._configured = True
            return

        console_handler = logging.StreamHandler(sys.stdout)
        console_formatter = logging.Formatter(
            '%(asctime)s [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        root_logger.addHandler(console_handler)

        cls._configured = True

    @classmethod
    def _add_file_handler_internal(cls, log_file: Path, logger: logging.Logger) -> None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_formatter = logging.Formatter(
                '%(asctime)s [%(levelname)s] [%(name)s:%(lineno)d] %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not attach log file {log_file}: {e}")

    @classmethod
    def set_log_file(cls, log_file: Path) -> None:
        """Attach a log file; no-op if the same file is already attached."""
        if cls._log_file == log_file:
            return
        if not cls._configured:
            cls._configure_logging()
        cls._log_file = log_file
        cls._add_file_handler_internal(log_file, logging.getLogger())

    @classmethod
    def set_level(cls, level: str) -> None:
        """Set the global log level; unknown names are ignored."""
        if level.upper() in _LEVELS:
            logging.getLogger().setLevel(_LEVELS[level.upper()])

    @classmethod
    def apply(cls, level: str, log_file: Optional[Path] = None) -> None:
        """Apply the portal settings: level always, file only when given."""
        cls.set_level(level)
        if log_file is not None:
            cls.set_log_file(log_file)

    @classmethod
    def reset(cls) -> None:
        """Reset configuration (used by tests)."""
        cls._loggers.clear()
        cls._configured = False
        cls._log_file = None


def get_logger(name: str) -> logging.Logger:
    return LoggerManager.get_logger(name)


def set_log_level(level: str) -> None:
    LoggerManager.set_level(level)
