# utils/logger.py
# This file is part of PCEx - Presence Condition Extraction
#
# Logging utility for presence condition extraction with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for presence condition extraction."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class PCLogger:
    """Centralized logger for the extraction pipeline with structured output."""

    def __init__(self, name: str = "pc_extractor", level: LogLevel = LogLevel.INFO):
        """Initialize the extraction logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(PCFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for extraction events
    def invalid_range(self, reason: str, expression: str):
        """Log a conditional block whose line range cannot be written."""
        self.error(f"Invalid range of conditional block ({reason}): {expression}")

    def overlapping_range(self, first: str, second: str, line: int):
        """Log two unrelated blocks claiming the same line."""
        self.warning(
            f"Line {line}: condition '{second}' overwrites unrelated condition '{first}'"
        )

    def file_progress(self, current: int, total: int, path: str):
        """Log progress through a list of files."""
        self.info(f"({current}/{total}) {path}")

    def conversion_summary(self, files: int, distinct: int, kept: int, variables: int):
        """Log the outcome of a normalization run."""
        self.info(
            f"Converted {distinct} distinct conditions from {files} files: "
            f"{kept} presence conditions over {variables} variables"
        )

    def artifact_reused(self, path: str):
        """Log reuse of a previously written artifact."""
        self.info(f"Reusing {path}")


class PCFormatter(logging.Formatter):
    """Custom formatter with clean output for progress messages."""

    def format(self, record):
        # INFO shows the message only
        if record.levelno == logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[PCLogger] = None


def get_logger(name: str = "pc_extractor") -> PCLogger:
    """Get or create the global extraction logger instance.

    Args:
        name: Logger name (default: "pc_extractor")

    Returns:
        PCLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = PCLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
