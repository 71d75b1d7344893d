# utils/__init__.py
# This file is part of PCEx - Presence Condition Extraction
#
# Utility module exports

from .logger import get_logger, configure_logging, LogLevel
from .file_provider import FileProvider, read_lines, PC_FILE_REGEX

__all__ = [
    "get_logger",
    "configure_logging",
    "LogLevel",
    "FileProvider",
    "read_lines",
    "PC_FILE_REGEX",
]
