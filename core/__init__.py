# core/__init__.py
# This file is part of PCEx - Presence Condition Extraction
#
# Core module public API for the extraction pipeline

"""Pipeline orchestration for presence condition extraction.

The pipeline runs in three stages: conditional blocks reported by a directive
tracker are composed into ``.pc`` files, the ``.pc`` files are normalized into
a presence condition list, and that list is grouped into the expressions used
for t-wise generation. Each stage persists its result and reuses it on the
next run.

Primary Components:
    PCExtractor: Runs and caches the stages for one output directory

Example:
    >>> from pathlib import Path
    >>> from core import PCExtractor
    >>> extractor = PCExtractor(Path("out"))
    >>> expressions = extractor.run(None, "busybox")
"""

from .extractor import DEFAULT_GROUPING, PC_LIST_FILE_NAME, PCExtractor, grouped_file_name

__all__ = ["PCExtractor", "DEFAULT_GROUPING", "PC_LIST_FILE_NAME", "grouped_file_name"]

__version__ = "1.0.0"
__description__ = "Pipeline orchestration for presence condition extraction"
