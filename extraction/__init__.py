# extraction/__init__.py
# This file is part of PCEx - Presence Condition Extraction
#
# Per-line presence condition composition and the .pc file format

"""Turns conditional blocks into per-line presence conditions.

Primary Components:
    ConditionalOccurrence: One conditional block reported by a directive tracker
    ConditionComposer: Resolves nested blocks into effective conditions
    compose_presence_conditions: One condition string per source line
    write_pc_file / read_pc_file: The ``.pc`` intermediate format
"""

from .composer import (
    ConditionalOccurrence,
    ConditionComposer,
    compose_presence_conditions,
    strip_markers,
)
from .pc_files import (
    extract_file,
    iter_pc_files,
    pc_file_path,
    read_pc_file,
    write_pc_file,
)

__all__ = [
    "ConditionalOccurrence",
    "ConditionComposer",
    "compose_presence_conditions",
    "strip_markers",
    "extract_file",
    "iter_pc_files",
    "pc_file_path",
    "read_pc_file",
    "write_pc_file",
]
