# convert/__init__.py
# This file is part of PCEx - Presence Condition Extraction
#
# Normalization and grouping of presence conditions

"""Normalization and grouping of presence conditions.

Primary Components:
    Converter: Per-line condition strings to a PresenceConditionList
    NormalizationContext: Text-keyed cache and discovered names of one run
    Grouper: Grouping strategies producing the final Expressions
    Grouping: Enumeration of the strategies

Example:
    >>> from convert import Converter, Grouper, Grouping
    >>> pcs = Converter().convert_files(None, [("src/a.c", ["", "A||B", "A||B"])])
    >>> Grouper().group(pcs, Grouping.ALL).groups
    [[((-2, -1),), ((1,), (2,))]]
"""

from .converter import AUDIT_FILE_NAME, Converter, NormalizationContext, write_audit_file
from .grouper import Grouper, Grouping, create_expressions, sort_expressions

__all__ = [
    "AUDIT_FILE_NAME",
    "Converter",
    "NormalizationContext",
    "write_audit_file",
    "Grouper",
    "Grouping",
    "create_expressions",
    "sort_expressions",
]
