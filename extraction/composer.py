# extraction/composer.py
# This file is part of PCEx - Presence Condition Extraction
#
# Composition of nested conditional blocks into per-line presence conditions

"""Composes nested conditional blocks into one condition string per line.

An external directive tracker reports every conditional block of a file as an
occurrence: a line range, the block's own condition and the block enclosing
it. Occurrences live in an arena (a plain list); a nested occurrence refers to
its enclosing one by index, and that index is always smaller than its own,
because an enclosing block opens before anything nested in it.

The effective condition of a block is the conjunction of the effective
condition of its enclosing block and its own condition. Blocks are written
into the line array from the outermost level inwards, so a nested block
overwrites the lines of its enclosing block.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from utils.logger import get_logger

_DEFINED_MARKER = re.compile(r"\bdefined\b")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class ConditionalOccurrence:
    """One conditional block reported by the directive tracker.

    Attributes:
        begin_line: First line of the block (1-based)
        end_line: Last line of the block (1-based, inclusive)
        expression: The block's own condition text
        enclosing: Arena index of the enclosing block, None at top level
    """

    begin_line: int
    end_line: int
    expression: str
    enclosing: Optional[int] = None


def strip_markers(expression: str) -> str:
    """Remove the ``defined`` marker and all whitespace from condition text."""
    return _WHITESPACE.sub("", _DEFINED_MARKER.sub("", expression))


def _has_top_level_or(expression: str) -> bool:
    depth = 0
    for i, char in enumerate(expression):
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
        elif depth == 0 and expression.startswith("||", i):
            return True
    return False


def _operand(expression: str) -> str:
    return f"({expression})" if _has_top_level_or(expression) else expression


class ConditionComposer:
    """Resolves effective conditions over an arena of occurrences.

    Attributes:
        occurrences: The arena, indexed by position
    """

    def __init__(self, occurrences: Sequence[ConditionalOccurrence]):
        """Validate the arena.

        Raises:
            ValueError: An occurrence refers to itself or a later occurrence
        """
        for index, occurrence in enumerate(occurrences):
            parent = occurrence.enclosing
            if parent is not None and not 0 <= parent < index:
                raise ValueError(
                    f"Occurrence {index} has invalid enclosing index {parent}"
                )
        self.occurrences = list(occurrences)
        self._effective: Dict[int, str] = {}

    def depth(self, index: int) -> int:
        """Number of enclosing hops from an occurrence to its top-level block."""
        depth = 0
        parent = self.occurrences[index].enclosing
        while parent is not None:
            depth += 1
            parent = self.occurrences[parent].enclosing
        return depth

    def is_enclosed_by(self, index: int, ancestor: int) -> bool:
        parent = self.occurrences[index].enclosing
        while parent is not None:
            if parent == ancestor:
                return True
            parent = self.occurrences[parent].enclosing
        return False

    def effective_expression(self, index: int) -> str:
        """Conjunction of all conditions from the top-level block down to ``index``."""
        cached = self._effective.get(index)
        if cached is not None:
            return cached

        occurrence = self.occurrences[index]
        own = occurrence.expression.strip()
        if occurrence.enclosing is None:
            result = own
        else:
            outer = self.effective_expression(occurrence.enclosing)
            result = f"{_operand(outer)} && {_operand(own)}"

        self._effective[index] = result
        return result

    def compose(self, line_count: int) -> List[str]:
        """Produce one condition per source line, empty for unconditional lines.

        Args:
            line_count: Number of lines of the source file

        Returns:
            List of ``line_count`` condition strings
        """
        logger = get_logger()

        pcs = [""] * (line_count + 1)
        owners: List[Optional[int]] = [None] * (line_count + 1)

        order = sorted(range(len(self.occurrences)), key=self.depth)
        for index in order:
            occurrence = self.occurrences[index]
            expression = strip_markers(self.effective_expression(index))

            if occurrence.end_line <= 0:
                logger.invalid_range("end line <= 0", expression)
                continue
            if occurrence.end_line > line_count:
                logger.invalid_range("end line > number of lines", expression)
                continue
            if not 1 <= occurrence.begin_line <= occurrence.end_line:
                logger.invalid_range("begin line outside block", expression)
                continue

            warned = False
            for line in range(occurrence.begin_line - 1, occurrence.end_line):
                owner = owners[line]
                if (
                    not warned
                    and owner is not None
                    and not self.is_enclosed_by(index, owner)
                ):
                    logger.overlapping_range(pcs[line], expression, line + 1)
                    warned = True
                pcs[line] = expression
                owners[line] = index

        return pcs[:line_count]


def compose_presence_conditions(
    occurrences: Sequence[ConditionalOccurrence], line_count: int
) -> List[str]:
    """Compose the per-line conditions of one file.

    Example:
        >>> compose_presence_conditions(
        ...     [ConditionalOccurrence(3, 5, "A"), ConditionalOccurrence(4, 4, "B", 0)], 6
        ... )
        ['', '', 'A', 'A&&B', 'A', '']
    """
    return ConditionComposer(occurrences).compose(line_count)
