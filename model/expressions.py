# model/expressions.py

"""
Grouped clause lists, the final artifact handed to t-wise generation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .clauses import ClauseList
from .formula import CNF


@dataclass
class Expressions:
    """
    ``groups[i]`` is an ordered, duplicate-free list of clause lists.
    ``formula`` provides the variable numbering of every literal.
    """

    formula: CNF
    groups: List[List[ClauseList]] = field(default_factory=list)

    def add_group(self, group: List[ClauseList]) -> None:
        self.groups.append(group)

    def __len__(self) -> int:
        return len(self.groups)
