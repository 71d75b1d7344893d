# model/formula.py

"""
Feature-model formula in conjunctive normal form.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable

from .clauses import ClauseList
from .variables import VariableMap


@dataclass(frozen=True)
class CNF:
    """
    A variable numbering plus the clauses constraining it.
    A CNF synthesized from discovered names carries no clauses.
    """

    variables: VariableMap
    clauses: ClauseList = field(default_factory=tuple)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> CNF:
        return cls(VariableMap.from_names(names))

    def __str__(self) -> str:
        return f"CNF({len(self.variables)} variables, {len(self.clauses)} clauses)"
