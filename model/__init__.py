# model/__init__.py

"""
Domain objects for presence conditions:
integer literal clauses, variable numberings, the feature-model formula,
presence conditions and the grouped expressions. These types carry no
parsing or conversion logic.
"""

from .clauses import (
    Clause,
    ClauseList,
    canonical_clause_list,
    clean_clause,
    negate_clause_list,
    sort_clause,
)
from .variables import VariableMap
from .formula import CNF
from .presence_condition import PresenceCondition, PresenceConditionList
from .expressions import Expressions

__all__ = [
    "Clause",
    "ClauseList",
    "canonical_clause_list",
    "clean_clause",
    "negate_clause_list",
    "sort_clause",
    "VariableMap",
    "CNF",
    "PresenceCondition",
    "PresenceConditionList",
    "Expressions",
]
