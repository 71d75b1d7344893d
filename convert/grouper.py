# convert/grouper.py
# This file is part of PCEx - Presence Condition Extraction
#
# Grouping strategies turning presence conditions into t-wise expressions

"""Partitions presence conditions and reduces each part to sorted clause lists.

Every presence condition contributes two clause lists to its group: the DNF
("this code is active") and the negated DNF ("this code is inactive"). Within
a group the lists are canonicalized, exact duplicates are removed and the rest
is ordered so that short, simple expressions come first.
"""

from enum import Enum
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Union

from model import ClauseList, Expressions, PresenceCondition, PresenceConditionList
from model.clauses import canonical_clause_list, clause_list_metric
from utils.logger import get_logger


class Grouping(Enum):
    """Selectable grouping strategies."""

    ALL = "all"
    FOLDER = "folder"
    FILE = "file"
    VARS = "vars"
    VARS_WITH_NAMES = "vars-with-names"
    ALL_MODEL_VARS = "all+model-vars"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: str) -> Optional["Grouping"]:
        """Look a strategy up by value or member name; None if unknown."""
        for grouping in cls:
            if value in (grouping.value, grouping.name):
                return grouping
        return None


def create_expression(condition: PresenceCondition) -> List[ClauseList]:
    """DNF and negated DNF of a condition; nothing for a sentinel."""
    if condition is None or condition.is_empty:
        return []
    return [
        clauses for clauses in (condition.dnf, condition.negated_dnf) if clauses
    ]


def sort_expressions(expressions: List[ClauseList]) -> None:
    """Order by clause count, then by accumulated clause length (stable)."""
    expressions.sort(key=clause_list_metric)


def create_expressions(conditions: Iterable[PresenceCondition]) -> List[ClauseList]:
    """Canonical, duplicate-free and sorted clause lists of a group."""
    unique: Dict[ClauseList, None] = {}
    for condition in conditions:
        for clauses in create_expression(condition):
            unique.setdefault(canonical_clause_list(clauses), None)

    expressions = list(unique)
    sort_expressions(expressions)
    return expressions


def literal_expressions(pairs: Sequence[tuple]) -> List[ClauseList]:
    """Single-literal clause lists for ``(positive, negative)`` literal pairs."""
    return [((literal,),) for pair in pairs for literal in pair]


class Grouper:
    """Applies a grouping strategy to a presence condition list."""

    def group(
        self, pc_list: PresenceConditionList, grouping: Union[Grouping, str]
    ) -> Optional[Expressions]:
        """Group presence conditions with the selected strategy.

        Args:
            pc_list: Converted presence conditions
            grouping: Strategy, as enum member or its value

        Returns:
            Grouped expressions, or None for an unknown strategy
        """
        if not isinstance(grouping, Grouping):
            grouping = Grouping.parse(str(grouping))
            if grouping is None:
                get_logger().warning("Unknown grouping strategy, nothing to do")
                return None

        get_logger().debug(f"Grouping {len(pc_list)} presence conditions by {grouping}")

        if grouping is Grouping.ALL:
            return self.group_by(pc_list, lambda pc: None)
        if grouping is Grouping.FOLDER:
            return self.group_by(pc_list, lambda pc: pc.file_path.parent)
        if grouping is Grouping.FILE:
            return self.group_by(pc_list, lambda pc: pc.file_path)
        if grouping is Grouping.VARS:
            return self.group_vars(pc_list)
        if grouping is Grouping.VARS_WITH_NAMES:
            return self.group_vars(pc_list, pc_list.pc_names)
        if grouping is Grouping.ALL_MODEL_VARS:
            return self.group_all_with_model_vars(pc_list)
        return None

    def group_by(
        self,
        pc_list: PresenceConditionList,
        key: Callable[[PresenceCondition], Hashable],
    ) -> Expressions:
        """One group per key value, groups in order of first appearance."""
        partitions: Dict[Hashable, List[PresenceCondition]] = {}
        for condition in pc_list:
            partitions.setdefault(key(condition), []).append(condition)

        expressions = Expressions(pc_list.formula)
        for members in partitions.values():
            expressions.add_group(create_expressions(members))
        return expressions

    def group_vars(
        self,
        pc_list: PresenceConditionList,
        names: Optional[Sequence[str]] = None,
    ) -> Expressions:
        """One group per variable holding its positive and negative literal.

        Presence conditions are ignored. With ``names`` only those variables
        of the numbering are used.
        """
        variables = pc_list.formula.variables
        expressions = Expressions(pc_list.formula)
        for pair in variables.literals(names):
            expressions.add_group(literal_expressions([pair]))
        return expressions

    def group_all_with_model_vars(self, pc_list: PresenceConditionList) -> Expressions:
        """A single group: every condition plus every single-literal expression."""
        literals = literal_expressions(pc_list.formula.variables.literals())

        unique = dict.fromkeys(create_expressions(pc_list.conditions))
        for clauses in literals:
            unique.setdefault(clauses, None)

        group = list(unique)
        sort_expressions(group)

        expressions = Expressions(pc_list.formula)
        expressions.add_group(group)
        return expressions
