# model/presence_condition.py

"""
Presence conditions bound to a source file, and the list of one extraction run.
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from pathlib import PurePosixPath
from typing import Iterator, Optional, Sequence, Tuple

from .clauses import ClauseList, canonical_clause_list
from .formula import CNF


@dataclass(frozen=True)
class PresenceCondition:
    """
    DNF and negated-DNF of one condition guarding code in ``file_path``.

    Equality looks at the file and the DNF only. The empty sentinel has no
    clause lists and is dropped by every consumer.
    """

    file_path: Optional[PurePosixPath]
    dnf: Optional[ClauseList]
    negated_dnf: Optional[ClauseList] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if self.dnf is not None:
            object.__setattr__(self, "dnf", canonical_clause_list(self.dnf))

    @classmethod
    def empty(cls) -> PresenceCondition:
        return cls(None, None, None)

    @property
    def is_empty(self) -> bool:
        return self.dnf is None or self.negated_dnf is None

    def with_file(self, file_path: PurePosixPath) -> PresenceCondition:
        """
        Same clause data, different file. Sentinels stay sentinels.
        """
        if self.is_empty:
            return self
        return replace(self, file_path=file_path)


@dataclass(frozen=True)
class PresenceConditionList:
    """
    All surviving presence conditions of a run, the formula whose numbering
    they use, and the variable names discovered while parsing.
    """

    conditions: Tuple[PresenceCondition, ...]
    formula: CNF
    pc_names: Tuple[str, ...] = ()

    @classmethod
    def of(
        cls,
        conditions: Sequence[PresenceCondition],
        formula: CNF,
        pc_names: Sequence[str] = (),
    ) -> PresenceConditionList:
        return cls(tuple(conditions), formula, tuple(pc_names))

    def __iter__(self) -> Iterator[PresenceCondition]:
        return iter(self.conditions)

    def __len__(self) -> int:
        return len(self.conditions)

    def __getitem__(self, index: int) -> PresenceCondition:
        return self.conditions[index]
