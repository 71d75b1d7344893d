# model/clauses.py

"""
Integer literal clauses and clause lists.

A literal is a signed variable index, a clause a tuple of literals without a
repeated variable, a clause list a tuple of clauses. Whether a clause list is
read as CNF or DNF depends on its owner; the helpers here do not care.
"""

from __future__ import annotations
from typing import Iterable, Optional, Tuple

Clause = Tuple[int, ...]
ClauseList = Tuple[Clause, ...]


def sort_clause(literals: Iterable[int]) -> Clause:
    """
    Canonical literal order: natural integer order.
    """
    return tuple(sorted(literals))


def clean_clause(literals: Iterable[int]) -> Optional[Clause]:
    """
    Drop duplicate literals and sort.
    Returns None when the clause holds a literal and its complement, since such
    a clause is vacuous (always true as a disjunction, always false as a
    conjunction).
    """
    unique = set(literals)
    if any(-literal in unique for literal in unique):
        return None
    return sort_clause(unique)


def canonical_clause_list(clauses: Iterable[Iterable[int]]) -> ClauseList:
    """
    Sort every clause, then the clauses themselves.
    Two clause lists are structurally equal iff their canonical forms are.
    """
    return tuple(sorted(sort_clause(clause) for clause in clauses))


def negate_clause_list(clauses: ClauseList) -> ClauseList:
    """
    Flip the sign of every literal, keeping the clause structure.
    Turns the CNF of a formula into the DNF of its negation.
    """
    return tuple(sort_clause(-literal for literal in clause) for clause in clauses)


def is_trivial(clauses: Optional[ClauseList]) -> bool:
    """
    True for a missing or empty clause list, or one holding an empty clause.
    """
    return not clauses or any(len(clause) == 0 for clause in clauses)


def clause_list_metric(clauses: ClauseList) -> Tuple[int, int]:
    """
    Sort key for scheduling: clause count first, then total literal count.
    """
    return len(clauses), sum(len(clause) for clause in clauses)
