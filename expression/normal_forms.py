# expression/normal_forms.py
# This file is part of PCEx - Presence Condition Extraction
#
# AST transformer for disjunctive and conjunctive normal form conversion

"""Transforms condition trees into disjunctive and conjunctive normal form.

The conversion runs in two phases:
1. A memoized bottom-up pass folds constants, removes double negations and
   pushes negations down to the literals (negation normal form).
2. Distribution turns the negation normal form into a tuple of clauses, either
   a disjunction of conjunctions (DNF) or a conjunction of disjunctions (CNF).

Clauses hold ``(name, positive)`` terms. A tree that folds to a constant has no
normal form over variables; both conversions return None for it.
"""

from __future__ import annotations
from typing import Dict, Optional, Tuple
from . import ast_nodes as ast
from utils.logger import get_logger

Term = Tuple[str, bool]
TermClause = Tuple[Term, ...]
NormalForm = Tuple[TermClause, ...]

TRUE = ast.Constant(True)
FALSE = ast.Constant(False)


class NormalFormTransformer(ast.Visitor):
    """Simplifies condition trees and converts them into normal forms.

    Attributes:
        _memo: Cache for simplified subexpressions to avoid redundant computation
    """

    def __init__(self):
        """Initialize transformer with empty memoization cache."""
        self._memo: Dict[ast.Expr, ast.Expr] = {}

    def simplify(self, root: ast.Expr) -> ast.Expr:
        """Fold constants and push negations down to the literals.

        The result is either a Constant or a tree of And/Or nodes over
        literals and negated literals without any constant inside.

        Raises:
            TypeError: The tree still contains an Opaque node
        """
        return self._visit(root)

    def to_dnf(self, root: ast.Expr) -> Optional[NormalForm]:
        """Convert to a disjunction of conjunctive clauses.

        Returns:
            Tuple of conjunctions, or None if the tree is constant
        """
        simplified = self.simplify(root)
        if isinstance(simplified, ast.Constant):
            get_logger().debug(f"Condition {root} folds to {simplified}")
            return None
        return _to_dnf(simplified)

    def to_cnf(self, root: ast.Expr) -> Optional[NormalForm]:
        """Convert to a conjunction of disjunctive clauses.

        Returns:
            Tuple of disjunctions, or None if the tree is constant
        """
        simplified = self.simplify(root)
        if isinstance(simplified, ast.Constant):
            get_logger().debug(f"Condition {root} folds to {simplified}")
            return None
        return _to_cnf(simplified)

    def _visit(self, node: ast.Expr) -> ast.Expr:
        if node in self._memo:
            return self._memo[node]

        result = node.accept(self)
        self._memo[node] = result
        return result

    def visit_literal(self, n: ast.Literal) -> ast.Expr:
        return n

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return n

    def visit_opaque(self, n: ast.Opaque) -> ast.Expr:
        raise TypeError(f"Opaque fragment '{n.text}' has no Boolean meaning")

    def visit_not(self, n: ast.Not) -> ast.Expr:
        """Visit negation node, pushing the negation inwards."""
        return _negate(self._visit(n.operand))

    def visit_and(self, n: ast.And) -> ast.Expr:
        left = self._visit(n.left)
        right = self._visit(n.right)

        if left == FALSE or right == FALSE:
            return FALSE
        if left == TRUE:
            return right
        if right == TRUE:
            return left
        return ast.And(left, right)

    def visit_or(self, n: ast.Or) -> ast.Expr:
        left = self._visit(n.left)
        right = self._visit(n.right)

        if left == TRUE or right == TRUE:
            return TRUE
        if left == FALSE:
            return right
        if right == FALSE:
            return left
        return ast.Or(left, right)


def _negate(expr: ast.Expr) -> ast.Expr:
    """Negate a simplified tree, keeping it in negation normal form."""
    if isinstance(expr, ast.Constant):
        return ast.Constant(not expr.value)
    if isinstance(expr, ast.Literal):
        return ast.Not(expr)
    # Double negation: !!A -> A
    if isinstance(expr, ast.Not):
        return expr.operand
    # De Morgan: !(A & B) -> !A | !B
    if isinstance(expr, ast.And):
        return ast.Or(_negate(expr.left), _negate(expr.right))
    # De Morgan: !(A | B) -> !A & !B
    if isinstance(expr, ast.Or):
        return ast.And(_negate(expr.left), _negate(expr.right))
    raise TypeError(f"Cannot negate node of type {type(expr).__name__}")


def _term(expr: ast.Expr) -> Optional[Term]:
    if isinstance(expr, ast.Literal):
        return (expr.name, True)
    if isinstance(expr, ast.Not) and isinstance(expr.operand, ast.Literal):
        return (expr.operand.name, False)
    return None


def _to_dnf(expr: ast.Expr) -> NormalForm:
    """Distribute a negation normal form into DNF clauses."""
    term = _term(expr)
    if term is not None:
        return ((term,),)

    # Disjunction: combine clauses
    if isinstance(expr, ast.Or):
        return _to_dnf(expr.left) + _to_dnf(expr.right)

    # Conjunction: distribute clauses
    if isinstance(expr, ast.And):
        left_clauses = _to_dnf(expr.left)
        right_clauses = _to_dnf(expr.right)
        return tuple(
            left_clause + right_clause
            for left_clause in left_clauses
            for right_clause in right_clauses
        )

    raise TypeError(f"Unexpected node in negation normal form: {expr}")


def _to_cnf(expr: ast.Expr) -> NormalForm:
    """Distribute a negation normal form into CNF clauses."""
    term = _term(expr)
    if term is not None:
        return ((term,),)

    if isinstance(expr, ast.And):
        return _to_cnf(expr.left) + _to_cnf(expr.right)

    if isinstance(expr, ast.Or):
        left_clauses = _to_cnf(expr.left)
        right_clauses = _to_cnf(expr.right)
        return tuple(
            left_clause + right_clause
            for left_clause in left_clauses
            for right_clause in right_clauses
        )

    raise TypeError(f"Unexpected node in negation normal form: {expr}")


def to_dnf(expr: ast.Expr) -> Optional[NormalForm]:
    """Convert a tree to DNF clauses with a fresh transformer."""
    return NormalFormTransformer().to_dnf(expr)


def to_cnf(expr: ast.Expr) -> Optional[NormalForm]:
    """Convert a tree to CNF clauses with a fresh transformer."""
    return NormalFormTransformer().to_cnf(expr)
