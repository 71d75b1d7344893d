# expression/ast_nodes.py
# This file is part of PCEx - Presence Condition Extraction
#
# Abstract Syntax Tree node classes for preprocessor condition representation

"""AST node classes for representing parsed preprocessor conditions.

This module defines immutable and hashable node classes used to construct tree
representations of the boolean conditions guarding a block of C/C++ code. The
set of node kinds is closed: every routine that walks a tree handles exactly
these six kinds and rejects anything else.

Node Types:
    Literal: Named configuration variables
    Constant: The Boolean constants true and false
    Opaque: Well-formed but non-Boolean fragments (comparisons, macro calls)
    Not, And, Or: Standard Boolean connectives

All nodes support the visitor design pattern for traversal and formatting.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol


class Visitor(Protocol):
    """Interface for AST visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each AST node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_literal(self, n: Literal): ...

    def visit_constant(self, n: Constant): ...

    def visit_opaque(self, n: Opaque): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all AST nodes in condition expressions.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Literal(Expr):
    """Named configuration variable, e.g. ``CONFIG_SMP`` or ``HAVE_FOO``.

    Attributes:
        name: The identifier string for this literal
    """

    name: str

    def accept(self, v: Visitor):
        return v.visit_literal(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean constant ``true`` or ``false``.

    Attributes:
        value: Truth value of the constant
        text: Source spelling when read from an integer literal
    """

    value: bool
    text: Optional[str] = field(default=None, compare=False)

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        if self.text is not None:
            return self.text
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class Opaque(Expr):
    """Fragment that parses but carries no Boolean meaning.

    Comparisons (``VERSION>3``), arithmetic and function-like macro calls
    (``IS_ENABLED(X)``) end up here. Readers drop these nodes before any
    normal form conversion.

    Attributes:
        text: Source text of the fragment, without whitespace
    """

    text: str

    def accept(self, v: Visitor):
        return v.visit_opaque(self)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation of its operand.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return f"!{self.operand}"


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction of two operands.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return f"({self.left} && {self.right})"


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction of two operands.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return f"({self.left} || {self.right})"


class ShortFormatter:
    """Visitor rendering a tree in the short operator notation (``-``, ``&``, ``|``)."""

    def visit_literal(self, n: Literal) -> str:
        return n.name

    def visit_constant(self, n: Constant) -> str:
        return "true" if n.value else "false"

    def visit_opaque(self, n: Opaque) -> str:
        return n.text

    def visit_not(self, n: Not) -> str:
        return f"-{n.operand.accept(self)}"

    def visit_and(self, n: And) -> str:
        return f"({n.left.accept(self)} & {n.right.accept(self)})"

    def visit_or(self, n: Or) -> str:
        return f"({n.left.accept(self)} | {n.right.accept(self)})"


def format_c(expr: Expr) -> str:
    """Render a tree with C operators (``!``, ``&&``, ``||``)."""
    return str(expr)


def format_short(expr: Expr) -> str:
    """Render a tree with the short operators used by the audit listing."""
    return expr.accept(ShortFormatter())


def iter_variables(expr: Expr) -> Iterator[str]:
    """Yield literal names in left-to-right order, repeats included."""
    stack: List[Expr] = [expr]
    while stack:
        node = stack.pop()
        if isinstance(node, Literal):
            yield node.name
        elif isinstance(node, Not):
            stack.append(node.operand)
        elif isinstance(node, (And, Or)):
            stack.append(node.right)
            stack.append(node.left)
