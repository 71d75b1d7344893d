# expression/reader.py
# This file is part of PCEx - Presence Condition Extraction
#
# Forgiving condition reader with explicit drop policies

"""Reads condition strings into trees, dropping what cannot be used.

Real code bases guard blocks with conditions that are not purely Boolean
(``VERSION>=3``, ``IS_ENABLED(X)``) or that mention macros the feature model
does not know. The reader parses the whole condition, then folds over the tree
and removes such sub-expressions according to its policies. A removed operand
of a binary node leaves the other operand in its place; a negation of a
removed operand is removed too.
"""

from enum import Enum
from typing import Collection, Optional

from .ast_nodes import Expr, Literal, Constant, Opaque, Not, And, Or
from .exceptions import ParseError
from .grammar import _ConditionParser
from .lexer import CConditionLexer, ShortConditionLexer
from utils.logger import get_logger


class ErrorHandling(Enum):
    """What the reader does with an unusable sub-expression."""

    REMOVE = "remove"
    THROW = "throw"


class Symbols(Enum):
    """Operator symbol sets understood by the reader."""

    C = "c"
    SHORT = "short"

    @property
    def lexer(self):
        return CConditionLexer if self is Symbols.C else ShortConditionLexer


class ExpressionReader:
    """Configurable reader turning condition text into an optional tree.

    Attributes:
        symbols: Operator symbol set of the input text
        variable_names: Known variable names, or None to accept every name
        ignore_missing_features: Policy for names outside variable_names
        ignore_unparsable_sub_expressions: Policy for Opaque fragments
    """

    def __init__(
        self,
        symbols: Symbols = Symbols.C,
        variable_names: Optional[Collection[str]] = None,
        ignore_missing_features: ErrorHandling = ErrorHandling.REMOVE,
        ignore_unparsable_sub_expressions: ErrorHandling = ErrorHandling.REMOVE,
    ):
        self.symbols = symbols
        self.ignore_missing_features = ignore_missing_features
        self.ignore_unparsable_sub_expressions = ignore_unparsable_sub_expressions
        self.set_variable_names(variable_names)

    def set_variable_names(self, variable_names: Optional[Collection[str]]) -> None:
        """Restrict accepted names to a feature model's variables (None lifts it)."""
        self.variable_names = (
            frozenset(variable_names) if variable_names is not None else None
        )

    def read(self, text: str) -> Optional[Expr]:
        """Read a condition, returning None when nothing usable is left.

        Raises:
            ParseError: Only when a policy is set to THROW
        """
        logger = get_logger()
        try:
            tree = _ConditionParser().parse(text, self.symbols.lexer)
        except ParseError as exc:
            if self.ignore_unparsable_sub_expressions is ErrorHandling.THROW:
                raise
            logger.debug(f"Dropping unparsable condition '{text}': {exc}")
            return None

        result = self._prune(tree)
        if result is None:
            logger.debug(f"Nothing left of condition '{text}' after pruning")
        return result

    def _prune(self, node: Expr) -> Optional[Expr]:
        if isinstance(node, Literal):
            if self.variable_names is None or node.name in self.variable_names:
                return node
            if self.ignore_missing_features is ErrorHandling.THROW:
                raise ParseError(f"Unknown variable '{node.name}'")
            return None

        if isinstance(node, Constant):
            return node

        if isinstance(node, Opaque):
            if self.ignore_unparsable_sub_expressions is ErrorHandling.THROW:
                raise ParseError(f"Unparsable sub-expression '{node.text}'")
            return None

        if isinstance(node, Not):
            operand = self._prune(node.operand)
            return Not(operand) if operand is not None else None

        if isinstance(node, (And, Or)):
            left = self._prune(node.left)
            right = self._prune(node.right)
            if left is None:
                return right
            if right is None:
                return left
            return type(node)(left, right)

        raise TypeError(f"Unexpected node type {type(node).__name__}")
