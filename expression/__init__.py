# expression/__init__.py
# This file is part of PCEx - Presence Condition Extraction
#
# Condition parsing and normal form components for preprocessor expressions

"""Preprocessor condition parsing and normalization.

This module turns the textual conditions of ``#if``-style directives into
abstract syntax trees and converts those trees into disjunctive and
conjunctive normal form, the shape needed to build clause sets over a
variable numbering.

Core Functions:
    parse: Converts condition strings into Abstract Syntax Trees
    read_condition: Forgiving parse that drops unusable sub-expressions
    to_dnf / to_cnf: Normal form conversion of a tree

Supported Logic:
    - Boolean connectives (!, &&, ||) and the constants true/false
    - Integer literals as constants (``#if 0``)
    - Non-Boolean fragments recognized and dropped by the reader

Example:
    >>> from expression import read_condition, to_dnf
    >>> tree = read_condition("(A)&&!(B)||VERSION>2")
    >>> to_dnf(tree)
    ((('A', True), ('B', False)),)
"""

from typing import Collection, Optional

from .ast_nodes import Expr, format_c, format_short, iter_variables
from .exceptions import ParseError, UnknownVariableError
from .grammar import _ConditionParser
from .normal_forms import NormalFormTransformer, to_cnf, to_dnf
from .reader import ErrorHandling, ExpressionReader, Symbols
from utils.logger import get_logger


def parse(source: str, symbols: Symbols = Symbols.C) -> Expr:
    """Parse condition string into Abstract Syntax Tree representation.

    Uses a fresh parser instance for each invocation. Non-Boolean fragments are
    kept as Opaque nodes; nothing is dropped.

    Args:
        source: Condition string to parse
        symbols: Operator symbol set of the string

    Returns:
        Root AST node representing the parsed condition

    Raises:
        ParseError: Condition syntax is malformed
    """
    logger = get_logger()

    try:
        return _ConditionParser().parse(source, symbols.lexer)

    except ParseError:
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def read_condition(
    source: str, variable_names: Optional[Collection[str]] = None
) -> Optional[Expr]:
    """Parse a C condition and drop everything that is not usable.

    Args:
        source: Condition string with C operators
        variable_names: Known variable names, or None to accept all

    Returns:
        Pruned tree, or None if nothing usable is left
    """
    return ExpressionReader(variable_names=variable_names).read(source)


__all__ = [
    "parse",
    "read_condition",
    "to_dnf",
    "to_cnf",
    "format_c",
    "format_short",
    "iter_variables",
    "Expr",
    "ExpressionReader",
    "ErrorHandling",
    "Symbols",
    "NormalFormTransformer",
    "ParseError",
    "UnknownVariableError",
]
