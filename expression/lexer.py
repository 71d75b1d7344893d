# expression/lexer.py
# This file is part of PCEx - Presence Condition Extraction
#
# Lexical analyzers for condition expression tokenization using SLY

"""Lexical analyzers for preprocessor condition strings.

This module implements tokenization of the condition expressions found after
``#if``/``#elif`` once the ``defined`` markers are stripped. Two symbol sets
are supported: the C operators that appear in source code, and the short
notation used by the audit listing.

Supported Tokens (C symbols):
- Boolean operators: !, &&, ||
- Other operators: comparisons, arithmetic, bitwise, ternary (kept opaque)
- Punctuation: (, ), ,
- Keywords: true, false
- Identifiers and integer literals
- Whitespace and line continuations: ignored during tokenization

Supported Tokens (short symbols):
- Operators: -, &, |, (, )
- Keywords: true, false
- Identifiers
"""

from sly import Lexer
from utils.logger import get_logger


def _illegal_character(lexer: Lexer, t):
    logger = get_logger()

    illegal_char = t.value[0]
    error_pos = lexer.index

    logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

    # Skip the illegal character
    lexer.index += 1

    raise ValueError(
        f"Illegal character '{illegal_char}' encountered at position {error_pos}"
    )


class CConditionLexer(Lexer):
    """SLY-based lexer for conditions written with C operators.

    Boolean connectives get their own token types. Every other C operator is
    folded into a single OPERATOR token, since the grammar only needs to know
    that such a fragment is not Boolean.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
        ID: Identifier pattern with keyword mapping
    """

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NUMBER",
        "NOT",
        "AND",
        "OR",
        "OPERATOR",
        "LPAREN",
        "RPAREN",
        "COMMA",
    }

    ignore = " \t\r\n"
    ignore_continuation = r"\\\r?\n"

    # Longer operators first: '&&' before '&', '!=' before '!'
    AND = r"&&"
    OR = r"\|\|"
    OPERATOR = r"==|!=|<=|>=|<<|>>|[<>+\-*/%&|^~?:]"
    NOT = r"!"
    LPAREN = r"\("
    RPAREN = r"\)"
    COMMA = r","

    NUMBER = r"0[xX][0-9a-fA-F]+[uUlL]*|\d+[uUlL]*"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    def error(self, t):
        """Handle illegal characters during tokenization.

        Raises:
            ValueError: Always raised with character and position information
        """
        _illegal_character(self, t)


class ShortConditionLexer(Lexer):
    """SLY-based lexer for the short notation (``-``, ``&``, ``|``)."""

    tokens = {
        "TRUE",
        "FALSE",
        "ID",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"-"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    ID = r"[a-zA-Z_][a-zA-Z0-9_]*"
    ID["true"] = "TRUE"
    ID["false"] = "FALSE"

    def error(self, t):
        _illegal_character(self, t)
