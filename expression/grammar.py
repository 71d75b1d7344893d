# expression/grammar.py
# This file is part of PCEx - Presence Condition Extraction
#
# LALR(1) grammar and parser for preprocessor conditions using SLY

"""Condition grammar implementation using SLY parser generator.

This module defines the grammar rules for the Boolean conditions of
``#if``/``#elif`` directives. The parser constructs Abstract Syntax Trees from
token streams of either lexer, handling operator precedence and associativity
the way the C preprocessor does.

Grammar Features:
- Boolean operators (NOT, AND, OR) with C precedence
- Comparisons, arithmetic and macro calls parsed into Opaque nodes
- Integer literals read as Boolean constants (0 is false)
- Parenthetical grouping for precedence override

Operator Precedence (lowest to highest):
- OR: left-associative
- AND: left-associative
- OPERATOR (any non-Boolean binary operator): left-associative
- NOT and unary operators: right-associative
"""

from typing import Optional, Type

from sly import Lexer, Parser
from .lexer import CConditionLexer
from .ast_nodes import Expr, Literal, Constant, Opaque, Not, And, Or
from .exceptions import ParseError
from utils.logger import get_logger


def _number_value(text: str) -> int:
    digits = text.rstrip("uUlL")
    if digits[:2] in ("0x", "0X"):
        return int(digits, 16)
    return int(digits, 10)


class _ConditionParser(Parser):
    """SLY-based LALR(1) parser for preprocessor conditions.

    Attributes:
        tokens: Token types from CConditionLexer (superset of the short lexer)
        precedence: Operator precedence and associativity rules
    """

    tokens = CConditionLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("left", "OPERATOR"),
        ("right", "NOT", "UNARY"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete condition is a single expression."""
        return p.expr

    # Boolean connectives
    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    # Non-Boolean fragments
    @_("expr OPERATOR expr")
    def expr(self, p) -> Expr:
        """Comparison or arithmetic, e.g. ``VERSION>=3``."""
        return Opaque(f"{p.expr0}{p.OPERATOR}{p.expr1}")

    @_("OPERATOR expr %prec UNARY")
    def expr(self, p) -> Expr:
        """Unary minus, bitwise complement and friends."""
        return Opaque(f"{p.OPERATOR}{p.expr}")

    @_("ID LPAREN arguments RPAREN")
    def expr(self, p) -> Expr:
        """Function-like macro invocation, e.g. ``IS_ENABLED(CONFIG_X)``."""
        return Opaque(f"{p.ID}({p.arguments})")

    @_("ID LPAREN RPAREN")
    def expr(self, p) -> Expr:
        return Opaque(f"{p.ID}()")

    @_("expr")
    def arguments(self, p) -> str:
        return str(p.expr)

    @_("arguments COMMA expr")
    def arguments(self, p) -> str:
        return f"{p.arguments},{p.expr}"

    @_("literal")
    def expr(self, p) -> Expr:
        """Expression can be a single literal."""
        return p.literal

    # Literal grammar rules
    @_("ID")
    def literal(self, p) -> Expr:
        """Identifier as configuration variable."""
        return Literal(p.ID)

    @_("TRUE")
    def literal(self, p) -> Expr:
        """Boolean constant true."""
        return Constant(True)

    @_("FALSE")
    def literal(self, p) -> Expr:
        """Boolean constant false."""
        return Constant(False)

    @_("NUMBER")
    def literal(self, p) -> Expr:
        """Integer literal, as in ``#if 0``."""
        return Constant(_number_value(p.NUMBER) != 0, p.NUMBER)

    def parse(self, text: str, lexer: Optional[Type[Lexer]] = None) -> Expr:
        """Parse condition text into AST.

        Args:
            text: Condition string to parse
            lexer: Lexer class selecting the operator symbols (C by default)

        Returns:
            Root AST node representing the parsed condition

        Raises:
            ParseError: If the text is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing condition: {text}")

        lexer_class = lexer or CConditionLexer

        try:
            ast_result = super().parse(lexer_class().tokenize(text))

            if ast_result is None and text.strip() == "":
                raise ParseError("Input condition is empty.")

            if ast_result is None:
                raise ParseError("Failed to parse condition (syntax error).")

            return ast_result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end of input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of condition"

        raise ParseError(error_msg)
