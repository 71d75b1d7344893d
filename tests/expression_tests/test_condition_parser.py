# tests/expression_tests/test_condition_parser.py
# This file is part of PCEx - Presence Condition Extraction
#
# Test suite for condition parsing, precedence and syntax errors

"""Test suite for the condition parser.

This module checks that C precedence rules are honored, that non-Boolean
fragments become Opaque nodes carrying their source text, and that malformed
conditions raise ParseError.
"""

import pytest
from expression import ParseError, Symbols, format_c, format_short, iter_variables, parse
from expression.ast_nodes import And, Constant, Literal, Not, Opaque, Or
from utils.logger import get_logger

A, B, C = Literal("A"), Literal("B"), Literal("C")


class TestConditionPrecedence:
    """Test cases for operator precedence and associativity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PRECEDENCE_CASES = [
        ("A||B&&C", Or(A, And(B, C))),
        ("A&&B||C", Or(And(A, B), C)),
        ("!A&&B", And(Not(A), B)),
        ("!(A||B)", Not(Or(A, B))),
        ("A&&B&&C", And(And(A, B), C)),
        ("A||B||C", Or(Or(A, B), C)),
        ("(A||B)&&C", And(Or(A, B), C)),
        ("!!A", Not(Not(A))),
        ("((A))", A),
    ]

    @pytest.mark.parametrize("source, expected", PRECEDENCE_CASES)
    def test_precedence(self, source, expected):
        """Test that the tree shape follows C precedence."""
        result = parse(source)

        assert result == expected, (
            f"Precedence mismatch for '{source}':\n"
            f"Expected: {expected}\n"
            f"Actual: {result}"
        )

    def test_short_symbols(self):
        """Test that the short notation builds the same trees."""
        assert parse("-A & (B | C)", Symbols.SHORT) == And(Not(A), Or(B, C))
        assert parse("A | B & C", Symbols.SHORT) == Or(A, And(B, C))


class TestConditionFragments:
    """Test cases for constants and non-Boolean fragments."""

    CONSTANT_CASES = [
        ("true", True),
        ("false", False),
        ("0", False),
        ("1", True),
        ("0x10", True),
        ("0UL", False),
    ]

    @pytest.mark.parametrize("source, value", CONSTANT_CASES)
    def test_constants(self, source, value):
        """Test that keywords and integer literals are Boolean constants."""
        assert parse(source) == Constant(value)

    OPAQUE_CASES = [
        ("VERSION>2", "VERSION>2"),
        ("X != 0x1F", "X!=0x1F"),
        ("IS_ENABLED(CONFIG_A)", "IS_ENABLED(CONFIG_A)"),
        ("MAX(A, B)", "MAX(A,B)"),
        ("FOO()", "FOO()"),
        ("-1", "-1"),
        ("~A", "~A"),
    ]

    @pytest.mark.parametrize("source, text", OPAQUE_CASES)
    def test_opaque_fragments(self, source, text):
        """Test that non-Boolean fragments keep their source text."""
        result = parse(source)

        assert isinstance(result, Opaque), f"'{source}' should be opaque, got {result!r}"
        assert result.text == text

    def test_comparison_binds_tighter_than_and(self):
        """Test that comparisons are operands of the Boolean connectives."""
        result = parse("A&&VERSION>=3||B")

        assert result == Or(And(A, Opaque("VERSION>=3")), B)


class TestConditionFormatting:
    """Test cases for rendering trees back into text."""

    def test_format_c_round_trip(self):
        """Test that the C rendering parses back into the same tree."""
        for source in ["A||B&&!C", "!(A&&B)||C", "(A||B)&&(B||C)"]:
            tree = parse(source)
            assert parse(format_c(tree)) == tree, f"Round trip failed for '{source}'"

    def test_format_short(self):
        """Test rendering in the short notation."""
        tree = parse("!A&&(B||C)")

        assert format_short(tree) == "(-A & (B | C))"
        assert parse(format_short(tree), Symbols.SHORT) == tree

    def test_iter_variables_order(self):
        """Test that variable names are reported left to right with repeats."""
        tree = parse("B&&(A||!B)&&C")

        assert list(iter_variables(tree)) == ["B", "A", "B", "C"]


class TestConditionParseErrors:
    """Test cases for malformed conditions."""

    INVALID_CASES = [
        "",
        "   ",
        "A&&",
        "&&A",
        "(A",
        "A)",
        "A B",
        "A(",
        "!",
        "A # B",
    ]

    @pytest.mark.parametrize("source", INVALID_CASES)
    def test_parse_errors(self, source):
        """Test that malformed conditions raise ParseError."""
        with pytest.raises(ParseError):
            parse(source)
