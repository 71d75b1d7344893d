# tests/expression_tests/test_condition_lexer.py
# This file is part of PCEx - Presence Condition Extraction
#
# Test suite for condition lexer tokenization and error handling

"""Test suite for the condition lexers.

This module tests the lexical analysis of preprocessor conditions in both
symbol sets, verifying that Boolean connectives are told apart from the other
C operators and that illegal characters are rejected.
"""

import pytest
from expression.lexer import CConditionLexer, ShortConditionLexer
from utils.logger import get_logger


class TestCConditionLexer:
    """Test cases for tokenization of conditions written with C operators."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = CConditionLexer()
        self.logger = get_logger()

    def _tokenize_to_types(self, text: str) -> list[str]:
        """Extract token types from input text.

        Args:
            text: Input string to tokenize

        Returns:
            List of token type strings
        """
        self.logger.debug(f"Tokenizing: '{text}'")
        return [token.type for token in self.lexer.tokenize(text)]

    VALID_TOKENIZATION_CASES = [
        # Boolean connectives
        ("A&&B", ["ID", "AND", "ID"]),
        ("A||B", ["ID", "OR", "ID"]),
        ("!A", ["NOT", "ID"]),
        ("(A)&&!(B)", ["LPAREN", "ID", "RPAREN", "AND", "NOT", "LPAREN", "ID", "RPAREN"]),
        # '!=' and '&' are not Boolean connectives
        ("A!=B", ["ID", "OPERATOR", "ID"]),
        ("A&B", ["ID", "OPERATOR", "ID"]),
        ("A|B", ["ID", "OPERATOR", "ID"]),
        ("VERSION>=3", ["ID", "OPERATOR", "NUMBER"]),
        ("A<<2", ["ID", "OPERATOR", "NUMBER"]),
        ("A?B:C", ["ID", "OPERATOR", "ID", "OPERATOR", "ID"]),
        ("-1", ["OPERATOR", "NUMBER"]),
        # Integer literals
        ("0", ["NUMBER"]),
        ("0x1F", ["NUMBER"]),
        ("10UL", ["NUMBER"]),
        # Macro calls
        ("IS_ENABLED(CONFIG_A)", ["ID", "LPAREN", "ID", "RPAREN"]),
        ("MAX(A,B)", ["ID", "LPAREN", "ID", "COMMA", "ID", "RPAREN"]),
        # Keywords are case sensitive
        ("true", ["TRUE"]),
        ("false", ["FALSE"]),
        ("True", ["ID"]),
        ("true_ish", ["ID"]),
        # Whitespace and line continuations
        (" A \t&& \n B ", ["ID", "AND", "ID"]),
        ("A &&\\\n B", ["ID", "AND", "ID"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", VALID_TOKENIZATION_CASES)
    def test_valid_tokenization(self, input_text, expected_types):
        """Test lexer correctly tokenizes C conditions.

        Args:
            input_text: Condition string
            expected_types: Expected sequence of token types
        """
        actual_types = self._tokenize_to_types(input_text)

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    def test_token_values_preserved(self):
        """Test that identifier and number spellings are kept verbatim."""
        tokens = list(self.lexer.tokenize("CONFIG_X>=0x10"))
        values = [token.value for token in tokens]

        assert values == ["CONFIG_X", ">=", "0x10"], f"Unexpected values: {values}"

    @pytest.mark.parametrize("input_text", ["A # B", "A @ B", "'A'", "A $"])
    def test_illegal_characters(self, input_text):
        """Test that characters outside the condition alphabet are rejected."""
        with pytest.raises(ValueError, match="Illegal character"):
            self._tokenize_to_types(input_text)

    def test_empty_input(self):
        """Test that empty and blank input produce no tokens."""
        assert self._tokenize_to_types("") == []
        assert self._tokenize_to_types("  \t\n") == []


class TestShortConditionLexer:
    """Test cases for tokenization of the short notation."""

    def setup_method(self):
        """Initialize lexer for each test method."""
        self.lexer = ShortConditionLexer()

    SHORT_CASES = [
        ("-A", ["NOT", "ID"]),
        ("(A & B)", ["LPAREN", "ID", "AND", "ID", "RPAREN"]),
        ("(A | -B)", ["LPAREN", "ID", "OR", "NOT", "ID", "RPAREN"]),
        ("true | false", ["TRUE", "OR", "FALSE"]),
    ]

    @pytest.mark.parametrize("input_text, expected_types", SHORT_CASES)
    def test_short_tokenization(self, input_text, expected_types):
        """Test tokenization of short operator symbols."""
        actual_types = [token.type for token in self.lexer.tokenize(input_text)]

        assert actual_types == expected_types, (
            f"Tokenization mismatch for '{input_text}':\n"
            f"Expected: {expected_types}\n"
            f"Actual: {actual_types}"
        )

    @pytest.mark.parametrize("input_text", ["!A", "A > B", "1"])
    def test_c_only_symbols_rejected(self, input_text):
        """Test that C operators and numbers are illegal in short notation."""
        with pytest.raises(ValueError):
            list(self.lexer.tokenize(input_text))
