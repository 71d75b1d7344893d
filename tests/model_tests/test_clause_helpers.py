# tests/model_tests/test_clause_helpers.py
# This file is part of PCEx - Presence Condition Extraction
#
# Test suite for integer literal clause helpers

"""Tests for canonicalization, cleanup, negation and ordering of clause lists."""

import itertools
import pytest
from model.clauses import (
    canonical_clause_list,
    clause_list_metric,
    clean_clause,
    is_trivial,
    negate_clause_list,
    sort_clause,
)


class TestClauseHelpers:
    """Test cases for single clauses."""

    def test_sort_clause_natural_order(self):
        """Test that literals are ordered by their integer value."""
        assert sort_clause([3, -1, 2, -10]) == (-10, -1, 2, 3)

    CLEAN_CASES = [
        ([3, -1, 3], (-1, 3)),
        ([2, 2, 2], (2,)),
        ([], ()),
        ([1, -1], None),
        ([4, 2, -4], None),
    ]

    @pytest.mark.parametrize("literals, expected", CLEAN_CASES)
    def test_clean_clause(self, literals, expected):
        """Test duplicate removal and detection of complementary literals."""
        assert clean_clause(literals) == expected


class TestClauseLists:
    """Test cases for whole clause lists."""

    def test_canonical_form_independent_of_order(self):
        """Test that every permutation of clauses and literals canonicalizes equally."""
        clauses = [(3, 1), (-2,), (2, -1)]
        expected = ((-2,), (-1, 2), (1, 3))

        for permutation in itertools.permutations(clauses):
            shuffled = [tuple(reversed(clause)) for clause in permutation]
            assert canonical_clause_list(shuffled) == expected, (
                f"Canonical form differs for {shuffled}"
            )

    def test_negate_clause_list(self):
        """Test that negation flips every literal and keeps the structure."""
        assert negate_clause_list(((1, 2), (-3,))) == ((-2, -1), (3,))

    def test_negate_twice_is_identity(self):
        """Test that double negation restores canonical clauses."""
        clauses = ((-1, 2), (3,))

        assert negate_clause_list(negate_clause_list(clauses)) == clauses

    TRIVIAL_CASES = [
        (None, True),
        ((), True),
        (((),), True),
        (((1,), ()), True),
        (((1,),), False),
        (((1, 2), (-3,)), False),
    ]

    @pytest.mark.parametrize("clauses, expected", TRIVIAL_CASES)
    def test_is_trivial(self, clauses, expected):
        """Test detection of missing, empty and vacuous clause lists."""
        assert is_trivial(clauses) is expected

    def test_metric_orders_by_count_then_length(self):
        """Test the scheduling key: fewer clauses first, then fewer literals."""
        lists = [((1, 2), (3,)), ((1,),), ((1, 2, 3),), ((1,), (2,))]
        ordered = sorted(lists, key=clause_list_metric)

        assert ordered == [((1,),), ((1, 2, 3),), ((1,), (2,)), ((1, 2), (3,))]
        assert clause_list_metric(((1, 2), (3,))) == (2, 3)
