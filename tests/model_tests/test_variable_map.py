# tests/model_tests/test_variable_map.py
# This file is part of PCEx - Presence Condition Extraction
#
# Test suite for variable numberings and feature-model formulas

"""Tests for VariableMap and CNF."""

import pytest
from expression import UnknownVariableError
from model import CNF, VariableMap


class TestVariableMap:
    """Test cases for the name <-> index mapping."""

    def setup_method(self):
        self.variables = VariableMap(["A", "B", "C"])

    def test_indices_follow_declaration_order(self):
        """Test that indices are 1-based and assigned in order."""
        assert [self.variables.get_index(n) for n in "ABC"] == [1, 2, 3]
        assert self.variables.names == ["A", "B", "C"]
        assert len(self.variables) == 3

    def test_add_keeps_existing_index(self):
        """Test that registering a known name is a no-op."""
        assert self.variables.add("B") == 2
        assert self.variables.add("D") == 4
        assert len(self.variables) == 4

    def test_literals(self):
        """Test signed literal lookup and name recovery."""
        assert self.variables.literal("B") == 2
        assert self.variables.literal("B", positive=False) == -2
        assert self.variables.get_name(-3) == "C"

    def test_unknown_name(self):
        """Test that a missing name raises UnknownVariableError."""
        assert self.variables.get_index("Z") is None
        with pytest.raises(UnknownVariableError) as exc_info:
            self.variables.index_of("Z")
        assert exc_info.value.name == "Z"

    def test_literal_pairs(self):
        """Test positive/negative literal pairs in index order."""
        assert self.variables.literals() == [(1, -1), (2, -2), (3, -3)]
        assert self.variables.literals(["C", "A", "Z"]) == [(1, -1), (3, -3)]
        assert self.variables.literals([]) == []

    def test_equality_and_containment(self):
        """Test value semantics of numberings."""
        assert VariableMap.from_names(["A", "B", "C"]) == self.variables
        assert VariableMap(["B", "A", "C"]) != self.variables
        assert "A" in self.variables
        assert "Z" not in self.variables
        assert list(self.variables) == ["A", "B", "C"]


class TestCNF:
    """Test cases for the feature-model formula."""

    def test_from_names(self):
        """Test that a synthesized formula has a numbering and no clauses."""
        formula = CNF.from_names(["X", "Y"])

        assert formula.variables.names == ["X", "Y"]
        assert formula.clauses == ()
        assert str(formula) == "CNF(2 variables, 0 clauses)"
