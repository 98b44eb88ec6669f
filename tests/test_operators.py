"""
Tests for the operator table.
"""

import math

import pytest

from fraccalc.operators import OPERATORS, OperatorKind, divide, get_operator, is_operator, percent_of


class TestOperatorTable:
    """Test operator precedence and associativity."""
    
    def test_table_has_five_operators(self):
        assert set(OPERATORS) == {"+", "-", "*", "/", "%"}
    
    def test_additive_precedence(self):
        assert OPERATORS["+"].precedence == 1
        assert OPERATORS["-"].precedence == 1
    
    def test_multiplicative_precedence(self):
        for symbol in "*/%":
            assert OPERATORS[symbol].precedence == 2
    
    def test_all_left_associative(self):
        assert all(op.left_associative for op in OPERATORS.values())
    
    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            OPERATORS["^"] = OPERATORS["*"]
    
    def test_descriptor_symbol_matches_kind(self):
        assert get_operator("%").kind is OperatorKind.PERCENT_OF
        assert get_operator("%").symbol == "%"
    
    def test_is_operator(self):
        assert is_operator("+")
        assert not is_operator("(")
        assert not is_operator("^")


class TestOperatorFunctions:
    """Test the numeric implementations."""
    
    def test_subtract_keeps_operand_order(self):
        assert OPERATORS["-"].apply(10, 4) == 6
    
    def test_divide(self):
        assert divide(7, 2) == 3.5
    
    def test_divide_by_zero_is_infinite(self):
        assert divide(5, 0) == math.inf
        assert divide(-5, 0) == -math.inf
    
    def test_divide_by_negative_zero(self):
        assert divide(5, -0.0) == -math.inf
    
    def test_zero_over_zero_is_nan(self):
        assert math.isnan(divide(0, 0))
    
    def test_percent_of_is_not_modulo(self):
        assert percent_of(5, 25) == 20
        assert OPERATORS["%"].apply(50, 200) == 25
    
    def test_percent_of_zero_is_infinite(self):
        assert percent_of(1, 0) == math.inf
