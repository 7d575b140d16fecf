# tests/parser_tests/test_precedence.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Test suite for parser operator precedence and associativity

"""Test suite for parser operator precedence and associativity.

Operator precedence (highest to lowest):
1. () - parentheses for grouping
2. ! - negation (right-associative)
3. && - conjunction (left-associative)
4. || - disjunction (left-associative)
"""

import pytest
from parser import parse_formula
from parser.ast_nodes import And, Or, Not, Variable
from utils.logger import get_logger

A, B, C, D = (Variable(name) for name in "ABCD")


class TestPrecedence:
    """Test cases for operator precedence and associativity."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    PRECEDENCE_TEST_CASES = [
        # AND binds tighter than OR
        ("A||B&&C", Or(A, And(B, C))),
        ("A&&B||C", Or(And(A, B), C)),
        ("A||B&&C||D", Or(Or(A, And(B, C)), D)),
        # Grouping of a single operand does not change precedence
        ("A&&(B)||C", Or(And(A, B), C)),
        # NOT binds tightest
        ("!A&&B", And(Not(A), B)),
        ("!A&&B||C", Or(And(Not(A), B), C)),
        ("A||!B&&C", Or(A, And(Not(B), C))),
        ("!A||(B&&C)", Or(Not(A), And(B, C))),
        # Parentheses override precedence
        ("A&&(B||C)", And(A, Or(B, C))),
        ("(A||B)&&C", And(Or(A, B), C)),
        ("!(A||B)&&C", And(Not(Or(A, B)), C)),
        # Left associativity
        ("A&&B&&C", And(And(A, B), C)),
        ("A||B||C", Or(Or(A, B), C)),
        ("A&&(B&&C)", And(A, And(B, C))),
        # Right associativity of negation
        ("!!A", Not(Not(A))),
        ("!!!A&&B", And(Not(Not(Not(A))), B)),
    ]

    @pytest.mark.parametrize("formula, expected", PRECEDENCE_TEST_CASES)
    def test_precedence(self, formula, expected):
        result = parse_formula(formula)
        self.logger.debug(f"{formula} -> {result}")

        assert result == expected, (
            f"Precedence mismatch for '{formula}':\n"
            f"Got: {result}\n"
            f"Expected: {expected}"
        )
