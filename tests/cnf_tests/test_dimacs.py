# tests/cnf_tests/test_dimacs.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Test suite for DIMACS encoding

"""Test suite for the DIMACS encoder.

Pins the exact text for known inputs and checks the structural guarantees:
byte-stable output, one comment per variable, one line per clause.
"""

import pytest
from pysat.formula import CNF

from cnf.converter import to_cnf
from cnf.dimacs import encode, encode_clause
from cnf.exceptions import CNFInvariantError, UnknownVariableError
from cnf.flatten import flatten_conjuncts
from cnf.indexer import VariableIndex
from parser import parse_formula
from parser.ast_nodes import FALSE, Not, Or, TRUE, Variable
from utils.logger import get_logger


def encode_text(text):
    return encode(to_cnf(parse_formula(text))).to_text()


class TestDimacsText:
    """Test cases for the rendered DIMACS text."""

    def setup_method(self):
        """Initialize logger for each test method."""
        self.logger = get_logger()

    TEXT_CASES = [
        ("A", "c A 1\np cnf 1 1\n1 0\n"),
        ("!A", "c A 1\np cnf 1 1\n-1 0\n"),
        ("A&&!A", "c A 1\np cnf 1 2\n-1 0\n1 0\n"),
        ("!A||(B&&C)", "c A 1\nc B 2\nc C 3\np cnf 3 2\n2 -1 0\n3 -1 0\n"),
        ("A||B||C", "c A 1\nc B 2\nc C 3\np cnf 3 1\n3 2 1 0\n"),
        ("!(A||B)", "c A 1\nc B 2\np cnf 2 2\n-2 0\n-1 0\n"),
        ("ZETA&&ALPHA", "c ALPHA 1\nc ZETA 2\np cnf 2 2\n1 0\n2 0\n"),
    ]

    @pytest.mark.parametrize("formula, expected", TEXT_CASES)
    def test_text(self, formula, expected):
        text = encode_text(formula)
        self.logger.debug(f"{formula} ->\n{text}")
        assert text == expected

    def test_encoding_is_byte_identical(self):
        cnf_formula = to_cnf(parse_formula("(A&&B)||!(C&&!D)||E"))
        assert encode(cnf_formula).to_text() == encode(cnf_formula).to_text()

    def test_line_counts(self, kconfig_expressions):
        for text in kconfig_expressions:
            cnf_formula = to_cnf(parse_formula(text))
            encoded = encode(cnf_formula)
            lines = encoded.to_text().splitlines()

            comments = [line for line in lines if line.startswith("c ")]
            problem = [line for line in lines if line.startswith("p cnf")]
            clauses = [line for line in lines if not line.startswith(("c ", "p "))]

            assert len(comments) == encoded.variable_count == len(encoded.index)
            assert problem == [f"p cnf {encoded.variable_count} {encoded.clause_count}"]
            assert len(clauses) == len(flatten_conjuncts(cnf_formula))

    def test_true_encodes_as_empty_clause_set(self):
        encoded = encode(TRUE)
        assert encoded.clause_count == 0
        assert encoded.to_text() == "p cnf 0 0\n"

    def test_false_encodes_as_empty_clause(self):
        encoded = encode(FALSE)
        assert encoded.clause_count == 1
        assert encoded.to_text() == "p cnf 0 1\n0\n"


class TestClauseSet:
    """Test cases for the PySAT clause set value."""

    def test_clause_set_is_pysat_cnf(self):
        encoded = encode(to_cnf(parse_formula("!A||(B&&C)")))
        assert isinstance(encoded.clauses, CNF)
        assert encoded.clauses.clauses == [[2, -1], [3, -1]]
        assert encoded.clauses.nv == 3

    def test_literals_never_use_zero(self):
        encoded = encode(to_cnf(parse_formula("(A||!B)&&(!A||C)&&(B||!C)")))
        for clause in encoded.clauses.clauses:
            assert 0 not in clause

    def test_superset_index(self):
        index = VariableIndex.from_names(["A", "B", "C"])
        encoded = encode(to_cnf(parse_formula("A||B")), index)
        assert encoded.to_text() == "c A 1\nc B 2\nc C 3\np cnf 3 1\n2 1 0\n"
        assert encoded.clauses.nv == 3

    def test_missing_variable_is_fatal(self):
        index = VariableIndex.from_names(["A"])
        with pytest.raises(UnknownVariableError):
            encode(to_cnf(parse_formula("A&&B")), index)

    def test_encode_clause(self):
        index = VariableIndex.from_names(["A", "B"])
        assert encode_clause(Or(Variable("A"), Not(Variable("B"))), index) == [-2, 1]

    @pytest.mark.parametrize(
        "tree",
        [
            Not(Or(Variable("A"), Variable("B"))),
            Or(Variable("A"), parse_formula("B&&C")),
            Or(Variable("A"), TRUE),
        ],
    )
    def test_non_cnf_input_is_fatal(self, tree):
        with pytest.raises(CNFInvariantError):
            encode(tree)
