# cnf/__init__.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# CNF conversion and DIMACS encoding public API

"""CNF conversion, clause flattening, variable indexing and DIMACS encoding.

Primary Components:
    to_cnf / CNFConverter: Equivalent CNF tree by De Morgan and distribution
    flatten_conjuncts / flatten_disjuncts: Ordered clause and literal lists
    index_variables / VariableIndex: Sorted, deterministic variable numbering
    encode / EncodedFormula: PySAT clause set and DIMACS text
    evaluate: Truth value of a tree under an assignment

Example:
    >>> from parser import parse_formula
    >>> from cnf import to_cnf, encode
    >>> print(encode(to_cnf(parse_formula("!A||(B&&C)"))).to_text(), end="")
    c A 1
    c B 2
    c C 3
    p cnf 3 2
    2 -1 0
    3 -1 0
"""

from .converter import CNFConverter, simplify, to_cnf
from .dimacs import EncodedFormula, encode, encode_clause
from .evaluator import evaluate
from .exceptions import CNFInvariantError, UnknownVariableError
from .flatten import flatten_conjuncts, flatten_disjuncts
from .indexer import VariableIndex, collect_variables, index_variables

__all__ = [
    "CNFConverter",
    "simplify",
    "to_cnf",
    "EncodedFormula",
    "encode",
    "encode_clause",
    "evaluate",
    "CNFInvariantError",
    "UnknownVariableError",
    "flatten_conjuncts",
    "flatten_disjuncts",
    "VariableIndex",
    "collect_variables",
    "index_variables",
]
