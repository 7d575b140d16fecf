# core/__init__.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Core module public API for expression solving

"""End-to-end pipeline from dependency expressions to SAT verdicts.

Primary Components:
    parse_dimacs: Expression text to DIMACS CNF text
    satisfiable: Expression text to a satisfiability verdict
    solve: Expression text to a Solution with a model
    SatEngine: PySAT adapter used by the entry points
    Solution: Verdict, model and variable numbering

Example:
    >>> from core import satisfiable, solve
    >>> satisfiable("A&&!A")
    False
    >>> solve("!A||(B&&C)").satisfiable
    True
"""

from .pipeline import conjoin, encode_expression, parse_dimacs, satisfiable, solve
from .solution import Solution
from .solver import DEFAULT_SOLVER, SatEngine

__all__ = [
    "conjoin",
    "encode_expression",
    "parse_dimacs",
    "satisfiable",
    "solve",
    "Solution",
    "DEFAULT_SOLVER",
    "SatEngine",
]

__version__ = "0.1.0"
__description__ = "Expression to DIMACS pipeline and SAT solving"
