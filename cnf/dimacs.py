# cnf/dimacs.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# DIMACS encoding of CNF-shaped expression trees

"""Encodes CNF-shaped trees as integer clause sets and DIMACS text.

Every literal becomes a signed integer: the magnitude is the variable's
1-based identifier from the VariableIndex, the sign is its polarity. The
clause set is held in a ``pysat.formula.CNF`` so it can be handed to any
PySAT solver unchanged.

The text rendering starts with one ``c <name> <id>`` comment per variable in
sorted name order, followed by the ``p cnf`` problem line and one
zero-terminated line per clause::

    c A 1
    c B 2
    c C 3
    p cnf 3 2
    2 -1 0
    3 -1 0

Encoding the same tree twice produces byte-identical text.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from pysat.formula import CNF

from parser import ast_nodes as ast
from utils.logger import get_logger
from .flatten import flatten_conjuncts, flatten_disjuncts
from .indexer import VariableIndex, index_variables


@dataclass(frozen=True)
class EncodedFormula:
    """An indexed clause set together with its variable numbering.

    Attributes:
        index: Variable numbering used for the literals
        clauses: The clause set, ``nv`` equal to the number of indexed variables
    """

    index: VariableIndex
    clauses: CNF

    @property
    def variable_count(self) -> int:
        return len(self.index)

    @property
    def clause_count(self) -> int:
        return len(self.clauses.clauses)

    def comment_lines(self) -> List[str]:
        return [f"c {name} {self.index.dimacs_id(name)}" for name in self.index.names]

    def to_text(self) -> str:
        """Render the clause set in DIMACS CNF format with name comments."""
        lines = self.comment_lines()
        lines.append(f"p cnf {self.variable_count} {self.clause_count}")
        for clause in self.clauses.clauses:
            lines.append(" ".join([str(lit) for lit in clause] + ["0"]))
        return "\n".join(lines) + "\n"

    @property
    def text(self) -> str:
        return self.to_text()


def encode_clause(clause: ast.Expr, index: VariableIndex) -> List[int]:
    """Encode one disjunction as a list of signed DIMACS literals.

    Raises:
        UnknownVariableError: If a variable is missing from ``index``
        CNFInvariantError: If ``clause`` is not a disjunction of literals
    """
    literals: List[int] = []
    for node in flatten_disjuncts(clause):
        if isinstance(node, ast.Not):
            literals.append(-index.dimacs_id(node.operand.name))
        else:
            literals.append(index.dimacs_id(node.name))
    return literals


def encode(cnf_expr: ast.Expr, index: Optional[VariableIndex] = None) -> EncodedFormula:
    """Encode a CNF-shaped tree.

    Args:
        cnf_expr: Output of the CNF converter
        index: Numbering to use; built from ``cnf_expr`` when omitted. A
            supplied index may cover more variables than ``cnf_expr`` uses.

    Returns:
        EncodedFormula holding the clause set and numbering

    Raises:
        UnknownVariableError: If ``index`` misses a variable of ``cnf_expr``
        CNFInvariantError: If ``cnf_expr`` is not CNF-shaped
    """
    logger = get_logger()

    if index is None:
        index = index_variables(cnf_expr)

    if isinstance(cnf_expr, ast.Constant):
        # true is the empty conjunction, false a single empty clause
        clauses = [] if cnf_expr.value else [[]]
    else:
        clauses = [encode_clause(conjunct, index) for conjunct in flatten_conjuncts(cnf_expr)]

    formula = CNF()
    for clause in clauses:
        formula.append(clause)
    formula.nv = len(index)

    encoded = EncodedFormula(index, formula)
    logger.formula_encoded(encoded.variable_count, encoded.clause_count)
    return encoded
