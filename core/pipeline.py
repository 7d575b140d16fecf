# core/pipeline.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# End-to-end entry points from expression text to DIMACS text or a verdict

"""Composite operations over the parse -> CNF -> encode -> solve pipeline.

Each entry point returns None when the text yields no formula (empty input or
malformed syntax); this is distinct from an unsatisfiable result. Internal
invariant violations are raised, never reported as None.
"""

from typing import Iterable, Optional

from cnf.converter import to_cnf
from cnf.dimacs import EncodedFormula, encode
from cnf.evaluator import evaluate
from cnf.exceptions import CNFInvariantError
from cnf.indexer import collect_variables
from parser import parse_formula
from parser.ast_nodes import Expr
from utils.logger import get_logger
from .solution import Solution
from .solver import DEFAULT_SOLVER, SatEngine


def encode_expression(text: str) -> Optional[EncodedFormula]:
    """Parse, convert and encode ``text``; None if it does not parse."""
    formula = parse_formula(text)
    if formula is None:
        return None
    return _encode_formula(formula)


def _encode_formula(formula: Expr) -> EncodedFormula:
    logger = get_logger()
    cnf_formula = to_cnf(formula)
    encoded = encode(cnf_formula)
    logger.cnf_converted(cnf_formula, encoded.clause_count)
    return encoded


def parse_dimacs(text: str) -> Optional[str]:
    """Translate an expression into DIMACS CNF text.

    Args:
        text: Raw expression such as ``"A&&(B||!C)"``

    Returns:
        DIMACS text with variable name comments, or None
    """
    encoded = encode_expression(text)
    if encoded is None:
        return None
    return encoded.to_text()


def satisfiable(text: str, solver_name: str = DEFAULT_SOLVER) -> Optional[bool]:
    """Decide whether an expression can be satisfied.

    Returns:
        True or False, or None if the expression does not parse
    """
    encoded = encode_expression(text)
    if encoded is None:
        return None

    with SatEngine(solver_name) as engine:
        return engine.solve(encoded)


def solve(text: str, solver_name: str = DEFAULT_SOLVER) -> Optional[Solution]:
    """Find a satisfying assignment for an expression.

    The model is checked against the parsed expression before it is returned.

    Returns:
        Solution whose model is None when unsatisfiable, or None if the
        expression does not parse

    Raises:
        CNFInvariantError: If the model does not satisfy the expression
    """
    logger = get_logger()

    formula = parse_formula(text)
    if formula is None:
        return None
    encoded = _encode_formula(formula)

    with SatEngine(solver_name) as engine:
        is_sat = engine.solve(encoded)
        model = engine.model()

    solution = Solution(is_sat, model, encoded.index)

    if solution.assignment is not None:
        # Variables eliminated by constant folding may take any value
        values = dict.fromkeys(collect_variables(formula), False)
        values.update(solution.assignment)
        if not evaluate(formula, values):
            raise CNFInvariantError(f"Model {model} does not satisfy '{text}'")

    logger.debug(f"Solution for '{text}': {solution}")
    return solution


def conjoin(expressions: Iterable[str]) -> str:
    """Join several expressions into one conjunction.

    Each non-blank expression is parenthesized so its own operators keep
    their grouping; blank entries are skipped.

    Example:
        >>> conjoin(["A", "B||C", "  "])
        '(A)&&(B||C)'
    """
    parts = [expression.strip() for expression in expressions]
    return "&&".join(f"({part})" for part in parts if part)
