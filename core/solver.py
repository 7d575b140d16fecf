# core/solver.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# SAT engine adapter around PySAT

"""Hands encoded clause sets to a PySAT solver.

The call into the engine is synchronous and has no timeout; callers that need
bounded latency must wrap it themselves.
"""

from __future__ import annotations
from typing import List, Optional

from pysat.solvers import Solver

from cnf.dimacs import EncodedFormula
from utils.logger import get_logger

# Pinned for reproducible models
DEFAULT_SOLVER = "glucose4"


class SatEngine:
    """Solves one encoded formula with a named PySAT backend.

    Attributes:
        name: PySAT solver name, e.g. ``"glucose4"`` or ``"cadical153"``
    """

    def __init__(self, name: str = DEFAULT_SOLVER):
        self.name = name
        self._solver: Optional[Solver] = None
        self._satisfiable: Optional[bool] = None
        self._variable_count = 0

    def __enter__(self) -> SatEngine:
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def close(self):
        if self._solver is not None:
            self._solver.delete()
            self._solver = None

    def solve(self, encoded: EncodedFormula) -> bool:
        """Decide satisfiability of ``encoded``.

        A clause set holding the empty clause is unsatisfiable and is
        answered without starting the backend.

        Returns:
            True if a satisfying assignment exists
        """
        logger = get_logger()
        self.close()
        self._variable_count = encoded.variable_count

        clauses = encoded.clauses.clauses
        if any(len(clause) == 0 for clause in clauses):
            logger.debug("Clause set contains the empty clause")
            self._satisfiable = False
        else:
            self._solver = Solver(name=self.name, bootstrap_with=clauses)
            self._satisfiable = bool(self._solver.solve())

        logger.solver_verdict(self.name, self._satisfiable)
        return self._satisfiable

    def model(self) -> Optional[List[int]]:
        """Return the model of the last satisfiable ``solve`` call.

        The model holds exactly one signed literal per indexed variable, in
        identifier order. Variables the backend left unassigned (those that
        occur in no clause) are reported false.

        Returns:
            Signed literals, or None if the last call was unsatisfiable
        """
        if not self._satisfiable:
            return None

        assigned = set(self._solver.get_model() or []) if self._solver else set()
        return [
            var if var in assigned else -var
            for var in range(1, self._variable_count + 1)
        ]
