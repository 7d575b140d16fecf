# core/solution.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional

from cnf.indexer import VariableIndex


@dataclass(frozen=True)
class Solution:
    """Outcome of solving one expression.

    Attributes:
        satisfiable: Verdict of the SAT engine
        model: One signed DIMACS literal per variable, None if unsatisfiable
        index: Variable numbering the model refers to
    """

    satisfiable: bool
    model: Optional[List[int]]
    index: VariableIndex

    @property
    def assignment(self) -> Optional[Dict[str, bool]]:
        """Map each variable name to its value in the model."""
        if self.model is None:
            return None
        return {self.index.name_of(lit): lit > 0 for lit in self.model}

    def __str__(self) -> str:
        if not self.satisfiable:
            return "UNSATISFIABLE"
        values = " ".join(
            f"{name}={'y' if value else 'n'}" for name, value in self.assignment.items()
        )
        return f"SATISFIABLE {values}".rstrip()
