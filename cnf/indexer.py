# cnf/indexer.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Deterministic variable indexing for DIMACS encoding

"""Assigns every variable of a formula a stable integer index.

Indices are positions in the lexicographically sorted set of distinct names,
so the same set of names always yields the same numbering regardless of the
formula's shape. Positions are 0-based; DIMACS identifiers are position + 1,
as variable 0 is the clause terminator on the wire.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, Mapping, Set, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger
from .exceptions import CNFInvariantError, UnknownVariableError


@dataclass(frozen=True)
class VariableIndex:
    """Sorted variable names and their 0-based positions.

    Attributes:
        names: Distinct variable names in sorted order
        positions: Name to 0-based index mapping built from ``names``
    """

    names: Tuple[str, ...]
    positions: Mapping[str, int] = field(compare=False, repr=False)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> VariableIndex:
        """Build an index over an arbitrary collection of names.

        Duplicates are ignored. Useful for encoding several formulas against
        one shared numbering.
        """
        ordered = tuple(sorted(set(names)))
        positions: Dict[str, int] = {name: i for i, name in enumerate(ordered)}
        return cls(ordered, positions)

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self.positions

    def dimacs_id(self, name: str) -> int:
        """Return the 1-based DIMACS variable identifier for ``name``.

        Raises:
            UnknownVariableError: If ``name`` is not indexed
        """
        try:
            return self.positions[name] + 1
        except KeyError:
            raise UnknownVariableError(name) from None

    def name_of(self, dimacs_id: int) -> str:
        """Return the variable name for a 1-based DIMACS identifier."""
        return self.names[abs(dimacs_id) - 1]


def collect_variables(expr: ast.Expr) -> Set[str]:
    """Collect the distinct variable names referenced by ``expr``.

    Uses an explicit work stack so deeply nested input cannot exhaust the
    interpreter's call stack.

    Raises:
        CNFInvariantError: If a node of unknown type is encountered
    """
    names: Set[str] = set()
    unresolved = [expr]

    while unresolved:
        node = unresolved.pop()
        if isinstance(node, (ast.And, ast.Or)):
            unresolved.append(node.left)
            unresolved.append(node.right)
        elif isinstance(node, ast.Not):
            unresolved.append(node.operand)
        elif isinstance(node, ast.Variable):
            names.add(node.name)
        elif isinstance(node, ast.Constant):
            continue
        else:
            raise CNFInvariantError(
                f"Unexpected node {type(node).__name__} while collecting variables"
            )

    return names


def index_variables(expr: ast.Expr) -> VariableIndex:
    """Build the variable index for ``expr``.

    Args:
        expr: Any well-formed expression tree

    Returns:
        VariableIndex over the distinct names in ``expr``
    """
    logger = get_logger()
    index = VariableIndex.from_names(collect_variables(expr))
    for name in index.names:
        logger.debug(f"Indexed variable {name} -> {index.dimacs_id(name)}")
    return index
