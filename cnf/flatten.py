# cnf/flatten.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS

"""Flattens binary AND/OR trees into ordered clause and literal lists.

Both flatteners walk the tree with an explicit stack, pushing the left operand
before the right one, and emit nodes in pop order. For ``And(And(a, b), c)``
the conjuncts are therefore ``[c, b, a]``. The order is part of the encoded
output and is fixed.
"""

from typing import List

from parser import ast_nodes as ast
from .exceptions import CNFInvariantError


def flatten_conjuncts(expr: ast.Expr) -> List[ast.Expr]:
    """Split a CNF-shaped tree into its top-level conjuncts.

    Each conjunct is a disjunction or a single literal; it is not descended
    into.

    Raises:
        CNFInvariantError: If a constant, a negation over a non-variable or an
            unknown node is reached
    """
    conjuncts: List[ast.Expr] = []
    unresolved = [expr]

    while unresolved:
        node = unresolved.pop()
        if isinstance(node, ast.And):
            unresolved.append(node.left)
            unresolved.append(node.right)
        elif isinstance(node, ast.Or) or ast.is_literal(node):
            conjuncts.append(node)
        else:
            raise CNFInvariantError(
                f"{type(node).__name__} node cannot appear in a CNF conjunction: {node}"
            )

    return conjuncts


def flatten_disjuncts(expr: ast.Expr) -> List[ast.Expr]:
    """Split one clause into its literals.

    Raises:
        CNFInvariantError: If anything other than OR nodes and literals is
            reached, including a negation over a non-variable
    """
    literals: List[ast.Expr] = []
    unresolved = [expr]

    while unresolved:
        node = unresolved.pop()
        if isinstance(node, ast.Or):
            unresolved.append(node.left)
            unresolved.append(node.right)
        elif ast.is_literal(node):
            literals.append(node)
        else:
            raise CNFInvariantError(
                f"{type(node).__name__} node cannot appear in a CNF clause: {node}"
            )

    return literals
