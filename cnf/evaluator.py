# cnf/evaluator.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS

"""Truth evaluation of expression trees under a variable assignment."""

from typing import Mapping

from parser import ast_nodes as ast


class Evaluator(ast.Visitor):
    """Evaluates a tree against a fixed name -> bool assignment.

    Attributes:
        assignment: Truth value of every variable in the tree
    """

    def __init__(self, assignment: Mapping[str, bool]):
        self.assignment = assignment

    def visit_variable(self, n: ast.Variable) -> bool:
        # Missing names raise KeyError
        return bool(self.assignment[n.name])

    def visit_constant(self, n: ast.Constant) -> bool:
        return n.value

    def visit_not(self, n: ast.Not) -> bool:
        return not n.operand.accept(self)

    def visit_and(self, n: ast.And) -> bool:
        return all(operand.accept(self) for operand in ast.left_spine(n))

    def visit_or(self, n: ast.Or) -> bool:
        return any(operand.accept(self) for operand in ast.left_spine(n))


def evaluate(expr: ast.Expr, assignment: Mapping[str, bool]) -> bool:
    """Return the truth value of ``expr`` under ``assignment``.

    Operands are evaluated left to right with short-circuiting.

    Raises:
        KeyError: If a variable that has to be consulted is not assigned
    """
    return expr.accept(Evaluator(assignment))
