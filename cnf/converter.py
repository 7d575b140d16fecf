# cnf/converter.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Expression tree transformer for Conjunctive Normal Form conversion

"""Transforms expression trees into Conjunctive Normal Form (CNF).

The conversion pushes negations down to the variables (De Morgan's laws,
double negation elimination) and distributes OR over AND. The result is a
binary tree of AND nodes whose leaves are clauses, each clause a binary tree
of OR nodes over literals, and is logically equivalent to the input.

The transformation process:
1. Simplifies identity and absorbing constants (``A & true``, ``A | true``)
2. Rewrites negations until they only wrap variables
3. Distributes disjunctions over conjunctions

Distribution is exponential in the worst case. No auxiliary variables are
introduced, so callers are responsible for bounding input size.
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from parser import ast_nodes as ast
from utils.logger import get_logger
from .flatten import flatten_conjuncts


class CNFConverter(ast.Visitor):
    """Transforms an expression tree into CNF.

    Uses the visitor pattern to rebuild the tree bottom-up, memoizing converted
    subtrees so shared subexpressions are only distributed once. Chains of the
    same connective, as the parser builds them for ``A && B && C``, are walked
    iteratively so their length is not limited by the interpreter's stack.

    Attributes:
        _memo: Converted subtrees keyed by node identity, with the node kept
            alive alongside its result
    """

    def __init__(self):
        self._memo: Dict[int, Tuple[ast.Expr, ast.Expr]] = {}

    def transform(self, root: ast.Expr) -> ast.Expr:
        """Convert ``root`` into CNF.

        Args:
            root: Any well-formed expression tree

        Returns:
            A CNF-shaped tree, or a bare constant when the formula simplifies
            to true or false
        """
        logger = get_logger()
        logger.debug(f"Starting CNF conversion of {type(root).__name__}")

        self._memo.clear()
        result = self._visit(simplify(root))
        self._memo.clear()

        logger.debug(f"CNF conversion complete: {type(result).__name__}")
        return result

    def _visit(self, node: ast.Expr) -> ast.Expr:
        cached = self._memo.get(id(node))
        if cached is not None:
            return cached[1]

        result = node.accept(self)
        self._memo[id(node)] = (node, result)
        return result

    def visit_variable(self, n: ast.Variable) -> ast.Expr:
        return n

    def visit_constant(self, n: ast.Constant) -> ast.Expr:
        return n

    def visit_and(self, n: ast.And) -> ast.Expr:
        """Conjunction is already CNF-compatible; convert every operand."""
        operands = ast.left_spine(n)
        result = self._visit(operands[0])
        for operand in operands[1:]:
            result = _fold_and(result, self._visit(operand))
        return result

    def visit_or(self, n: ast.Or) -> ast.Expr:
        """Distribute the disjunction over the conjuncts of both operands.

        For left conjuncts ``L1..Ln`` and right conjuncts ``R1..Rm`` the result
        is ``(L1|R1) & (L1|R2) & ... & (Ln|Rm)``, assembled left to right with
        the left conjuncts as the outer loop. A chain ``A | B | C`` is
        distributed pairwise from the left.
        """
        operands = ast.left_spine(n)
        result = self._visit(operands[0])
        for operand in operands[1:]:
            result = _distribute(result, self._visit(operand))
        return result

    def visit_not(self, n: ast.Not) -> ast.Expr:
        """Push the negation towards the variables."""
        inner = n.operand

        # Double negation: !!A -> A
        if isinstance(inner, ast.Not):
            return self._visit(inner.operand)

        # De Morgan: !(A & B) -> !A | !B
        if isinstance(inner, ast.And):
            return self._visit(_negate_chain(inner, ast.Or))

        # De Morgan: !(A | B) -> !A & !B
        if isinstance(inner, ast.Or):
            return self._visit(_negate_chain(inner, ast.And))

        if isinstance(inner, ast.Constant):
            return ast.FALSE if inner.value else ast.TRUE

        return n


def simplify(expr: ast.Expr) -> ast.Expr:
    """Remove identity and absorbing constants from AND/OR nodes.

    ``A & true`` and ``A | false`` become ``A``; ``A & false`` becomes false and
    ``A | true`` becomes true. Applied throughout the tree, including below
    negations, to shrink it before distribution. Nodes are rebuilt bottom-up
    with an explicit stack; the shape of the tree is otherwise unchanged.
    """
    results: List[ast.Expr] = []
    pending: List[Tuple[ast.Expr, bool]] = [(expr, False)]

    while pending:
        node, expanded = pending.pop()

        if isinstance(node, (ast.And, ast.Or)):
            if not expanded:
                pending.append((node, True))
                pending.append((node.right, False))
                pending.append((node.left, False))
                continue
            right = results.pop()
            left = results.pop()
            if (
                left is node.left
                and right is node.right
                and not isinstance(left, ast.Constant)
                and not isinstance(right, ast.Constant)
            ):
                results.append(node)
                continue
            fold = _fold_and if isinstance(node, ast.And) else _fold_or
            results.append(fold(left, right))

        elif isinstance(node, ast.Not):
            if not expanded:
                pending.append((node, True))
                pending.append((node.operand, False))
                continue
            operand = results.pop()
            results.append(node if operand is node.operand else ast.Not(operand))

        else:
            results.append(node)

    return results[0]


def _negate_chain(chain: ast.Expr, dual: type) -> ast.Expr:
    """Apply De Morgan to a whole left-nested chain at once."""
    operands = ast.left_spine(chain)
    result = ast.Not(operands[0])
    for operand in operands[1:]:
        result = dual(result, ast.Not(operand))
    return result


def _distribute(left: ast.Expr, right: ast.Expr) -> ast.Expr:
    if isinstance(left, ast.Constant) or isinstance(right, ast.Constant):
        return _fold_or(left, right)

    clauses = [
        ast.Or(left_clause, right_clause)
        for left_clause in flatten_conjuncts(left)
        for right_clause in flatten_conjuncts(right)
    ]

    result = clauses[0]
    for clause in clauses[1:]:
        result = ast.And(result, clause)
    return result


def _fold_and(left: ast.Expr, right: ast.Expr) -> ast.Expr:
    if isinstance(left, ast.Constant):
        return right if left.value else ast.FALSE
    if isinstance(right, ast.Constant):
        return left if right.value else ast.FALSE
    return ast.And(left, right)


def _fold_or(left: ast.Expr, right: ast.Expr) -> ast.Expr:
    if isinstance(left, ast.Constant):
        return ast.TRUE if left.value else right
    if isinstance(right, ast.Constant):
        return ast.TRUE if right.value else left
    return ast.Or(left, right)


def to_cnf(expr: ast.Expr) -> ast.Expr:
    """Convert ``expr`` into CNF with a fresh converter."""
    return CNFConverter().transform(expr)
