# parser/ast_nodes.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Expression tree node classes for propositional formula representation

"""Expression tree classes for representing parsed boolean formulas.

This module defines immutable and hashable node classes used to construct tree
representations of propositional formulas over named configuration options.
The tree supports the Boolean connectives AND, OR and NOT over variables and
the two truth constants.

Node Types:
    Variable: Named boolean variable (a configuration option)
    Constant: The truth constants, available as TRUE and FALSE
    Not, And, Or: Standard Boolean connectives

All nodes support the visitor design pattern for traversal and transformation.
Trees are never mutated; transformations build new interior nodes and reuse
leaves verbatim.
"""

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import List, Protocol

# Characters a variable name may contain; everything else is parser syntax
VARIABLE_NAME_PATTERN = re.compile(r"[A-Za-z0-9_]+")

# Words the parser reads as truth constants rather than variables
RESERVED_NAMES = frozenset({"true", "false"})


class Visitor(Protocol):
    """Interface for tree visitors implementing the visitor design pattern.

    Concrete visitors must implement visit methods for each node type
    to enable type-safe traversal and transformation operations.
    """

    def visit_variable(self, n: Variable): ...

    def visit_constant(self, n: Constant): ...

    def visit_not(self, n: Not): ...

    def visit_and(self, n: And): ...

    def visit_or(self, n: Or): ...


@dataclass(frozen=True, slots=True)
class Expr:
    """Base class for all nodes in propositional formulas.

    Provides the foundation for immutable expression trees with visitor pattern
    support. All concrete node types inherit from this class and must implement
    the accept method for visitor dispatch and __str__ for string representation.
    """

    def accept(self, v: Visitor):
        """Dispatch to the appropriate visitor method.

        Args:
            v: Visitor instance to process this node

        Raises:
            NotImplementedError: Must be implemented by subclasses
        """
        raise NotImplementedError

    def __str__(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Variable(Expr):
    """Named boolean variable.

    Two variables denote the same logical variable exactly when their names
    are equal (case-sensitive). Names are restricted to identifier characters
    so they can never collide with operator or boundary syntax.

    Attributes:
        name: The configuration option name

    Raises:
        ValueError: If the name is empty, contains reserved syntax
            characters, or is one of the constant words
    """

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("Variable name must be a non-empty string")
        if not VARIABLE_NAME_PATTERN.fullmatch(self.name):
            raise ValueError(
                f"Variable name '{self.name}' contains reserved syntax characters"
            )
        if self.name in RESERVED_NAMES:
            raise ValueError(f"Variable name '{self.name}' is a reserved constant")

    def accept(self, v: Visitor):
        return v.visit_variable(self)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Constant(Expr):
    """Boolean truth constant.

    Use the module-level TRUE and FALSE instances rather than constructing
    new ones; equality is by value either way.

    Attributes:
        value: The truth value of this constant
    """

    value: bool

    def accept(self, v: Visitor):
        return v.visit_constant(self)

    def __str__(self) -> str:
        return "true" if self.value else "false"


TRUE = Constant(True)
FALSE = Constant(False)


@dataclass(frozen=True, slots=True)
class Not(Expr):
    """Logical negation operator for Boolean expressions.

    Attributes:
        operand: The expression being negated
    """

    operand: Expr

    def accept(self, v: Visitor):
        return v.visit_not(self)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class And(Expr):
    """Logical conjunction operator for Boolean expressions.

    Attributes:
        left: Left operand of the conjunction
        right: Right operand of the conjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_and(self)

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Or(Expr):
    """Logical disjunction operator for Boolean expressions.

    Attributes:
        left: Left operand of the disjunction
        right: Right operand of the disjunction
    """

    left: Expr
    right: Expr

    def accept(self, v: Visitor):
        return v.visit_or(self)

    def __str__(self) -> str:
        return render(self)


def is_literal(node: Expr) -> bool:
    """Return True for a variable or a negated variable."""
    if isinstance(node, Variable):
        return True
    return isinstance(node, Not) and isinstance(node.operand, Variable)


def left_spine(node: Expr) -> List[Expr]:
    """Operands of the left-nested chain of ``type(node)`` rooted at ``node``.

    The parser builds ``A & B & C`` as ``And(And(A, B), C)``; this returns
    ``[A, B, C]``. Only left operands of the same connective are descended
    into, so ``And(A, And(B, C))`` gives ``[A, And(B, C)]``.
    """
    kind = type(node)
    operands: List[Expr] = []
    while type(node) is kind and isinstance(node, (And, Or)):
        operands.append(node.right)
        node = node.left
    operands.append(node)
    operands.reverse()
    return operands


def render(expr: Expr) -> str:
    """Render ``expr`` as text, e.g. ``((A & B) | !C)``.

    Walks the tree with an explicit stack so long dependency chains can be
    printed regardless of nesting depth.
    """
    parts: List[str] = []
    pending: List[object] = [expr]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, (And, Or)):
            symbol = " & " if isinstance(item, And) else " | "
            pending.extend((")", item.right, symbol, item.left, "("))
        elif isinstance(item, Not):
            pending.extend((item.operand, "!"))
        else:
            parts.append(str(item))

    return "".join(parts)
