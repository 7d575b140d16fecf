# cnf/exceptions.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Exceptions for CNF conversion and encoding

"""Failures inside the CNF conversion and encoding stages.

These signal defects rather than bad input: a tree of the wrong shape reached
a stage that cannot handle it, or the encoder was given an index map that does
not cover the formula. They must propagate; pipeline entry points never turn
them into an absent result.
"""


class CNFInvariantError(RuntimeError):
    """A tree of an unexpected shape reached a CNF stage."""

    pass


class UnknownVariableError(CNFInvariantError):
    """A variable name is missing from the variable index."""

    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not present in the variable index")
        self.name = name
