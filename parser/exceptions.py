# parser/exceptions.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Custom exceptions for expression parsing

"""Domain-specific exceptions for boolean expression parsing."""


class ParseError(RuntimeError):
    """Exception raised when expression parsing fails due to syntax errors.

    Indicates that the input does not conform to the expression grammar or
    contains characters the lexer does not accept. Pipeline entry points
    translate it into an absent result.
    """

    pass
