# parser/grammar.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# LALR(1) grammar and parser for boolean expressions using SLY

"""Boolean expression grammar implementation using SLY parser generator.

This module defines the grammar rules that build expression trees from the
token stream produced by ExprLexer.

Operator Precedence (lowest to highest):
- OR ('|'): left-associative
- AND ('&'): left-associative
- NOT ('~'): right-associative
"""

from sly import Parser
from .lexer import ExprLexer
from .ast_nodes import Expr, Variable, Not, And, Or, TRUE, FALSE
from .exceptions import ParseError
from utils.logger import get_logger


class _ExprParser(Parser):
    """SLY-based LALR(1) parser for preprocessed boolean expressions.

    Attributes:
        tokens: Token types from ExprLexer
        precedence: Operator precedence and associativity rules
    """

    tokens = ExprLexer.tokens

    precedence = (
        ("left", "OR"),
        ("left", "AND"),
        ("right", "NOT"),
    )

    @_("expr")
    def start(self, p) -> Expr:
        """Start rule: complete formula is a single expression."""
        return p.expr

    @_("NOT expr")
    def expr(self, p) -> Expr:
        """Negation operator."""
        return Not(p.expr)

    @_("expr AND expr")
    def expr(self, p) -> Expr:
        """Conjunction operator."""
        return And(p.expr0, p.expr1)

    @_("expr OR expr")
    def expr(self, p) -> Expr:
        """Disjunction operator."""
        return Or(p.expr0, p.expr1)

    @_("LPAREN expr RPAREN")
    def expr(self, p) -> Expr:
        """Parenthesized expression for grouping."""
        return p.expr

    @_("atom")
    def expr(self, p) -> Expr:
        return p.atom

    @_("VARIABLE")
    def atom(self, p) -> Expr:
        return Variable(p.VARIABLE)

    @_("TRUE")
    def atom(self, p) -> Expr:
        return TRUE

    @_("FALSE")
    def atom(self, p) -> Expr:
        return FALSE

    def parse(self, text: str) -> Expr:
        """Parse preprocessed expression text into a tree.

        Args:
            text: Preprocessed expression string to parse

        Returns:
            Root node representing the parsed formula

        Raises:
            ParseError: If the expression is empty or contains syntax errors
        """
        logger = get_logger()
        logger.debug(f"Parsing expression: {text}")

        try:
            result = super().parse(ExprLexer().tokenize(text))

            if result is None and text.strip() == "":
                raise ParseError("Input expression is empty.")

            if result is None:
                raise ParseError("Failed to parse expression (syntax error).")

            logger.debug(f"Successfully parsed expression into {type(result).__name__}")
            return result

        except ParseError:
            logger.debug("Parse error encountered")
            raise
        except Exception as e:
            logger.debug(f"Unexpected parsing error: {e}")
            raise ParseError(f"Parse failed: {e}") from e

    def error(self, token):
        """Handle syntax errors during parsing.

        Args:
            token: Problematic token or None for end-of-input errors

        Raises:
            ParseError: Always raises with detailed error information
        """
        if token:
            error_msg = (
                f"Syntax error near '{token.value}' "
                f"(type: {token.type}) at position {token.index}"
            )
        else:
            error_msg = "Syntax error: Unexpected end of expression"

        raise ParseError(error_msg)
