# parser/__init__.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Expression parsing components for configuration dependency formulas

"""Boolean dependency expression parsing.

This package turns Kconfig-style dependency expressions such as
``"A&&(B||!C)"`` into immutable expression trees. Raw text is first
normalized by ``preprocess`` (operator aliasing, whitespace removal and
variable boundary marking) and then handed to an SLY-generated LALR(1)
parser.

Core Functions:
    parse: Parses preprocessed text, raising ParseError on failure
    parse_formula: Full raw-text front end returning None when no tree
        can be produced

Example:
    >>> from parser import parse_formula
    >>> tree = parse_formula("A&&(B)||C")
    >>> str(tree)
    '((A & B) | C)'
"""

from typing import Optional

from .ast_nodes import Expr
from .exceptions import ParseError
from .grammar import _ExprParser
from .preprocess import preprocess
from utils.logger import get_logger


def parse(source: str) -> Expr:
    """Parse preprocessed expression text into a tree.

    Uses a fresh parser instance for each invocation to keep parsing
    stateless.

    Args:
        source: Preprocessed expression (see ``preprocess``)

    Returns:
        Root node of the parsed formula

    Raises:
        ParseError: Expression syntax is malformed
    """
    logger = get_logger()
    parser = _ExprParser()

    try:
        return parser.parse(source)

    except ParseError:
        raise

    except Exception as exc:
        logger.debug(f"Unexpected parsing error: {type(exc).__name__}: {exc}")
        raise ParseError(str(exc)) from exc


def parse_formula(text: str) -> Optional[Expr]:
    """Parse a raw dependency expression.

    Empty input and malformed syntax both yield None; callers cannot tell
    the two apart, they only learn that there is nothing to encode.

    Args:
        text: Raw expression such as ``"!A||(B&&C)"``

    Returns:
        Root node of the parsed formula, or None
    """
    logger = get_logger()

    if not text:
        logger.info("Received empty string to parse")
        return None

    try:
        formula = parse(preprocess(text))
    except ParseError as exc:
        logger.debug(f"Parsing '{text}' failed: {exc}")
        return None

    logger.formula_parsed(text, formula)
    return formula


__all__ = ["parse", "parse_formula", "preprocess", "ParseError"]

__version__ = "0.1.0"
__description__ = "Boolean dependency expression parsing"
