# parser/preprocess.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Text normalization applied before tokenization

"""Rewrites raw dependency expressions into the lexer's input syntax.

Kconfig-style expressions use C-like operators (``&&``, ``||``, ``!``) and
bare identifiers. The lexer expects single-character operators and every
identifier wrapped in explicit ``[...]`` boundaries, so that option names such
as ``64BIT`` or ``X86_64`` can never be confused with operator syntax.

The rewrite is stateless: operator aliasing, whitespace removal, then boundary
marking of every maximal run of identifier characters.
"""

import re

from utils.logger import get_logger

# Operator spellings accepted in raw input, mapped to lexer symbols
OPERATOR_ALIASES = (
    ("&&", "&"),
    ("||", "|"),
    ("!", "~"),
)

_IDENTIFIER_RUN = re.compile(r"[A-Za-z0-9_]+")
_WHITESPACE = re.compile(r"\s+")


def preprocess(text: str) -> str:
    """Normalize operators and mark variable boundaries.

    Args:
        text: Raw expression such as ``"!A||(B&&C)"``

    Returns:
        Lexer input such as ``"~[A]|([B]&[C])"``
    """
    logger = get_logger()
    logger.debug(f"Raw expression: {text}")

    normalized = text
    for alias, symbol in OPERATOR_ALIASES:
        normalized = normalized.replace(alias, symbol)
    normalized = _WHITESPACE.sub("", normalized)

    result = _IDENTIFIER_RUN.sub(lambda m: f"[{m.group(0)}]", normalized)
    logger.debug(f"After marking variable boundaries: {result}")
    return result
