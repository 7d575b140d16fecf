# parser/lexer.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Lexical analyzer for preprocessed boolean expressions using SLY

"""Lexical analyzer for preprocessed boolean expression strings.

Input is the output of ``parser.preprocess``: single-character operators and
identifiers wrapped in ``[...]`` boundaries. The bracketed words ``true`` and
``false`` are the truth constants; every other bracketed word is a variable.

Supported Tokens:
- Operators: ~, &, |, (, )
- Constants: [true], [false]
- Variables: [name]
- Whitespace: ignored during tokenization
"""

from sly import Lexer
from utils.logger import get_logger


class ExprLexer(Lexer):
    """SLY-based lexer for boolean expression tokenization.

    Attributes:
        tokens: Set of valid token types
        ignore: Characters to skip during tokenization
    """

    tokens = {
        "TRUE",
        "FALSE",
        "VARIABLE",
        "NOT",
        "AND",
        "OR",
        "LPAREN",
        "RPAREN",
    }

    ignore = " \t\r\n"

    NOT = r"~"
    AND = r"&"
    OR = r"\|"
    LPAREN = r"\("
    RPAREN = r"\)"

    # Constants are matched before the general variable pattern
    TRUE = r"\[true\]"
    FALSE = r"\[false\]"

    @_(r"\[[A-Za-z0-9_]+\]")
    def VARIABLE(self, t):
        # Strip the boundary markers
        t.value = t.value[1:-1]
        return t

    def error(self, t):
        """Handle illegal characters during tokenization.

        Args:
            t: SLY token object containing error context

        Raises:
            ValueError: Always raised with character and position information
        """
        logger = get_logger()

        illegal_char = t.value[0]
        error_pos = self.index

        logger.debug(f"Illegal character '{illegal_char}' at position {error_pos}")

        self.index += 1

        raise ValueError(
            f"Illegal character '{illegal_char}' encountered at position {error_pos}"
        )
