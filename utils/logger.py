# utils/logger.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Logging utility for the CNF pipeline with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for the CNF pipeline."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class CNFLogger:
    """Centralized logger for the CNF pipeline with structured output."""

    def __init__(self, name: str = "kconfig_cnf", level: LogLevel = LogLevel.INFO):
        """Initialize the pipeline logger.

        Args:
            name: Logger name (typically module name)
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(CNFFormatter())

        self.logger.addHandler(console_handler)

        # Prevent propagation to root logger
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for pipeline stages
    def formula_parsed(self, raw_text: str, formula):
        """Log a successfully parsed expression.

        The tree is only rendered when debug output is enabled.
        """
        if self.logger.isEnabledFor(logging.DEBUG):
            self.debug(f"Parsed '{raw_text}' into {formula}")

    def cnf_converted(self, formula, clause_count: int):
        """Log the outcome of CNF conversion."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.debug(f"CNF conversion produced {clause_count} clause(s): {formula}")

    def formula_encoded(self, variable_count: int, clause_count: int):
        """Log the size of an encoded clause set."""
        self.debug(
            f"Encoded clause set: {variable_count} variable(s), {clause_count} clause(s)"
        )

    def solver_verdict(self, solver_name: str, satisfiable: bool):
        """Log the verdict returned by the SAT engine."""
        verdict = "SATISFIABLE" if satisfiable else "UNSATISFIABLE"
        self.debug(f"Solver '{solver_name}' returned {verdict}")


class CNFFormatter(logging.Formatter):
    """Custom formatter for pipeline logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[CNFLogger] = None


def get_logger(name: str = "kconfig_cnf") -> CNFLogger:
    """Get or create the global pipeline logger instance.

    Args:
        name: Logger name (default: "kconfig_cnf")

    Returns:
        CNFLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = CNFLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
