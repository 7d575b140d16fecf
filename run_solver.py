#!/usr/bin/env python3
# run_solver.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Command-line interface for CNF encoding and SAT checking of dependency expressions

import sys
import argparse
from pathlib import Path
from typing import List

from cnf.exceptions import CNFInvariantError
from core import DEFAULT_SOLVER, conjoin, encode_expression, solve
from utils.logger import configure_logging, get_logger

EXIT_OK = 0
EXIT_NO_RESULT = 1
EXIT_INTERNAL = 2
EXIT_INPUT = 3
EXIT_SATISFIABLE = 10
EXIT_UNSATISFIABLE = 20
EXIT_INTERRUPTED = 130


def read_expression_file(filepath: Path) -> List[str]:
    """Read dependency expressions from file, one per line.

    Blank lines and lines starting with '#' are skipped.

    Args:
        filepath: Path to the expression file

    Returns:
        Expressions in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file holds no expression
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = [line.strip() for line in f]
    except FileNotFoundError:
        raise FileNotFoundError(f"Expression file not found: {filepath}")

    expressions = [line for line in lines if line and not line.startswith("#")]
    if not expressions:
        raise ValueError("Expression file is empty")
    return expressions


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Convert Kconfig-style dependency expressions to DIMACS CNF",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_solver.py -e '!A||(B&&C)'
  python run_solver.py -e 'A&&!A' --check
  python run_solver.py -f depends.txt --solve
  python run_solver.py -f depends.txt -o depends.cnf --debug

Expression file format:
  One expression per line; all lines must hold together.

  depends.txt:
    # PCI support
    PCI||!X86
    PCI_MSI&&PCI

Exit codes:
  0 DIMACS written, 10 satisfiable, 20 unsatisfiable,
  1 expression could not be parsed, 2 internal error, 3 input file error,
  130 interrupted
        """,
    )

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expr", help="Dependency expression to process")
    source.add_argument(
        "-f", "--file", type=Path, help="File with one expression per line"
    )

    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check", action="store_true", help="Only report whether it is satisfiable"
    )
    mode.add_argument(
        "--solve", action="store_true", help="Print a satisfying assignment"
    )

    parser.add_argument(
        "-o", "--output", type=Path, help="Write DIMACS text to this file"
    )

    parser.add_argument(
        "--solver",
        default=DEFAULT_SOLVER,
        help=f"PySAT solver backend (default: {DEFAULT_SOLVER})",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    return parser


def main(argv=None) -> int:
    """Main entry point.

    Returns:
        Exit code, see the module's epilog
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.file is not None:
            expression = conjoin(read_expression_file(args.file))
        else:
            expression = args.expr
        logger.info(f"Expression: {expression}")

        if args.check or args.solve:
            solution = solve(expression, solver_name=args.solver)
            if solution is None:
                logger.error("Could not parse expression")
                return EXIT_NO_RESULT

            if args.solve:
                print(solution)
            else:
                print("SATISFIABLE" if solution.satisfiable else "UNSATISFIABLE")
            return EXIT_SATISFIABLE if solution.satisfiable else EXIT_UNSATISFIABLE

        encoded = encode_expression(expression)
        if encoded is None:
            logger.error("Could not parse expression")
            return EXIT_NO_RESULT

        text = encoded.to_text()
        if args.output is not None:
            args.output.write_text(text, encoding="utf-8")
            logger.info(f"Wrote {encoded.clause_count} clause(s) to {args.output}")
        else:
            sys.stdout.write(text)
        return EXIT_OK

    except CNFInvariantError as e:
        logger.error(f"Internal error: {e}")
        return EXIT_INTERNAL

    except (OSError, ValueError) as e:
        logger.error(f"Input or output file error: {e}")
        return EXIT_INPUT

    except KeyboardInterrupt:
        logger.error("Interrupted by user")
        return EXIT_INTERRUPTED

    except Exception as e:
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        if args.debug:
            import traceback

            traceback.print_exc()
        return EXIT_INTERNAL


if __name__ == "__main__":
    sys.exit(main())
