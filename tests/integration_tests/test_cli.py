# tests/integration_tests/test_cli.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Command-line front end tests

import pytest
from run_solver import (
    EXIT_INPUT,
    EXIT_INTERNAL,
    EXIT_NO_RESULT,
    EXIT_OK,
    EXIT_SATISFIABLE,
    EXIT_UNSATISFIABLE,
    create_argument_parser,
    main,
    read_expression_file,
)
from utils.logger import LogLevel, get_logger, set_log_level


@pytest.fixture(autouse=True)
def restore_log_level():
    yield
    set_log_level(LogLevel.WARNING)


class TestCommandLine:
    """Test cases for run_solver.main."""

    def test_dimacs_to_stdout(self, capsys):
        assert main(["-e", "!A||(B&&C)"]) == EXIT_OK
        assert capsys.readouterr().out == "c A 1\nc B 2\nc C 3\np cnf 3 2\n2 -1 0\n3 -1 0\n"

    def test_dimacs_to_file(self, tmp_path, capsys):
        target = tmp_path / "out.cnf"
        assert main(["-e", "A", "-o", str(target)]) == EXIT_OK
        assert target.read_text(encoding="utf-8") == "c A 1\np cnf 1 1\n1 0\n"
        assert capsys.readouterr().out == ""

    def test_check_satisfiable(self, capsys):
        assert main(["-e", "A||B", "--check"]) == EXIT_SATISFIABLE
        assert capsys.readouterr().out.strip() == "SATISFIABLE"

    def test_check_unsatisfiable(self, capsys):
        assert main(["-e", "A&&!A", "--check"]) == EXIT_UNSATISFIABLE
        assert capsys.readouterr().out.strip() == "UNSATISFIABLE"

    def test_solve_prints_assignment(self, capsys):
        assert main(["-e", "A&&!B", "--solve"]) == EXIT_SATISFIABLE
        assert capsys.readouterr().out.strip() == "SATISFIABLE A=y B=n"

    @pytest.mark.parametrize("mode", [[], ["--check"], ["--solve"]])
    def test_malformed_expression(self, mode, capsys):
        assert main(["-e", "A&&"] + mode) == EXIT_NO_RESULT
        assert capsys.readouterr().out == ""

    def test_expression_file_is_conjoined(self, tmp_path, capsys):
        source = tmp_path / "depends.txt"
        source.write_text("# PCI support\nA||B\n\n!A\n", encoding="utf-8")
        assert main(["-f", str(source), "--solve"]) == EXIT_SATISFIABLE
        assert capsys.readouterr().out.strip() == "SATISFIABLE A=n B=y"

    def test_missing_file(self, tmp_path):
        assert main(["-f", str(tmp_path / "missing.txt")]) == EXIT_INPUT

    def test_empty_file(self, tmp_path):
        source = tmp_path / "empty.txt"
        source.write_text("# nothing here\n\n", encoding="utf-8")
        assert main(["-f", str(source)]) == EXIT_INPUT

    def test_debug_flag_sets_level(self, capsys):
        main(["-e", "A", "--debug"])
        assert get_logger().logger.level == LogLevel.DEBUG.value

    def test_unknown_solver_is_internal_error(self, capsys):
        assert main(["-e", "A", "--check", "--solver", "no-such-solver"]) == EXIT_INTERNAL
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("flags", [["--check"], ["--check", "--debug"]])
    def test_long_dependency_file(self, tmp_path, capsys, flags):
        source = tmp_path / "depends.txt"
        source.write_text(
            "".join(f"OPT{i}||!BASE\n" for i in range(1000)) + "BASE\n", encoding="utf-8"
        )
        assert main(["-f", str(source)] + flags) == EXIT_SATISFIABLE
        assert capsys.readouterr().out.strip() == "SATISFIABLE"

    def test_long_dependency_file_to_dimacs(self, tmp_path):
        source = tmp_path / "depends.txt"
        source.write_text("".join(f"OPT{i}\n" for i in range(1000)), encoding="utf-8")
        target = tmp_path / "depends.cnf"
        assert main(["-f", str(source), "-o", str(target)]) == EXIT_OK
        assert "p cnf 1000 1000\n" in target.read_text(encoding="utf-8")


class TestArguments:
    """Test cases for argument parsing."""

    def test_source_is_required(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args([])

    def test_modes_are_exclusive(self):
        with pytest.raises(SystemExit):
            create_argument_parser().parse_args(["-e", "A", "--check", "--solve"])

    def test_defaults(self):
        args = create_argument_parser().parse_args(["-e", "A"])
        assert args.solver == "glucose4"
        assert not args.check and not args.solve
        assert args.output is None

    def test_read_expression_file(self, tmp_path):
        source = tmp_path / "depends.txt"
        source.write_text("  PCI||!X86  \n# comment\nPCI_MSI&&PCI\n", encoding="utf-8")
        assert read_expression_file(source) == ["PCI||!X86", "PCI_MSI&&PCI"]
