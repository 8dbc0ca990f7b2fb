"""Tests for the rb-parameters CLI and its configuration."""

import textwrap

import pytest
import typer
from typer.testing import CliRunner

from rb_parameters.cli.__main__ import app
from rb_parameters.cli.commands import (
    build_parameters,
    compare_command,
    parse_assignments,
    show_command,
)
from rb_parameters.cli.config import get_precision, read_pyproject, validate_config
from rb_parameters.constants import DEFAULT_PRECISION


class TestParseAssignments:
    """Tests for name=value parsing."""

    def test_parse(self):
        """Test parsing well-formed assignments."""
        assert parse_assignments(["a=1", " b = 2.5 ", "c=nan"])["b"] == 2.5
        assert parse_assignments(None) == {}

    def test_last_assignment_wins(self):
        """Test repeated names."""
        assert parse_assignments(["a=1", "a=2"]) == {"a": 2.0}

    @pytest.mark.parametrize("raw", ["a", "=1", "a=x"])
    def test_malformed(self, raw):
        """Test that malformed assignments raise BadParameter."""
        with pytest.raises(typer.BadParameter):
            parse_assignments([raw])

    def test_build_parameters(self):
        """Test that extras land in the extra namespace."""
        params = build_parameters(["mu=1"], ["tag=2"])
        assert params.get_value("mu") == 1.0
        assert params.get_extra_value("tag") == 2.0
        assert not params.has_value("tag")


class TestConfig:
    """Tests for pyproject configuration."""

    def test_read_section(self, tmp_path):
        """Test reading the tool table."""
        (tmp_path / "pyproject.toml").write_text(textwrap.dedent("""
            [tool.rb_parameters]
            precision = 3
        """))
        assert read_pyproject(tmp_path) == {"precision": 3}
        assert get_precision(tmp_path) == 3

    def test_missing_file(self, tmp_path):
        """Test defaults when pyproject.toml is absent."""
        with pytest.raises(FileNotFoundError):
            read_pyproject(tmp_path)
        assert get_precision(tmp_path) == DEFAULT_PRECISION

    def test_missing_section(self, tmp_path):
        """Test defaults when the tool table is absent."""
        (tmp_path / "pyproject.toml").write_text("[project]\nname = 'x'\n")
        assert read_pyproject(tmp_path) == {}
        assert get_precision(tmp_path) == DEFAULT_PRECISION

    def test_validate(self):
        """Test configuration validation messages."""
        assert validate_config({"precision": 4}) == []
        assert validate_config({"precision": -1}) == ["precision must be non-negative, got: -1"]
        assert validate_config({"precision": "4"}) == ["precision must be an integer, got: '4'"]
        assert validate_config({"digits": 4}) == ["Unknown configuration key: digits"]

    def test_invalid_config_raises(self, tmp_path):
        """Test that invalid configuration is reported."""
        (tmp_path / "pyproject.toml").write_text("[tool.rb_parameters]\nprecision = true\n")
        with pytest.raises(ValueError, match="Invalid"):
            get_precision(tmp_path)


class TestCLI:
    """End-to-end CLI tests."""

    def setup_method(self):
        """Set up test runner."""
        self.runner = CliRunner()

    def test_show(self, isolated_cwd):
        """Test rendering parameters at the default precision."""
        result = self.runner.invoke(app, ["show", "-p", "mu_1=2.75", "-p", "mu_0=1.5", "-e", "tag=7"])
        assert result.exit_code == 0
        assert result.stdout == (
            "mu_0: 1.500000e+00\n"
            "mu_1: 2.750000e+00\n"
            "Extra parameters:\n"
            "tag: 7.000000e+00\n"
        )

    def test_show_precision_option(self, isolated_cwd):
        """Test the explicit precision option."""
        result = self.runner.invoke(app, ["show", "-p", "a=1", "--precision", "2"])
        assert result.exit_code == 0
        assert result.stdout == "a: 1.00e+00\n"

    def test_show_precision_from_pyproject(self, isolated_cwd):
        """Test that the configured precision is used by default."""
        (isolated_cwd / "pyproject.toml").write_text("[tool.rb_parameters]\nprecision = 1\n")
        result = self.runner.invoke(app, ["show", "-p", "a=1"])
        assert result.exit_code == 0
        assert result.stdout == "a: 1.0e+00\n"

    def test_show_malformed(self, isolated_cwd):
        """Test that malformed input is a usage error."""
        result = self.runner.invoke(app, ["show", "-p", "oops"])
        assert result.exit_code == 2

    def test_compare_equal(self):
        """Test comparing equal sets."""
        result = self.runner.invoke(app, ["compare", "-l", "a=1", "-l", "b=2", "-r", "b=2", "-r", "a=1"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "equal"

    def test_compare_different(self):
        """Test comparing sets that differ."""
        result = self.runner.invoke(app, ["compare", "-l", "a=1", "-l", "b=2", "-r", "a=1", "-r", "c=3"])
        assert result.exit_code == 1
        assert "different" in result.stdout
        assert "b: 2.0 != <missing>" in result.stdout
        assert "c: <missing> != 3.0" in result.stdout
        assert "a:" not in result.stdout

    def test_version(self):
        """Test the version command."""
        result = self.runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert result.stdout.startswith("rb-parameters ")
        assert "default precision 6" in result.stdout

    def test_no_command(self):
        """Test that a bare invocation shows help and fails."""
        result = self.runner.invoke(app, [])
        assert result.exit_code == 1


class TestCommandFunctions:
    """Tests calling the command functions directly, without the Typer app."""

    def test_show_with_defaults(self, isolated_cwd, capsys):
        """Test show_command with its Typer option defaults left in place."""
        show_command()
        assert capsys.readouterr().out == ""

    def test_show_with_values(self, isolated_cwd, capsys):
        """Test show_command with explicit arguments."""
        show_command(params=["b=2", "a=1"], extras=["t=3"], precision=1)
        assert capsys.readouterr().out == "a: 1.0e+00\nb: 2.0e+00\nExtra parameters:\nt: 3.0e+00\n"

    def test_compare_equal(self, capsys):
        """Test compare_command on sets that differ only in value spelling."""
        compare_command(left=["a=1"], right=["a=1.0"])
        assert capsys.readouterr().out.strip() == "equal"

    def test_compare_different_exits(self, capsys):
        """Test that compare_command exits with status 1 on a difference."""
        with pytest.raises(typer.Exit) as exc_info:
            compare_command(left=["a=1"], right=["a=2"])
        assert exc_info.value.exit_code == 1
        assert "a: 1.0 != 2.0" in capsys.readouterr().out
