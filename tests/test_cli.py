"""
mplex CLI Tests
===============

Tests for the mplex command-line tool, run through click's CliRunner.
"""

import json

import pytest
from click.testing import CliRunner

from mypython import __version__
from mypython.cli.errors import ExitCode
from mypython.cli.mplex import main


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def source_file(tmp_path):
    """A small well-formed program."""
    path = tmp_path / "prog.my"
    path.write_text('def f(x):\n    return x->y # done\n', encoding="utf-8")
    return path


class TestMplexCLI:
    """Tests for the mplex CLI tool."""

    def test_cli_help(self, runner):
        """Help text describes the tool."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Tokenize MyPython source code" in result.output

    def test_cli_version(self, runner):
        """--version prints the package version."""
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_missing_argument(self, runner):
        """Running without a filename is a usage error."""
        result = runner.invoke(main, [])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_missing_file(self, runner, tmp_path):
        """A file that does not exist is rejected."""
        result = runner.invoke(main, [str(tmp_path / "nope.my")])
        assert result.exit_code == ExitCode.INVALID_ARGS

    def test_text_listing(self, runner, source_file):
        """Tokens are printed one per line."""
        result = runner.invoke(main, [str(source_file)])
        assert result.exit_code == 0
        assert 'TOKEN["symbol" , "def"]' in result.output
        assert 'TOKEN["INDENT" , 4]' in result.output
        assert 'TOKEN["punctuation" , "->"]' in result.output
        assert result.output.rstrip().endswith('TOKEN["EOF"]')

    def test_no_whitespace(self, runner, source_file):
        """--no-whitespace drops WHITESPACE tokens."""
        result = runner.invoke(main, [str(source_file), "--no-whitespace"])
        assert result.exit_code == 0
        assert "whitespace" not in result.output

    def test_json_output(self, runner, source_file):
        """--format json prints a JSON array."""
        result = runner.invoke(main, [str(source_file), "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data[0] == {"kind": "IDENTIFIER", "value": "def", "line": 1, "column": 1}
        assert data[-1]["kind"] == "EOF"

    def test_output_file(self, runner, source_file, tmp_path):
        """-o writes the listing to a file."""
        out = tmp_path / "prog.tokens"
        result = runner.invoke(main, [str(source_file), "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text(encoding="utf-8").startswith('TOKEN["symbol" , "def"]')

    def test_unterminated_string(self, runner, tmp_path):
        """An unterminated literal exits with a lexing error."""
        path = tmp_path / "bad.my"
        path.write_text('x = "abc\n', encoding="utf-8")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "unterminated string literal" in result.output
        assert "TOKEN[" not in result.output

    def test_invalid_character_is_not_fatal(self, runner, tmp_path):
        """INVALID tokens are listed and the run succeeds."""
        path = tmp_path / "odd.my"
        path.write_text("a \x01 b\n", encoding="utf-8")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == 0
        assert 'TOKEN["INVALID"' in result.output

    def test_strict_mode(self, runner, tmp_path):
        """--strict makes invalid characters fatal."""
        path = tmp_path / "odd.my"
        path.write_text("a \x01 b\n", encoding="utf-8")
        result = runner.invoke(main, [str(path), "--strict"])
        assert result.exit_code == ExitCode.LEX_ERROR
        assert "invalid character" in result.output

    def test_undecodable_file(self, runner, tmp_path):
        """Non-UTF-8 input is reported as an argument error."""
        path = tmp_path / "bin.my"
        path.write_bytes(b"\xff\xfe\x00")
        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.INVALID_ARGS
