"""Tests for the stks command line."""

import json

import pytest
from click.testing import CliRunner

from stackscript.cli.main import cli


@pytest.fixture
def cli_runner(isolated_config):
	"""Return a CLI test runner with no user config in effect."""
	return CliRunner()


@pytest.fixture
def program(tmp_path):
	path = tmp_path / "hello.stk"
	path.write_text('print\n  add 5 (add 10 10)\nprint concat "Hello, " "world!"\n')
	return path


def test_run_file(cli_runner, program):
	result = cli_runner.invoke(cli, ["run", str(program)])
	assert result.exit_code == 0, result.output
	assert result.output.splitlines() == ["Hello, world!", "25"]


def test_run_eval(cli_runner):
	result = cli_runner.invoke(cli, ["run", "-e", 'print "hi"'])
	assert result.exit_code == 0
	assert result.output == "hi\n"


def test_run_reports_errors(cli_runner):
	result = cli_runner.invoke(cli, ["run", "-e", "print foo"])
	assert result.exit_code == 1
	assert "UnknownToken" in result.output
	assert "foo" in result.output


def test_run_needs_exactly_one_source(cli_runner, program):
	assert cli_runner.invoke(cli, ["run"]).exit_code == 2
	assert cli_runner.invoke(cli, ["run", str(program), "-e", "print 1"]).exit_code == 2


def test_strict_strings_from_environment(cli_runner, monkeypatch):
	monkeypatch.setenv("STACKSCRIPT_STRICT_STRINGS", "1")
	result = cli_runner.invoke(cli, ["run", "-e", 'print "open'])
	assert result.exit_code == 1
	assert "UnterminatedString" in result.output


def test_demo(cli_runner):
	result = cli_runner.invoke(cli, ["demo"])
	assert result.exit_code == 0
	assert result.output.splitlines() == ["Hello, world!", "25"]


def test_check(cli_runner, program):
	result = cli_runner.invoke(cli, ["check", str(program)])
	assert result.exit_code == 0
	assert "OK" in result.output


def test_check_bad_file(cli_runner, tmp_path):
	path = tmp_path / "bad.stk"
	path.write_text("print 1 $")
	result = cli_runner.invoke(cli, ["check", str(path)])
	assert result.exit_code == 1
	assert "Unexpected character" in result.output


def test_tokens_json(cli_runner, program):
	result = cli_runner.invoke(cli, ["tokens", "--json", str(program)])
	assert result.exit_code == 0
	rows = [json.loads(line) for line in result.output.splitlines()]
	assert rows[0] == {"type": "INSTRUCTION", "literal": "print", "line": 1, "column": 1}
	assert rows[-1]["literal"] == '"world!"'


def test_tokens_table(cli_runner, program):
	result = cli_runner.invoke(cli, ["tokens", str(program)])
	assert result.exit_code == 0
	assert "INSTRUCTION" in result.output


def test_repl(cli_runner):
	result = cli_runner.invoke(cli, ["repl"], input="print 5\nprint bar\n\nexit\n")
	assert result.exit_code == 0
	assert "5" in result.output
	assert "UnknownToken" in result.output


def test_version(cli_runner):
	result = cli_runner.invoke(cli, ["--version"])
	assert result.exit_code == 0
	assert "0.1.0" in result.output


def test_file_that_is_not_utf8(cli_runner, tmp_path):
	path = tmp_path / "bad.stk"
	path.write_bytes(b'print "\xff"')
	for command in ("run", "check", "tokens"):
		result = cli_runner.invoke(cli, [command, str(path)])
		assert result.exit_code == 1
		assert not isinstance(result.exception, UnicodeDecodeError)
		assert "bad.stk" in result.output
