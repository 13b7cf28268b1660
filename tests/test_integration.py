"""End-to-end runs through the public run_source entry point."""

import io

import pytest

import stackscript
from stackscript import run_source


def run(source):
	out = io.StringIO()
	run_source(source, out)
	return out.getvalue()


def test_reference_program():
	source = '''
	print
		add
			5
			add
				10
				10

	print
		concat
			"Hello, "
			"world!"
	'''
	assert run(source) == "Hello, world!\n25\n"


def test_tokenizer_errors_abort_before_any_output():
	out = io.StringIO()
	with pytest.raises(stackscript.UnknownToken):
		run_source("print 1 print nope", out)
	assert out.getvalue() == ""


@pytest.mark.parametrize("source,error", [
	("foo", stackscript.UnknownToken),
	('add "x" 5', stackscript.MismatchedTypes),
	("print", stackscript.EvaluationError),
	("add", stackscript.StackUnderflow),
	("99999999999999999999", stackscript.IntegerOverflow),
])
def test_error_taxonomy(source, error):
	with pytest.raises(error):
		run(source)
	with pytest.raises(stackscript.StackScriptError):
		run(source)
