# src/stackscript/__init__.py
"""
StackScript: a tiny prefix-notation stack language.

    >>> import stackscript
    >>> stackscript.run_source('print add 5 add 10 10')
    25
"""
from .lexer import Lexer, tokenize
from .evaluator import Evaluator, evaluate
from .error_reporter import (
    StackScriptError, UnknownToken, UnterminatedString, MismatchedTypes,
    EvaluationError, StackUnderflow, IntegerOverflow,
)

__version__ = "0.1.0"


def run_source(source, output=None, filename="<string>", config=None):
    """Tokenize then evaluate ``source``. Errors from either stage propagate."""
    tokens = tokenize(source, filename, config)
    evaluate(tokens, output, filename, config)


__all__ = [
    'Lexer', 'tokenize', 'Evaluator', 'evaluate', 'run_source',
    'StackScriptError', 'UnknownToken', 'UnterminatedString', 'MismatchedTypes',
    'EvaluationError', 'StackUnderflow', 'IntegerOverflow', '__version__',
]
