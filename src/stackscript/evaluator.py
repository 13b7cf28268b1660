# src/stackscript/evaluator.py
"""
Reverse-order stack machine for StackScript.

Programs are written prefix style, instruction first::

    print add 5 add 10 10

The evaluator walks the token sequence from the last token to the first.
Walking backwards turns prefix notation into postfix: every operand has been
pushed by the time the instruction that consumes it is reached. The example
above pushes 10, 10, adds them, pushes 5, adds again and prints ``25``.

Parentheses are accepted by the lexer for readability only and are skipped
here.
"""
import logging
import sys

from .stack_token import OpCode, LPAREN, RPAREN, INSTRUCTION, INT, STRING
from .object import Integer, String, fits_int64
from .config import config as default_config
from .error_reporter import (
    get_error_reporter, EvaluationError, MismatchedTypes, StackUnderflow,
    IntegerOverflow,
)

logger = logging.getLogger(__name__)


class Evaluator:
    def __init__(self, output=None, filename=None, config=None):
        self.output = output
        self.filename = filename
        self.config = config or default_config
        self.stack = []
        self.error_reporter = get_error_reporter()

    def evaluate(self, tokens):
        self.stack = []
        # Tokens are only read; the caller's list is left untouched
        for token in reversed(tokens):
            self.eval_token(token)
        self.trace("finished with %d value(s) left on the stack", len(self.stack))
        self.stack = []

    def trace(self, message, *args):
        """Debug output, only when the configured level asks for it."""
        if self.config.should_log("debug"):
            logger.debug(message, *args)

    def eval_token(self, token):
        if token.type in (LPAREN, RPAREN):
            return
        if token.type == INT:
            self.stack.append(Integer(token.value))
        elif token.type == STRING:
            self.stack.append(String(token.value))
        elif token.type == INSTRUCTION:
            self.trace("%s (stack depth %d)", token.value.value, len(self.stack))
            if token.value is OpCode.PRINT:
                self.eval_print(token)
            elif token.value is OpCode.ADD:
                self.eval_add(token)
            elif token.value is OpCode.CONCAT:
                self.eval_concat(token)
            else:
                raise ValueError(f"unhandled opcode: {token.value!r}")
        else:
            raise ValueError(f"unknown token type: {token.type}")

    def eval_print(self, token):
        if not self.stack:
            raise self._error(EvaluationError, "'print' called on an empty stack", token)
        value = self.stack.pop()
        out = self.output if self.output is not None else sys.stdout
        print(value.inspect(), file=out)

    def eval_add(self, token):
        rhs = self._pop_operand(token, Integer)
        lhs = self._pop_operand(token, Integer)
        result = rhs.value + lhs.value
        if not fits_int64(result):
            raise self._error(
                IntegerOverflow,
                f"'add' result {result} does not fit in 64 bits",
                token,
            )
        self.stack.append(Integer(result))

    def eval_concat(self, token):
        rhs = self._pop_operand(token, String)
        lhs = self._pop_operand(token, String)
        # The first popped string (written first in the source) leads
        self.stack.append(String(rhs.value + lhs.value))

    def _pop_operand(self, token, expected):
        name = token.value.value
        if not self.stack:
            raise self._error(StackUnderflow, f"'{name}' needs two operands", token)
        value = self.stack.pop()
        if not isinstance(value, expected):
            raise self._error(
                MismatchedTypes,
                f"'{name}' expected {expected.__name__.upper()}, got {value.type()}",
                token,
            )
        return value

    def _error(self, error_class, message, token):
        return self.error_reporter.report_error(
            error_class,
            message,
            line=token.line or None,
            column=token.column or None,
            filename=self.filename,
        )


def evaluate(tokens, output=None, filename=None, config=None):
    Evaluator(output, filename, config).evaluate(tokens)
