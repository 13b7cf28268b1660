# src/stackscript/error_reporter.py
"""
Error types and reporting for StackScript.

Every failure of the tokenizer or the evaluator is raised as a subclass of
:class:`StackScriptError`. Nothing recovers locally: the first error raised is
the outcome of the run.

The :class:`ErrorReporter` remembers the source text of every program it has
seen so an error can later be rendered with the offending line and a caret
pointing at the column::

    demo.stk:1:7: UnknownToken: Unknown identifier 'prnt'
        print prnt 5
              ^
      hint: Valid instructions are: add, concat, print
"""

from rich.console import Console
from rich.text import Text


class StackScriptError(Exception):
    """Base class for all errors raised while running a StackScript program."""
    kind = "StackScriptError"

    def __init__(self, message, line=None, column=None, filename=None, suggestion=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename
        self.suggestion = suggestion

    @property
    def location(self):
        if self.line is None:
            return self.filename or ""
        loc = f"{self.line}:{self.column}" if self.column is not None else str(self.line)
        return f"{self.filename}:{loc}" if self.filename else loc

    def __str__(self):
        if self.location:
            return f"{self.location}: {self.kind}: {self.message}"
        return f"{self.kind}: {self.message}"


class UnknownToken(StackScriptError):
    kind = "UnknownToken"


class UnterminatedString(UnknownToken):
    kind = "UnterminatedString"


class MismatchedTypes(StackScriptError):
    kind = "MismatchedTypes"


class EvaluationError(StackScriptError):
    kind = "EvaluationError"


class StackUnderflow(EvaluationError):
    kind = "StackUnderflow"


class IntegerOverflow(StackScriptError):
    kind = "IntegerOverflow"


class ErrorReporter:
    def __init__(self):
        self.sources = {}

    def register_source(self, filename, source):
        self.sources[filename] = source

    def source_line(self, filename, line):
        source = self.sources.get(filename)
        if source is None or line is None:
            return None
        lines = source.splitlines()
        if 1 <= line <= len(lines):
            return lines[line - 1]
        return None

    def report_error(self, error_class, message, line=None, column=None,
                     filename=None, suggestion=None):
        """Build (but do not raise) an error of ``error_class``."""
        return error_class(message, line=line, column=column,
                           filename=filename, suggestion=suggestion)

    def format_error(self, error, show_suggestion=True):
        parts = [str(error)]
        text = self.source_line(error.filename, error.line)
        if text is not None:
            parts.append("    " + text.expandtabs())
            if error.column is not None:
                # Width of the text before the column, with tabs expanded like the line above
                prefix = text[:error.column - 1].expandtabs()
                parts.append("    " + " " * len(prefix) + "^")
        if show_suggestion and error.suggestion:
            parts.append(f"  hint: {error.suggestion}")
        return "\n".join(parts)


_reporter = ErrorReporter()


def get_error_reporter():
    return _reporter


def print_error(error, console=None, show_suggestion=True):
    console = console or Console(stderr=True)
    rendered = _reporter.format_error(error, show_suggestion=show_suggestion)
    console.print(Text(rendered, style="bold red"))
