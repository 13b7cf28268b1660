# src/stackscript/lexer.py
import logging

from .stack_token import (
    Token, KEYWORDS, LPAREN, RPAREN, INSTRUCTION, INT, STRING, EOF,
)
from .object import fits_int64
from .config import config as default_config
from .error_reporter import (
    get_error_reporter, UnknownToken, UnterminatedString, IntegerOverflow,
)

logger = logging.getLogger(__name__)

_WHITESPACE = frozenset(" \t\n\r\x0c")


class Lexer:
    def __init__(self, source_code, filename="<stdin>", config=None):
        self.input = source_code
        self.position = 0
        self.read_position = 0
        self.ch = ""
        self.line = 1
        self.column = 0
        self.filename = filename
        self.config = config or default_config

        # Register source with error reporter
        self.error_reporter = get_error_reporter()
        self.error_reporter.register_source(filename, source_code)

        self.read_char()

    def read_char(self):
        if self.ch == "\n":
            self.line += 1
            self.column = 0

        if self.read_position >= len(self.input):
            self.ch = ""
        else:
            self.ch = self.input[self.read_position]

        self.position = self.read_position
        self.read_position += 1
        self.column += 1

    def peek_char(self):
        if self.read_position >= len(self.input):
            return ""
        return self.input[self.read_position]

    def tokenize(self):
        """Consume the whole input and return its tokens, without the EOF marker."""
        tokens = []
        tok = self.next_token()
        while tok.type != EOF:
            tokens.append(tok)
            tok = self.next_token()
        logger.debug("%s: %d tokens", self.filename, len(tokens))
        return tokens

    def next_token(self):
        self.skip_whitespace()

        current_line = self.line
        current_column = self.column

        if self.ch == "(":
            tok = Token(LPAREN, self.ch)
        elif self.ch == ")":
            tok = Token(RPAREN, self.ch)
        elif self.ch == '"':
            literal, contents = self.read_string(current_line, current_column)
            return Token(STRING, literal, contents, current_line, current_column)
        elif self.ch == "":
            tok = Token(EOF, "")
        elif self.is_letter(self.ch):
            literal = self.read_identifier()
            opcode = KEYWORDS.get(literal)
            if opcode is None:
                raise self._error(
                    UnknownToken,
                    f"Unknown identifier '{literal}'",
                    current_line, current_column,
                    suggestion="Valid instructions are: " + ", ".join(sorted(KEYWORDS)),
                )
            return Token(INSTRUCTION, literal, opcode, current_line, current_column)
        elif self.is_digit(self.ch):
            literal = self.read_number()
            digits = literal.lstrip("0") or "0"
            # int() refuses very long digit strings; anything past 19 digits overflows anyway
            if len(digits) > 19 or not fits_int64(int(digits)):
                raise self._error(
                    IntegerOverflow,
                    f"Integer literal {_shorten(literal)} does not fit in 64 bits",
                    current_line, current_column,
                )
            return Token(INT, literal, int(digits), current_line, current_column)
        else:
            char_desc = f"'{self.ch}'" if self.ch.isprintable() else f"'\\x{ord(self.ch):02x}'"
            raise self._error(
                UnknownToken,
                f"Unexpected character {char_desc}",
                current_line, current_column,
            )

        tok.line = current_line
        tok.column = current_column
        self.read_char()
        return tok

    def _error(self, error_class, message, line, column, suggestion=None):
        return self.error_reporter.report_error(
            error_class,
            message,
            line=line,
            column=column,
            filename=self.filename,
            suggestion=suggestion,
        )

    def read_string(self, start_line, start_column):
        """Read a double-quoted literal verbatim. Returns (literal, contents)."""
        start_position = self.position
        self.read_char()
        result = []
        while self.ch != '"':
            if self.ch == "":
                if self.config.strict_strings:
                    raise self._error(
                        UnterminatedString,
                        "Unterminated string literal",
                        start_line, start_column,
                        suggestion='Add a closing quote " to terminate the string.',
                    )
                logger.warning(
                    "%s:%d:%d: unterminated string literal runs to end of input",
                    self.filename, start_line, start_column,
                )
                return self.input[start_position:], "".join(result)
            result.append(self.ch)
            self.read_char()

        # Closing quote
        self.read_char()
        return self.input[start_position:self.position], "".join(result)

    def read_identifier(self):
        start_position = self.position
        while self.is_letter(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def read_number(self):
        start_position = self.position
        while self.is_digit(self.ch):
            self.read_char()
        return self.input[start_position:self.position]

    def is_letter(self, char):
        return 'a' <= char <= 'z' or 'A' <= char <= 'Z'

    def is_digit(self, char):
        return '0' <= char <= '9'

    def skip_whitespace(self):
        while self.ch in _WHITESPACE:
            self.read_char()


def _shorten(literal, limit=24):
    return literal if len(literal) <= limit else literal[:limit] + "..."


def tokenize(source, filename="<stdin>", config=None):
    return Lexer(source, filename, config).tokenize()
