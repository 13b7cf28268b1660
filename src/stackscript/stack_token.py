# src/stackscript/stack_token.py
from enum import Enum

# Token types
LPAREN = "("
RPAREN = ")"
INSTRUCTION = "INSTRUCTION"
INT = "INT"
STRING = "STRING"
EOF = "EOF"


class OpCode(Enum):
    """Instruction set of the stack machine."""
    PRINT = "print"
    ADD = "add"
    CONCAT = "concat"


KEYWORDS = {op.value: op for op in OpCode}


class Token:
    def __init__(self, type, literal, value=None, line=0, column=0):
        self.type = type
        self.literal = literal
        # OpCode for instructions, int for INT, str contents for STRING
        self.value = value
        self.line = line
        self.column = column

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"Token({self.type}, {self.literal!r})"
