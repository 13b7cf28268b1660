# src/stackscript/object.py

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def fits_int64(value):
    return INT64_MIN <= value <= INT64_MAX


class Object:
    def inspect(self):
        raise NotImplementedError("Subclasses must implement this method")


class Integer(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return str(self.value)
    def type(self): return "INTEGER"
    def __eq__(self, other): return isinstance(other, Integer) and other.value == self.value
    def __repr__(self): return f"Integer({self.value})"


class String(Object):
    def __init__(self, value): self.value = value
    def inspect(self): return self.value
    def type(self): return "STRING"
    def __str__(self): return self.value
    def __eq__(self, other): return isinstance(other, String) and other.value == self.value
    def __repr__(self): return f"String({self.value!r})"
