"""Variable table for bangscript. A SymbolTable lives exactly as long as the Session that owns it."""

from dataclasses import dataclass
from enum import Enum

from bangscript.lang.error import UndefinedVariable


class ValueType(Enum):
    STRING = "string"
    NUMBER = "number"


@dataclass(frozen=True)
class Variable:
    """A declared value. raw_value is always the literal source text: numbers are only normalized when rendered."""
    value_type: ValueType
    raw_value: str

    def render(self):
        """Returns the text a print statement outputs for this variable."""
        if self.value_type is ValueType.NUMBER:
            return self.raw_value.lstrip("0") or "0"  # raw_value is only digits
        return self.raw_value


class SymbolTable:
    """Maps names to Variables. Redeclaring a name silently replaces the old Variable."""

    def __init__(self):
        self._variables = {}

    def declare(self, name, value_type, raw_value):
        self._variables[name] = Variable(value_type, raw_value)
        return self._variables[name]

    def lookup(self, name, expr=None):
        """Returns the Variable bound to name. expr is the statement text used for the error message."""
        try:
            return self._variables[name]
        except KeyError:
            raise UndefinedVariable(name, expr) from None

    def __contains__(self, name):
        return name in self._variables

    def __len__(self):
        return len(self._variables)

    def __iter__(self):
        return iter(self._variables)

    def __repr__(self):
        return f"SymbolTable({self._variables})"
