"""Runtime values for Lispy.

Every runtime entity is one of six variants deriving from `Value`: Number,
Error, Symbol, Function, SExpr and QExpr. Values form strict trees; a value is
owned by exactly one container at a time. Anything that stores a value a
second time (the environment, list construction from a lookup) stores a
`copy()`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from lispy.builtin.base import Builtin


I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class Value(ABC):
    """Base class of the closed set of Lispy values."""

    __slots__ = ()

    TYPE_NAME = "Unknown"

    @abstractmethod
    def copy(self) -> Value:
        """Deep copy; list forms copy every cell."""

    @classmethod
    def type_name(cls) -> str:
        return cls.TYPE_NAME

    def __str__(self) -> str:
        # Lazy import to avoid circular imports
        from lispy.printer import to_string
        return to_string(self)


@dataclass(slots=True)
class Number(Value):
    TYPE_NAME = "Number"

    value: int

    def copy(self) -> Number:
        return Number(self.value)


class ErrorKind(Enum):
    INVALID_NUMBER = "InvalidNumber"
    UNBOUND_SYMBOL = "UnboundSymbol"
    TYPE_MISMATCH = "TypeMismatch"
    ARITY_MISMATCH = "ArityMismatch"
    DIVISION_BY_ZERO = "DivisionByZero"
    EMPTY_LIST = "EmptyListAccess"
    NOT_A_FUNCTION = "NotAFunction"
    UNKNOWN_FUNCTION = "UnknownFunction"


@dataclass(slots=True)
class Error(Value):
    """A first-class error.

    The fields are kept structured (offending function, argument index,
    expected vs. actual) and only turned into text by `message`, which the
    printer calls when the error is rendered.
    """

    TYPE_NAME = "Error"

    kind: ErrorKind
    function: str | None = None
    index: int | None = None
    expected: str | int | None = None
    actual: str | int | None = None
    detail: str | None = None

    def copy(self) -> Error:
        return Error(
            self.kind, self.function, self.index, self.expected, self.actual, self.detail
        )

    @property
    def message(self) -> str:
        prefix = f"{self.detail} " if self.detail else ""
        match self.kind:
            case ErrorKind.INVALID_NUMBER:
                return "Invalid number"
            case ErrorKind.UNBOUND_SYMBOL:
                return f"unbound symbol '{self.detail}'!"
            case ErrorKind.TYPE_MISMATCH:
                return (
                    f"{prefix}Function '{self.function}' passed incorrect type for "
                    f"argument {self.index}! Got {self.actual}, Expected {self.expected}"
                )
            case ErrorKind.ARITY_MISMATCH:
                return (
                    f"{prefix}Function '{self.function}' passed incorrect number of "
                    f"arguments! Got {self.actual}, Expected {self.expected}"
                )
            case ErrorKind.DIVISION_BY_ZERO:
                return "Division by zero!"
            case ErrorKind.EMPTY_LIST:
                return f"Function '{self.function}' passed {{}}!"
            case ErrorKind.NOT_A_FUNCTION:
                return "First element is not a function"
            case ErrorKind.UNKNOWN_FUNCTION:
                return f"Unknown Function '{self.detail}'!"
        return prefix.strip()


@dataclass(slots=True)
class Symbol(Value):
    TYPE_NAME = "Symbol"

    name: str

    def copy(self) -> Symbol:
        return Symbol(self.name)


@dataclass(slots=True, eq=False)
class Function(Value):
    """A native builtin. Copies share the builtin, which holds no state."""

    TYPE_NAME = "Function"

    builtin: Builtin

    def copy(self) -> Function:
        return Function(self.builtin)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Function) and self.builtin is other.builtin


@dataclass(slots=True)
class ListValue(Value):
    """Shared behaviour of the two list forms."""

    cells: list[Value] = field(default_factory=list)

    def copy(self) -> ListValue:
        return type(self)([cell.copy() for cell in self.cells])

    def add(self, value: Value) -> ListValue:
        self.cells.append(value)
        return self

    def pop(self, i: int = 0) -> Value:
        """Remove and return the cell at `i`; the caller now owns it."""
        return self.cells.pop(i)

    def take(self, i: int) -> Value:
        """Pop cell `i` and release everything else."""
        x = self.cells.pop(i)
        self.cells.clear()
        return x

    def clear(self) -> None:
        self.cells.clear()

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __getitem__(self, i: int) -> Value:
        return self.cells[i]


@dataclass(slots=True)
class SExpr(ListValue):
    TYPE_NAME = "S-Expression"


@dataclass(slots=True)
class QExpr(ListValue):
    TYPE_NAME = "Q-Expression"


def sexpr(*cells: Value) -> SExpr:
    return SExpr(list(cells))


def qexpr(*cells: Value) -> QExpr:
    return QExpr(list(cells))
