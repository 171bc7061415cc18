from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lispy.types.value import Error


class LispyError(Exception):
    """ Base class for all Lispy errors"""


class LispyBuiltinError(LispyError, ABC):
    """ Raised inside a builtin; converted to an Error value before leaving it"""

    @abstractmethod
    def to_value(self) -> Error:
        ...


class LispyArityError(LispyBuiltinError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, function: str, actual: int, expected: int | str, detail: str | None = None):
        super().__init__(f"{function}: got {actual} arguments, expected {expected}")
        self.function = function
        self.actual = actual
        self.expected = expected
        self.detail = detail

    def to_value(self) -> Error:
        from lispy.types.value import Error, ErrorKind
        return Error(
            ErrorKind.ARITY_MISMATCH,
            function=self.function,
            expected=self.expected,
            actual=self.actual,
            detail=self.detail,
        )


class LispyTypeError(LispyBuiltinError):
    """ Raised when the types of arguments passed to a function are incorrect"""

    def __init__(
        self, function: str, index: int, actual: str, expected: str, detail: str | None = None
    ):
        super().__init__(f"{function}: argument {index} is {actual}, expected {expected}")
        self.function = function
        self.index = index
        self.actual = actual
        self.expected = expected
        self.detail = detail

    def to_value(self) -> Error:
        from lispy.types.value import Error, ErrorKind
        return Error(
            ErrorKind.TYPE_MISMATCH,
            function=self.function,
            index=self.index,
            expected=self.expected,
            actual=self.actual,
            detail=self.detail,
        )


class LispyEmptyListError(LispyBuiltinError):
    """ Raised when head, tail or init is applied to {}"""

    def __init__(self, function: str):
        super().__init__(f"{function}: passed {{}}")
        self.function = function

    def to_value(self) -> Error:
        from lispy.types.value import Error, ErrorKind
        return Error(ErrorKind.EMPTY_LIST, function=self.function)


class LispyDivisionByZero(LispyBuiltinError):
    """ Raised when / or % meets a zero divisor"""

    def __init__(self, function: str):
        super().__init__(f"{function}: division by zero")
        self.function = function

    def to_value(self) -> Error:
        from lispy.types.value import Error, ErrorKind
        return Error(ErrorKind.DIVISION_BY_ZERO, function=self.function)


class LispyUnknownFunction(LispyBuiltinError):
    """ Raised when a builtin is requested by a name that was never registered"""

    def __init__(self, name: str):
        super().__init__(f"unknown function {name}")
        self.name = name

    def to_value(self) -> Error:
        from lispy.types.value import Error, ErrorKind
        return Error(ErrorKind.UNKNOWN_FUNCTION, detail=self.name)


class LispySyntaxError(LispyError):
    """ Raised by the parser when the input does not match the grammar"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 1, column: int = 1):
        super().__init__(f"{filename}:{line}:{column}: {message}")
        self.message = message
        self.filename = filename
        self.line = line
        self.column = column
