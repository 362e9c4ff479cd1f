"""Errors raised while reading, parsing and computing a calculator session."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for intcalc; carries the offending value when there is one."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value}"
        return self.message


class InvalidInputError(CalculatorError):
    """A raw line is neither a 64-bit integer nor an operation name, as required."""

    def __init__(self, line: str, reason: str = "invalid input") -> None:
        super().__init__(reason, line)
        self.line = line
        self.reason = reason


class InputStreamError(CalculatorError):
    """The line source failed or ended before both operands and an operation were read."""

    def __init__(self, message: str = "Failed to read given input!") -> None:
        super().__init__(message)


class DivisionByZeroError(CalculatorError):
    """Division or Modulo with a zero second operand has no defined result."""

    def __init__(self, dividend: int) -> None:
        super().__init__("Division by zero", dividend)
        self.numerator = dividend


class OverflowError(CalculatorError):
    """An operation's result falls outside the signed 64-bit range."""

    def __init__(self, operation: str, *operands: int) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class OutOfRangeError(CalculatorError):
    """An integer lies outside the inclusive bounds it was checked against, usually int64."""

    def __init__(self, value: int, min_val: int | None = None, max_val: int | None = None) -> None:
        super().__init__(f"Value out of range [{min_val}, {max_val}]", value)
        self.min_val = min_val
        self.max_val = max_val
