"""Integer arithmetic operations with 64-bit overflow protection."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from intcalc.exceptions import DivisionByZeroError, OverflowError

if TYPE_CHECKING:
    from collections.abc import Callable

# Signed 64-bit bounds
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Unicode White_Space. str.strip() with no argument also drops the
# U+001C..U+001F separators, which are not whitespace here.
WHITESPACE = "\t\n\x0b\x0c\r \x85\xa0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000"


def trim(text: str) -> str:
    """Strip surrounding whitespace, including the line terminator."""
    return text.strip(WHITESPACE)


def _checked(operation: str, result: int, a: int, b: int) -> int:
    if result < INT64_MIN or result > INT64_MAX:
        raise OverflowError(operation, a, b)
    return result


def add(a: int, b: int) -> int:
    """
    Add two integers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, 0) == a

    Raises:
        OverflowError: If the sum does not fit in 64 bits
    """
    return _checked("addition", a + b, a, b)


def subtract(a: int, b: int) -> int:
    """
    Subtract b from a.

    Properties:
        - Identity: subtract(a, 0) == a
        - Self-inverse: subtract(a, a) == 0

    Raises:
        OverflowError: If the difference does not fit in 64 bits
    """
    return _checked("subtraction", a - b, a, b)


def multiply(a: int, b: int) -> int:
    """
    Multiply two integers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Identity: multiply(a, 1) == a
        - Zero: multiply(a, 0) == 0

    Raises:
        OverflowError: If the product does not fit in 64 bits
    """
    return _checked("multiplication", a * b, a, b)


def divide(a: int, b: int) -> int:
    """
    Divide a by b, truncating toward zero.

    Python's ``//`` floors, so ``-9 // 2 == -5``; this returns ``-4``.

    Properties:
        - Identity: divide(a, 1) == a
        - Reconstruction: a == divide(a, b) * b + modulo(a, b)

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b, rounded toward zero

    Raises:
        DivisionByZeroError: If b is zero
        OverflowError: If the quotient does not fit in 64 bits (INT64_MIN / -1)
    """
    if b == 0:
        raise DivisionByZeroError(a)

    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient

    return _checked("division", quotient, a, b)


def modulo(a: int, b: int) -> int:
    """
    Calculate the remainder of a divided by b.

    The sign of a non-zero result follows the dividend, matching
    the truncating behaviour of ``divide``.

    Properties:
        - Range: abs(modulo(a, b)) < abs(b)
        - Reconstruction: a == divide(a, b) * b + modulo(a, b)

    Raises:
        DivisionByZeroError: If b is zero
    """
    if b == 0:
        raise DivisionByZeroError(a)

    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


class Operation(Enum):
    """The closed set of operations a user can choose from."""

    ADDITION = "Addition"
    SUBTRACTION = "Subtraction"
    MULTIPLICATION = "Multiplication"
    DIVISION = "Division"
    MODULO = "Modulo"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> Operation | None:
        """Look up an operation by name, ignoring case and surrounding whitespace."""
        text = trim(name)
        # Upper-case ASCII letters only
        if not text.isascii():
            return None
        return cls.__members__.get(text.upper())

    def apply(self, a: int, b: int) -> int:
        return OPERATIONS[self](a, b)


OPERATIONS: dict[Operation, Callable[[int, int], int]] = {
    Operation.ADDITION: add,
    Operation.SUBTRACTION: subtract,
    Operation.MULTIPLICATION: multiply,
    Operation.DIVISION: divide,
    Operation.MODULO: modulo,
}

# Shown to the user when asking for an operation
OPERATION_CHOICES = "".join(f"{op.label} " for op in Operation)


def dispatch(operation_name: str, a: int, b: int) -> int:
    """
    Apply the operation named by operation_name to a and b.

    Names are matched case-insensitively after stripping whitespace.
    An unrecognized name yields 0.

    Example:
        >>> dispatch("  addition\\n", 2, 2)
        4
        >>> dispatch("Bogus", 1, 1)
        0
    """
    operation = Operation.from_name(operation_name)
    if operation is None:
        return 0
    return operation.apply(a, b)
