"""
Integer calculator tutorial package.

Reads two signed 64-bit integers and an operation name line by line,
re-prompting until each line is valid, and prints the result.
"""

from intcalc.core import Session, SessionState, Transition, advance, run_session
from intcalc.exceptions import (
    CalculatorError,
    DivisionByZeroError,
    InputStreamError,
    InvalidInputError,
    OutOfRangeError,
    OverflowError,
)
from intcalc.operations import (
    INT64_MAX,
    INT64_MIN,
    Operation,
    add,
    dispatch,
    divide,
    modulo,
    multiply,
    subtract,
)
from intcalc.validators import (
    parse_operand,
    parse_operation,
    validate_int64,
    validate_numeric,
    validate_operation,
    validate_range,
)

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "CalculatorError",
    "DivisionByZeroError",
    "InputStreamError",
    "InvalidInputError",
    "Operation",
    "OutOfRangeError",
    "OverflowError",
    "Session",
    "SessionState",
    "Transition",
    "add",
    "advance",
    "dispatch",
    "divide",
    "modulo",
    "multiply",
    "parse_operand",
    "parse_operation",
    "run_session",
    "subtract",
    "validate_int64",
    "validate_numeric",
    "validate_operation",
    "validate_range",
]

__version__ = "0.1.0"
