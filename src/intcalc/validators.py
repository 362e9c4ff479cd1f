"""Input validation and parsing for raw lines read from the user."""

import re

from intcalc.exceptions import InvalidInputError, OutOfRangeError
from intcalc.operations import INT64_MAX, INT64_MIN, Operation, trim

# Optional sign followed by ASCII digits only; int() alone would also accept
# underscores and non-ASCII digits.
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def validate_range(
    value: int,
    min_val: int | None = None,
    max_val: int | None = None,
) -> int:
    """
    Validate that a value is within an inclusive range.

    Args:
        value: The value to validate
        min_val: Minimum allowed value (None for no limit)
        max_val: Maximum allowed value (None for no limit)

    Returns:
        The validated value

    Raises:
        OutOfRangeError: If value is outside the range
    """
    if min_val is not None and value < min_val:
        raise OutOfRangeError(value, min_val, max_val)

    if max_val is not None and value > max_val:
        raise OutOfRangeError(value, min_val, max_val)

    return value


def validate_int64(value: int) -> int:
    """Validate that value fits in a signed 64-bit integer."""
    return validate_range(value, min_val=INT64_MIN, max_val=INT64_MAX)


def parse_operand(raw: str) -> int:
    """
    Parse a raw line into a 64-bit integer operand.

    Args:
        raw: The line as read, possibly including its line terminator

    Returns:
        The parsed integer

    Raises:
        InvalidInputError: If the stripped line is not an integer or does
            not fit in 64 bits
    """
    text = trim(raw)
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidInputError(raw, "Expected an integer")

    try:
        return validate_int64(int(text))
    except OutOfRangeError as e:
        raise InvalidInputError(raw, "Integer does not fit in 64 bits") from e


def parse_operation(raw: str) -> Operation:
    """
    Parse a raw line into an Operation.

    Raises:
        InvalidInputError: If the line does not name a known operation
    """
    operation = Operation.from_name(raw)
    if operation is None:
        raise InvalidInputError(raw, "Unknown operation")
    return operation


def validate_numeric(raw: str) -> bool:
    """Return True if raw holds a signed 64-bit integer once stripped."""
    try:
        parse_operand(raw)
    except InvalidInputError:
        return False
    return True


def validate_operation(raw: str) -> bool:
    """Return True if raw names one of the operations once stripped and upper-cased."""
    return Operation.from_name(raw) is not None
