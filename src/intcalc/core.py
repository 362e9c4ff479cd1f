"""Interactive calculator session driven as a state machine over input lines."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import TYPE_CHECKING

from intcalc.exceptions import CalculatorError, InputStreamError, InvalidInputError
from intcalc.operations import OPERATION_CHOICES, Operation
from intcalc.validators import parse_operand, parse_operation

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from typing import TextIO

logger = logging.getLogger(__name__)


class SessionState(Enum):
    AWAITING_OPERAND1 = auto()
    AWAITING_OPERAND2 = auto()
    AWAITING_OPERATION = auto()
    READY = auto()


PROMPTS = {
    SessionState.AWAITING_OPERAND1: "Please enter your first number!",
    SessionState.AWAITING_OPERAND2: "Please enter your second number!",
    SessionState.AWAITING_OPERATION: (
        f"Please enter your intedend operation! Your choices are {OPERATION_CHOICES}"
    ),
}

REPROMPTS = {
    SessionState.AWAITING_OPERAND1: (
        "Please enter your first number! Ensure it is a numberic value"
    ),
    SessionState.AWAITING_OPERAND2: (
        "Please enter your second number! Ensure it is a numberic value"
    ),
    SessionState.AWAITING_OPERATION: (
        f"Please enter your intedend operation again! Your choices are {OPERATION_CHOICES}"
    ),
}


@dataclass(frozen=True)
class Session:
    """
    Immutable snapshot of what has been accepted so far.

    A session starts in AWAITING_OPERAND1 and only ever moves forward:
    each accepted line fills the next field and advances the state.

    Example:
        >>> s = Session()
        >>> for line in ["7\\n", "2\\n", "division\\n"]:
        ...     s = advance(s, line).session
        >>> s.result()
        3
    """

    state: SessionState = SessionState.AWAITING_OPERAND1
    first: int | None = None
    second: int | None = None
    operation: Operation | None = None

    @property
    def is_ready(self) -> bool:
        return self.state is SessionState.READY

    def result(self) -> int:
        """
        Apply the chosen operation to both operands.

        Raises:
            CalculatorError: If the session is not READY
            DivisionByZeroError: For Division or Modulo with a zero second operand
            OverflowError: If the result does not fit in 64 bits
        """
        if not self.is_ready:
            raise CalculatorError("Session is not ready", self.state.name)
        return self.operation.apply(self.first, self.second)

    def __str__(self) -> str:
        return f"Session({self.state.name}, first={self.first}, second={self.second}, operation={self.operation})"


@dataclass(frozen=True)
class Transition:
    """Outcome of feeding one line to a session."""

    session: Session
    accepted: bool


def prompt_for(state: SessionState) -> str:
    return PROMPTS[state]


def reprompt_for(state: SessionState) -> str:
    return REPROMPTS[state]


def advance(session: Session, line: str) -> Transition:
    """
    Feed one raw line to the session.

    A rejected line leaves the session unchanged; the caller is expected
    to re-prompt and feed the next line.

    Raises:
        CalculatorError: If the session is already READY
    """
    try:
        if session.state is SessionState.AWAITING_OPERAND1:
            nxt = replace(session, state=SessionState.AWAITING_OPERAND2, first=parse_operand(line))
        elif session.state is SessionState.AWAITING_OPERAND2:
            nxt = replace(session, state=SessionState.AWAITING_OPERATION, second=parse_operand(line))
        elif session.state is SessionState.AWAITING_OPERATION:
            nxt = replace(session, state=SessionState.READY, operation=parse_operation(line))
        else:
            raise CalculatorError("Session already has all its input", line)
    except InvalidInputError as e:
        logger.debug("Rejected input in %s: %s", session.state.name, e)
        return Transition(session, accepted=False)

    logger.debug("Accepted input, %s -> %s", session.state.name, nxt.state.name)
    return Transition(nxt, accepted=True)


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from a text stream until it is exhausted."""
    yield from iter(stream.readline, "")


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise InputStreamError() from None
    except OSError as e:
        raise InputStreamError() from e


def run_session(lines: Iterable[str], write: Callable[[str], None]) -> int:
    """
    Run a full calculator session.

    Prompts through write, pulls lines until both operands and an
    operation have been accepted, then writes and returns the result.

    Args:
        lines: Any source of raw lines (stdin, a list, a file)
        write: Receives each protocol line without a terminator

    Returns:
        The computed result

    Raises:
        InputStreamError: If lines is exhausted or fails before the session is READY
        DivisionByZeroError: For Division or Modulo by zero
        OverflowError: If the result does not fit in 64 bits
    """
    source = iter(lines)
    session = Session()
    write(prompt_for(session.state))

    while not session.is_ready:
        transition = advance(session, _next_line(source))
        session = transition.session
        if not transition.accepted:
            write(reprompt_for(session.state))
        elif not session.is_ready:
            write(prompt_for(session.state))

    result = session.result()
    logger.debug("Computed %s", session)
    write(f"Your result is {result}")
    return result
