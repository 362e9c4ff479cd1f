"""CLI for the intcalc tutorial programs.

Usage:
    intcalc calc                       # Interactive integer calculator
    intcalc guess                      # Guess-the-number stub
    intcalc --log-level DEBUG calc     # Trace accepted and rejected input on stderr
"""

from __future__ import annotations

import logging
import sys

import typer
from rich.console import Console
from rich.markup import escape

from intcalc.core import read_lines, run_session
from intcalc.exceptions import CalculatorError, InputStreamError

app = typer.Typer(
    name="intcalc",
    help="Beginner tutorial programs: an integer calculator and a guessing stub",
    no_args_is_help=True,
)
console = Console(stderr=True)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@app.callback()
def main(
    log_level: str = typer.Option(
        "WARNING", "--log-level", "-l", envvar="INTCALC_LOG_LEVEL", help="Logging level for stderr"
    ),
) -> None:
    """Configure logging before any command runs."""
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        console.print(f"[red]Invalid log level: {escape(log_level)}[/red]")
        raise typer.Exit(2)
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


@app.command("calc")
def cmd_calc() -> None:
    """Read two integers and an operation from stdin, print the result."""
    try:
        run_session(read_lines(sys.stdin), typer.echo)
    except InputStreamError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(1) from e
    except CalculatorError as e:
        console.print(f"[red]Undefined result. {escape(str(e))}[/red]")
        raise typer.Exit(1) from e


@app.command("guess")
def cmd_guess() -> None:
    """Ask for a guess and echo it back."""
    typer.echo("Guess the number!")
    typer.echo("Please input your guess.")

    try:
        guess = next(read_lines(sys.stdin))
    except (StopIteration, OSError) as e:
        console.print("[red]Failed to read line[/red]")
        raise typer.Exit(1) from e

    guess = guess.rstrip("\r\n")
    typer.echo(f"You guessed: {guess}")
