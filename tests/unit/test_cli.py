"""Tests for the typer command line interface."""

import pytest
from typer.testing import CliRunner

from intcalc.cli import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCalcCommand:
    """Tests for the calc command."""

    def test_prints_result(self, runner):
        result = runner.invoke(app, ["calc"], input="6\n7\nMultiplication\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Please enter your first number!",
            "Please enter your second number!",
            "Please enter your intedend operation! Your choices are "
            "Addition Subtraction Multiplication Division Modulo ",
            "Your result is 42",
        ]

    def test_reprompts_on_invalid_number(self, runner):
        result = runner.invoke(app, ["calc"], input="abc\n5\n1\naddition\n")
        assert result.exit_code == 0
        assert "Ensure it is a numberic value" in result.stdout
        assert "Your result is 6" in result.stdout

    def test_end_of_input_exits_nonzero(self, runner):
        result = runner.invoke(app, ["calc"], input="1\n")
        assert result.exit_code == 1
        assert "Failed to read given input!" in result.output

    def test_division_by_zero_exits_nonzero(self, runner):
        result = runner.invoke(app, ["calc"], input="10\n0\nDivision\n")
        assert result.exit_code == 1
        assert "Division by zero" in result.output
        assert "Your result is" not in result.output

    def test_overflow_exits_nonzero(self, runner):
        result = runner.invoke(app, ["calc"], input="9223372036854775807\n1\nAddition\n")
        assert result.exit_code == 1
        assert "Overflow in addition" in result.output
        assert "Your result is" not in result.output

    def test_non_ascii_operation_is_reprompted(self, runner):
        result = runner.invoke(app, ["calc"], input="5\n2\n\u017fubtraction\nSubtraction\n")
        assert result.exit_code == 0
        assert "intedend operation again!" in result.stdout
        assert "Your result is 3" in result.stdout

    def test_log_level_from_environment(self, runner):
        result = runner.invoke(
            app, ["calc"], input="1\n1\nAddition\n", env={"INTCALC_LOG_LEVEL": "error"}
        )
        assert result.exit_code == 0

    def test_invalid_log_level(self, runner):
        result = runner.invoke(app, ["--log-level", "chatty", "calc"], input="")
        assert result.exit_code == 2
        assert "Invalid log level" in result.output


class TestGuessCommand:
    """Tests for the guess command."""

    def test_echoes_guess(self, runner):
        result = runner.invoke(app, ["guess"], input="42\n")
        assert result.exit_code == 0
        assert result.stdout.splitlines() == [
            "Guess the number!",
            "Please input your guess.",
            "You guessed: 42",
        ]

    def test_echoes_without_validation(self, runner):
        result = runner.invoke(app, ["guess"], input="not a number\n")
        assert "You guessed: not a number" in result.stdout

    def test_empty_input_exits_nonzero(self, runner):
        result = runner.invoke(app, ["guess"], input="")
        assert result.exit_code == 1
