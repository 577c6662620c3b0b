"""Unit tests for EvaluationTask."""
import logging

from pydantic import ValidationError
import pytest

from arithmetic_calculator.common.operations import OperationRequest
from arithmetic_calculator.session.task import EvaluationTask


def make_task(expr: str, iteration: int = 1) -> EvaluationTask:
    return EvaluationTask(request=OperationRequest(expression=expr), iteration=iteration)


@pytest.mark.parametrize(
    "expr,expected",
    [
        ("2 + 3", 5.0),
        ("10 - 4", 6.0),
        ("3 * 4", 12.0),
        ("8 / 2", 4.0),
    ],
)
def test_task_returns_result_for_valid_expression(expr: str, expected: float) -> None:
    """Task wraps the computed value for valid calculations."""
    outcome = make_task(expr).run()

    assert outcome.expression == expr
    assert outcome.result == expected
    assert outcome.error is None


@pytest.mark.parametrize(
    "expr,kind,message",
    [
        ("2 +", "malformed_input", "Format should be: number operator number"),
        ("abc + 1", "invalid_operand", "'abc' is not a valid number"),
        ("7 % 2", "unsupported_operator", "Unsupported operator: %"),
        ("10 / 0", "division_by_zero", "Cannot divide by zero!"),
    ],
)
def test_task_returns_error_for_invalid_expression(expr: str, kind: str, message: str) -> None:
    """Task converts calculation errors into an error result instead of raising."""
    outcome = make_task(expr, iteration=2).run()

    assert outcome.expression == expr
    assert outcome.result is None
    assert outcome.error == message
    assert outcome.error_kind == kind


def test_task_logs_outcome(caplog: pytest.LogCaptureFixture) -> None:
    """Task logs every evaluation with its iteration number."""
    caplog.set_level(logging.DEBUG, logger="arithmetic_calculator")

    make_task("5 + 3", iteration=4).run()
    make_task("5 % 3", iteration=5).run()

    assert "#4" in caplog.text
    assert "5 + 3 = 8.0" in caplog.text
    assert "#5 failed (unsupported_operator)" in caplog.text


def test_task_rejects_invalid_iteration() -> None:
    """Pydantic validation prevents creating a task with iteration 0."""
    with pytest.raises(ValidationError):
        make_task("1 + 1", iteration=0)
