"""Exceptions raised while evaluating calculations or reading input."""


class CalculatorError(ValueError):
    """Base class for every recoverable evaluation error."""

    kind: str = "calculator_error"


class MalformedInputError(CalculatorError):
    """The input line does not have the shape ``number operator number``."""

    kind = "malformed_input"

    def __init__(self) -> None:
        super().__init__("Format should be: number operator number")


class InvalidOperandError(CalculatorError):
    """An operand token could not be parsed as a number."""

    kind = "invalid_operand"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"'{token}' is not a valid number")


class UnsupportedOperatorError(CalculatorError):
    """The operator token is not one of ``+ - * /``."""

    kind = "unsupported_operator"

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unsupported operator: {token}")


class DivisionByZeroError(CalculatorError):
    kind = "division_by_zero"

    def __init__(self) -> None:
        super().__init__("Cannot divide by zero!")


class InputStreamError(OSError):
    """
    The input stream ended or could not be read.

    Not a CalculatorError: it is fatal to the session rather than local to one evaluation.
    """
