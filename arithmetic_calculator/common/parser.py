"""Parse and evaluate single binary arithmetic operations."""
from collections.abc import Callable as ABCCallable
import operator
from typing import Callable, List, Optional

from arithmetic_calculator.common.errors import (
    DivisionByZeroError,
    InvalidOperandError,
    MalformedInputError,
    UnsupportedOperatorError,
)


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]

# Mapping of operator symbols to their function
OPERATORS: dict[str, OperatorFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

# Number of tokens in a calculation: operand, operator, operand
EXPECTED_TOKEN_COUNT: int = 3


class ExpressionParser:
    """
    Parse and evaluate a calculation of the form ``number operator number``.

    Design constraints:
        - No eval(), no dynamic code execution
        - No I/O and no logging, so every call is a pure computation
        - Deterministic: the same input always gives the same result or error

    Algorithm:
        1. Tokenize based on whitespace
        2. Check there are exactly three tokens
        3. Parse the first operand, then the second one
        4. Dispatch on the operator token

    Examples:
        - ``5 + 3`` evaluates to ``8.0``
        - ``10 / 0`` raises DivisionByZeroError
        - ``abc + 1`` raises InvalidOperandError for ``abc``
    """

    @staticmethod
    def tokenize(expr: str) -> List[str]:
        """
        Split a calculation into tokens.

        Tokens must be space-separated (e.g., "5 + 3"); runs of whitespace count as one separator.

        :param str expr: Calculation as a string

        :return: List of tokens
        :rtype: List[str]
        """
        return expr.split()

    @staticmethod
    def parse_operand(token: str) -> float:
        """
        Parse an operand token as a floating-point number.

        Accepts whatever Python's float() accepts (sign, fractional part, exponent, inf, nan).

        :param str token: Operand token

        :return: Parsed number
        :rtype: float
        :raises InvalidOperandError: If the token is not a number
        """
        try:
            return float(token)
        except ValueError:
            raise InvalidOperandError(token) from None

    @staticmethod
    def evaluate(expr: str) -> float:
        """
        Evaluate a calculation.

        Both operands are parsed before the operator is checked, and the first operand
        is reported when both are invalid.

        :param str expr: Calculation string

        :return: Computed result as float
        :rtype: float
        :raises MalformedInputError: If there are not exactly three tokens
        :raises InvalidOperandError: If an operand is not a number
        :raises UnsupportedOperatorError: If the operator is not one of + - * /
        :raises DivisionByZeroError: If dividing by zero (or negative zero)
        """
        tokens: List[str] = ExpressionParser.tokenize(expr)

        if len(tokens) != EXPECTED_TOKEN_COUNT:
            raise MalformedInputError()

        left_token, op_token, right_token = tokens
        left: float = ExpressionParser.parse_operand(left_token)
        right: float = ExpressionParser.parse_operand(right_token)

        operation: Optional[OperatorFn] = OPERATORS.get(op_token)
        if operation is None:
            raise UnsupportedOperatorError(op_token)

        # Exact comparison: -0.0 == 0.0 is True
        if op_token == "/" and right == 0.0:
            raise DivisionByZeroError()

        return operation(left, right)
