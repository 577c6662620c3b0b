"""Evaluation task turning one calculation line into an OperationResult."""
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calculator.common.errors import CalculatorError
from arithmetic_calculator.common.logger import logger
from arithmetic_calculator.common.operations import OperationRequest, OperationResult
from arithmetic_calculator.common.parser import ExpressionParser


class EvaluationTask(BaseModel):
    """
    Task responsible for evaluating a single calculation.

    Lifecycle:
        - Created by the session for every line that is not the exit command
        - Evaluates the calculation exactly once
        - Converts calculation errors into an OperationResult instead of raising
    """

    # Make the Pydantic instance immutable (read-only) for safety
    model_config = ConfigDict(frozen=True)

    request: OperationRequest = Field(..., description="Calculation submitted by the user")
    iteration: int = Field(..., ge=1, description="Loop iteration the calculation was read in")

    def run(self) -> OperationResult:
        """
        Evaluate the calculation and wrap the value or the error.

        :return: Outcome of the evaluation
        :rtype: OperationResult
        """
        expression: str = self.request.expression
        logger.debug(f"🧮🏁 Evaluating #{self.iteration}: {expression!r}")

        result: Union[float, None] = None

        try:
            result = ExpressionParser.evaluate(expression)
        except CalculatorError as exc:
            logger.info(f"🧮❌ Calculation #{self.iteration} failed ({exc.kind}): {exc}")
            return OperationResult(expression=expression, error=str(exc), error_kind=exc.kind)

        logger.info(f"🧮✅ Calculation #{self.iteration}: {expression} = {result}")
        return OperationResult(expression=expression, result=result)
