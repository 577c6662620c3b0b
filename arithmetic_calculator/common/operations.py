"""Pydantic models for calculation requests and results."""
from decimal import Decimal
import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def format_number(value: float) -> str:
    """
    Render a float without scientific notation or a trailing ``.0``.

    Examples: 8.0 -> "8", 2.5 -> "2.5", 1e20 -> "100000000000000000000", -0.0 -> "-0".

    :param float value: Number to render

    :return: Human readable number
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"

    # repr() gives the shortest digits that round-trip, Decimal expands the exponent
    text: str = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


class OperationRequest(BaseModel):
    """Represents a single calculation line submitted by the user."""

    expression: str = Field(..., description="Calculation as typed, e.g. '5 + 3'")


class OperationResult(BaseModel):
    """
    Outcome of one evaluated calculation.

    Exactly one of ``result`` and ``error`` is set; ``error_kind`` accompanies ``error``.
    """

    model_config = ConfigDict(frozen=True)

    expression: str = Field(..., description="Original calculation")
    result: Optional[float] = Field(default=None, description="Computed value on success")
    error: Optional[str] = Field(default=None, description="Error message on failure")
    error_kind: Optional[str] = Field(default=None, description="Error category on failure")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Ensure the result is either a value or an error, never both or neither."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' and 'error' must be set")
        if (self.error is None) != (self.error_kind is None):
            raise ValueError("'error_kind' must be set together with 'error'")
        return self

    @property
    def is_success(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """
        Build the line shown to the user.

        :return: ``Result: <value>`` or ``Error: <message>``
        :rtype: str
        """
        if self.is_success:
            return f"Result: {format_number(self.result)}"
        return f"Error: {self.error}"
