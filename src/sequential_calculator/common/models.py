"""Pydantic models for parsed expressions and batch outcomes."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sequential_calculator.common.operations import Operation


class ParsedExpression(BaseModel):
    """Operands and the operations between them, in textual order."""

    model_config = ConfigDict(frozen=True)

    operands: List[int] = Field(..., min_length=2, description="Operands in order of appearance")
    operations: List[Operation] = Field(..., min_length=1, description="Operation queue, consumed front to back")

    @model_validator(mode="after")
    def one_operation_between_each_operand(self) -> "ParsedExpression":
        """Ensure there is exactly one operation fewer than operands."""
        if len(self.operands) != len(self.operations) + 1:
            raise ValueError(
                f"Expected {len(self.operations) + 1} operands for {len(self.operations)} operations, "
                f"got {len(self.operands)}"
            )
        return self


class CalculationOutcome(BaseModel):
    """Result or error produced for a single line of a batch."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="Line number in the input file")
    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[int] = Field(default=None, description="Evaluated integer result")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")
    error_kind: Optional[str] = Field(default=None, description="Name of the error class")

    @model_validator(mode="after")
    def exactly_one_of_result_or_error(self) -> "CalculationOutcome":
        """Ensure an outcome carries either a result or an error, never both."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' or 'error' must be set")
        return self

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def to_line(self) -> str:
        """
        Format the outcome as a line of the results file.

        :return: ``"<expr> = <result>"`` or ``"<expr> -> ERROR: <error>"``
        :rtype: str
        """
        if self.succeeded:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
