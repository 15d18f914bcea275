"""Worker process evaluating a single expression of a batch."""
from multiprocessing.connection import Connection

from pydantic import BaseModel, ConfigDict, Field

from sequential_calculator.common.errors import InvalidExpressionError
from sequential_calculator.common.logger import logger
from sequential_calculator.common.models import CalculationOutcome
from sequential_calculator.engine.calculator import Calculator


class WorkerProcess(BaseModel):
    """
    Worker process responsible for evaluating one arithmetic expression.

    Lifecycle:
        - Spawned by BatchRunner
        - Receives one expression only
        - Sends a CalculationOutcome payload through a Pipe
        - Terminates immediately after computation
    """

    # Read-only once spawned; Connection is not a pydantic type
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    conn: Connection = Field(..., description="Connection object for sending the outcome back to the runner")
    expression: str = Field(..., description="Single arithmetic expression to evaluate")
    line_number: int = Field(..., ge=1, description="Line number in the input file")

    def evaluate(self) -> CalculationOutcome:
        """
        Evaluate the expression and wrap the result or error in an outcome.

        :return: Outcome for this line
        :rtype: CalculationOutcome
        """
        try:
            result: int = Calculator.calculate(self.expression)
        except InvalidExpressionError as exc:
            logger.error(
                f"👷❌ Worker failed on line {self.line_number}: {exc}\n"
                f"Invalid arithmetic expression, could not evaluate: {self.expression!r}"
            )
            return CalculationOutcome(
                line=self.line_number,
                expression=self.expression,
                error=str(exc),
                error_kind=type(exc).__name__,
            )
        except Exception as exc:
            logger.exception(f"👷💥 Unexpected failure on line {self.line_number}: {self.expression!r}")
            return CalculationOutcome(
                line=self.line_number,
                expression=self.expression,
                error=str(exc) or type(exc).__name__,
                error_kind=type(exc).__name__,
            )

        logger.info(f"👷✅ Worker finished on line {self.line_number}: {result}")
        return CalculationOutcome(line=self.line_number, expression=self.expression, result=result)

    def run(self) -> None:
        """
        Evaluate the expression and send the outcome through the pipe.

        :return: None
        """
        logger.info(f"👷🏁 Worker started on line {self.line_number}: {self.expression}")
        try:
            self.conn.send(self.evaluate().model_dump(exclude_none=True))
        finally:
            # Always close the connection
            self.conn.close()
