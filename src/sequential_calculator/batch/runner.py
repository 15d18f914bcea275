"""Evaluate a file of expressions using worker processes."""
from multiprocessing import Pipe, Process, cpu_count
from multiprocessing.connection import Connection
from pathlib import Path
from typing import List, NamedTuple, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field, FilePath

from sequential_calculator.batch.source import ExpressionSource
from sequential_calculator.batch.worker import WorkerProcess
from sequential_calculator.common.logger import logger
from sequential_calculator.common.models import CalculationOutcome


class ActiveWorker(NamedTuple):
    """A running worker and the receiving end of its pipe."""

    process: Process
    conn: Connection
    line_number: int
    expression: str


class BatchRunner(BaseModel):
    """
    Evaluate every expression of an input file and write the outcomes to disk.

    Features:
        - Spawns one worker process per expression.
        - Writes each outcome as soon as its worker finishes.
        - Ensures each worker is joined immediately after finishing.
        - Keeps at most ``max_workers`` workers alive (defaults to the CPU core count).
    """

    model_config = ConfigDict(frozen=True)

    input_file: FilePath = Field(..., description="Expressions file or archive")
    output_file: Path = Field(..., description="Path to write computation results")
    max_workers: Optional[int] = Field(default=None, ge=1, description="Maximum simultaneous workers")

    def _spawn_worker(self, expr: str, line_number: int) -> ActiveWorker:
        """
        Spawn a WorkerProcess for the given expression.

        :param str expr: Arithmetic expression
        :param int line_number: Line number of expression in input

        :return: The started process with its parent pipe end
        :rtype: ActiveWorker
        """
        parent_conn, child_conn = Pipe(duplex=False)
        worker = WorkerProcess(conn=child_conn, expression=expr, line_number=line_number)
        process = Process(target=worker.run)
        process.start()
        # Parent keeps only the receiving end
        child_conn.close()
        return ActiveWorker(process, parent_conn, line_number, expr)

    @staticmethod
    def _receive_outcome(worker: ActiveWorker) -> CalculationOutcome:
        """
        Read the outcome sent by a finished worker.

        :param ActiveWorker worker: Finished worker

        :return: Outcome sent by the worker, or an error outcome if it sent nothing
        :rtype: CalculationOutcome
        """
        try:
            return CalculationOutcome(**worker.conn.recv())
        except EOFError:
            worker.process.join()
            message = f"Worker exited with code {worker.process.exitcode} without a result"
            logger.error(f"👷💥 {message} (line {worker.line_number})")
            return CalculationOutcome(
                line=worker.line_number,
                expression=worker.expression,
                error=message,
                error_kind="WorkerCrashed",
            )

    def _collect_finished_workers(
        self,
        active_workers: List[ActiveWorker],
        f_out: TextIO,
        outcomes: List[CalculationOutcome],
    ) -> None:
        """
        Collect outcomes from all finished workers and write them to the output file.

        A worker counts as finished once its payload is readable or the process
        has exited. Finished workers are removed from active_workers.

        :param list active_workers: Running workers
        :param TextIO f_out: Open file handle for writing results
        :param list outcomes: Collected outcomes, appended in completion order
        """
        # Iterate in reverse to safely remove finished workers while iterating
        for i in reversed(range(len(active_workers))):
            worker = active_workers[i]
            if worker.conn.poll(0.01) or not worker.process.is_alive():
                outcome = self._receive_outcome(worker)
                worker.conn.close()
                worker.process.join()
                active_workers.pop(i)

                outcomes.append(outcome)
                # Write output immediately
                f_out.write(f"{outcome.to_line()}\n")
                f_out.flush()

    def run(self) -> List[CalculationOutcome]:
        """
        Evaluate all expressions of the input file.

        Steps:
            1. Load the expressions (plain text or archive).
            2. Spawn worker processes for each expression, respecting max_workers.
            3. Write each outcome to the output file as soon as its worker finishes.

        :return: Outcomes in completion order
        :rtype: List[CalculationOutcome]
        """
        data: List[str] = ExpressionSource(path=self.input_file).expressions()
        logger.info(f"📥 Loaded {len(data)} expressions from {self.input_file}")

        outcomes: List[CalculationOutcome] = []
        with self.output_file.open("w", encoding="utf-8") as f_out:
            if data:
                # Limit number of active workers to the configured maximum or number of expressions
                max_workers: int = min(self.max_workers or cpu_count(), len(data))
                active_workers: List[ActiveWorker] = []

                for line_number, expr in enumerate(data, start=1):
                    # Wait until a worker slot is available
                    while len(active_workers) >= max_workers:
                        self._collect_finished_workers(active_workers, f_out, outcomes)

                    active_workers.append(self._spawn_worker(expr, line_number))

                # Collect remaining active workers
                while active_workers:
                    self._collect_finished_workers(active_workers, f_out, outcomes)

        failed: int = sum(1 for outcome in outcomes if not outcome.succeeded)
        logger.info(f"📤 Wrote {len(outcomes)} results to {self.output_file} ({failed} failed)")
        return outcomes
