"""
Command-line entrypoint.

Two modes:
- ``sequential-calculator "9 + 3 * 2"`` evaluates a single expression and prints the result
- ``sequential-calculator --file ops.txt`` evaluates every line of a file or archive
  with worker processes and writes the results next to the input
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError, model_validator

from sequential_calculator.batch.runner import BatchRunner
from sequential_calculator.common.errors import InvalidExpressionError
from sequential_calculator.engine.calculator import Calculator


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str, optional
        Single expression to evaluate.
    file_path : FilePath, optional
        Path to a file or archive containing one expression per line.
    output : Path, optional
        Where to write batch results.
    max_workers : int, optional
        Maximum number of simultaneous worker processes.
    """

    expression: Optional[str] = None
    file_path: Optional[FilePath] = None
    output: Optional[Path] = None
    max_workers: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def exactly_one_input(self) -> "CliArgs":
        """Ensure either an expression or a file is given, and batch options only come with --file."""
        if (self.expression is None) == (self.file_path is None):
            raise ValueError("Provide either an expression or --file, not both")
        if self.file_path is None and (self.output is not None or self.max_workers is not None):
            raise ValueError("--output and --max-workers can only be used with --file")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="sequential-calculator",
        description="Evaluate integer arithmetic strictly left to right",
    )

    parser.add_argument(
        "expression",
        nargs="?",
        help='Expression to evaluate, e.g. "9 + 3 * 2"',
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="file_path",
        help="File (.txt, .zip, .tar.xz, .7z) with one expression per line",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Results file for --file (default: <input>_results.txt)",
    )
    parser.add_argument(
        "-w",
        "--max-workers",
        type=int,
        help="Maximum simultaneous worker processes for --file",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct the results file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.tar.xz
    output: resources/operations_tar_xz_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    # Path.stem only drops the last suffix
    base_name: str = input_path.name[: -len("".join(input_path.suffixes))] if input_path.suffixes else input_path.name
    suffix_safe: str = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{base_name}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    :param argv: Arguments to parse, defaults to ``sys.argv[1:]``

    :return: Process exit code
    :rtype: int
    """
    cli_args = parse_args(argv)

    if cli_args.file_path is None:
        try:
            print(Calculator.calculate(cli_args.expression))
        except InvalidExpressionError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
        return 0

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)
    runner = BatchRunner(
        input_file=input_path,
        output_file=output_path,
        max_workers=cli_args.max_workers,
    )
    try:
        runner.run()
    except (ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
