"""sensormaker pipeline and command line entry point.

Loads a sensor schema file, generates the project next to it, and turns any
failure into a one-time report on stderr followed by the failure's exit code.

Usage::

    sensormaker sensors/temperature.json
    python -m sensormaker.pipeline sensors/temperature.json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn, Optional, Sequence

from sensormaker.config import GeneratorConfig
from sensormaker.errors import ExitCode, SensorMakerError, UsageError
from sensormaker.scaffolder import GenerationResult, ProjectGenerator
from sensormaker.schema import load_schema
from sensormaker.utils import (
    print_error,
    print_notice,
    print_success,
    print_summary_table,
    print_usage,
)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------


class SensorPipeline:
    """Schema file in, project artifacts out.

    The project root is the directory containing the schema file.
    """

    def __init__(self, config: GeneratorConfig | None = None) -> None:
        self.config = config or GeneratorConfig()

    def run(self, schema_path: str | Path) -> GenerationResult:
        """Load *schema_path* and generate its project.

        Raises:
            SensorMakerError: On any usage, schema, render or filesystem
                failure.
        """
        path = Path(schema_path)
        schema = load_schema(path)
        generator = ProjectGenerator(schema, self.config)
        return generator.generate(path.parent)


# ---------------------------------------------------------------------------
# Error reporting
# ---------------------------------------------------------------------------


def report_and_exit(error: SensorMakerError) -> NoReturn:
    """Print *error* with the usage reminder and exit with its code."""
    print_error(error.summary)
    if error.detail:
        print_notice(error.detail)
    print_usage()
    sys.exit(int(error.code))


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


class _ArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that reports bad command lines as ``UsageError``."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="sensormaker",
        description="Generate a sensor project from a JSON sensor schema.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "The project is generated in the directory that contains the schema.\n"
            "Existing files are backed up to <file>.<epoch-millis>.bak first.\n"
        ),
    )
    parser.add_argument(
        "schema",
        help="Path to the sensor schema JSON file",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``sensormaker`` and ``python -m sensormaker.pipeline``."""
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
        result = SensorPipeline().run(args.schema)
    except SensorMakerError as exc:
        report_and_exit(exc)
    except Exception as exc:
        # Unexpected collaborator failure: still a single, coded report.
        report_and_exit(SensorMakerError(f"{type(exc).__name__}: {exc}", code=ExitCode.SCHEMA_PARSE))

    print_summary_table(result.as_summary(), title="Generated sensor project")
    print_success(f"Generated {len(result.artifacts)} artifacts in {result.root}")


if __name__ == "__main__":
    main()
