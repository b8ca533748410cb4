"""Command-line entry point: terraform validate JSON on stdin, RDFormat on stdout."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from pydantic import ValidationError

from tfv2rd import __version__
from tfv2rd.converter.paths import make_path_resolver
from tfv2rd.converter.pipeline import ConversionPipeline
from tfv2rd.models.errors import Tfv2rdError
from tfv2rd.output import OutputFormat, write_output
from tfv2rd.settings import Settings

logger = logging.getLogger("tfv2rd.cli")


def _output_format(value: str) -> OutputFormat:
    try:
        return OutputFormat.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tfv2rd",
        description="Converts terraform validate JSON output to Reviewdog Diagnostic Format.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-b", "--basedir",
        help="Converts paths to be relative to this base directory. Requires --workdir.",
    )
    parser.add_argument(
        "-w", "--workdir",
        help="Working directory terraform validate was run in, for path conversion.",
    )
    parser.add_argument(
        "-s", "--skip-errors",
        action=argparse.BooleanOptionalAction,
        default=settings.skip_errors,
        help=(
            "Omit diagnostics in the output if errors are encountered converting them "
            "to Reviewdog format, instead of exiting with an error."
        ),
    )
    parser.add_argument(
        "-f", "--format",
        type=_output_format,
        default=settings.output_format,
        help=(
            "Format for output, either rdjsonl (one JSON Diagnostic object per line, "
            "default) or rdjson (a single RdJSON object)."
        ),
    )
    parser.add_argument(
        "--source",
        default=settings.source,
        help='Value for "source" of the diagnostics to report in the output.',
    )
    parser.add_argument(
        "--result-source",
        default=None,
        help='Value for "source" of the rdjson result object. Defaults to --source.',
    )
    return parser


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one conversion and return the process exit status."""
    try:
        settings = Settings()
    except ValidationError as exc:
        print(f"tfv2rd: error: invalid settings: {exc}", file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level.upper())

    parser = build_parser(settings)
    args = parser.parse_args(argv)
    if args.basedir is not None and args.workdir is None:
        parser.error("the following arguments are required when --basedir is given: -w/--workdir")

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        resolver = make_path_resolver(args.workdir, args.basedir)
        pipeline = ConversionPipeline(
            resolver,
            skip_errors=args.skip_errors,
            source=args.source,
            result_source=args.result_source if args.result_source is not None else args.source,
        )
        result = pipeline.convert_stream(stdin)
    except Tfv2rdError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"{parser.prog}: error: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "Converted %d diagnostic(s), %d dropped (overall severity %s)",
        len(result.diagnostics), len(result.warnings), result.severity,
    )
    write_output(result, args.format, stdout)
    return 0


def run() -> None:
    """Console-script wrapper around ``main``."""
    sys.exit(main())
