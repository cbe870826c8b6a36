"""CLI entrypoint for checking a single npm package name."""

from __future__ import annotations

import argparse
import json
import sys

from .core import parse
from .errors import ConfigError, Violation
from .report import build_report
from .settings import OUTPUT_FORMATS, resolve_output_format

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_CONFIG_ERROR = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "name",
        help="Package name to validate; put '--' before names starting with '-'",
    )
    parser.add_argument(
        "--format",
        dest="output_format",
        type=str,
        default=None,
        help=f"Output format ({', '.join(OUTPUT_FORMATS)}); defaults to text",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        output_format = resolve_output_format(args.output_format)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    outcome = parse(args.name)

    if output_format == "json":
        print(json.dumps(build_report(args.name, outcome), indent=2))
    elif isinstance(outcome, Violation):
        print(f"ERROR: {args.name}: {outcome.description}", file=sys.stderr)
    else:
        print(f"{outcome} is a valid package name")

    return EXIT_INVALID if isinstance(outcome, Violation) else EXIT_VALID


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
