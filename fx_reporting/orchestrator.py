"""Command line entrypoint for the settlement reports."""
from __future__ import annotations

import argparse
import sys
from typing import List

import yaml
from jsonschema import ValidationError

from .config import load_config
from .errors import InstructionError
from .instruction import Instruction
from .logging import configure_logging, get_logger
from .presentation import TextPresenter, render_json
from .reporting_engine import GlobalReport, generate_global_report
from .sample_data import load_instructions, sample_instructions

logger = get_logger(__name__)


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print settlement and entity ranking reports")
    parser.add_argument(
        "--instructions",
        default=None,
        help="YAML or JSON instruction file; the built-in sample set when omitted",
    )
    parser.add_argument("--config", default=None, help="Reporting config YAML")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("--log-level", default=None, help="Overrides the configured log level")
    return parser.parse_args(argv)


def run(args: argparse.Namespace | None = None) -> GlobalReport:
    args = args or parse_args()
    config = load_config(args.config)
    configure_logging(args.log_level or config.log_level)

    instructions: List[Instruction]
    if args.instructions:
        instructions = load_instructions(args.instructions)
    else:
        instructions = sample_instructions()

    calendar = config.calendar()
    if args.format == "json":
        report = generate_global_report(instructions, calendar=calendar)
        print(render_json(report, config.reporting_currency))
    else:
        presenter = TextPresenter(currency=config.reporting_currency)
        report = generate_global_report(instructions, presenter=presenter, calendar=calendar)
    return report


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        run(args)
    except (InstructionError, ValidationError, yaml.YAMLError, OSError) as exc:
        logger.error("report_failed", error=str(exc))
        print(f"Unable to generate the report: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
