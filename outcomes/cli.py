#!/usr/bin/env python3
"""
Command line front end for the outcomes safe constructors.

Prints the rendered outcome of a constructor for the given input, e.g.

    outcomes traffic-light red
    outcomes person Fred 32
    outcomes mean 1 2 10
    outcomes batch
"""

import argparse
import logging
import sys
from typing import List, Optional

from outcomes.application.services import (
    collect_errors,
    create_person_and_show,
    create_valid_people,
    mk_traffic_light_then_show,
    safe_mean,
)
from outcomes.utils.config_manager import OutcomesConfig, get_config
from outcomes.utils.error_manager import ConfigurationError
from outcomes.utils.logging_utils import setup_logger

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser.

    Returns:
        argparse.ArgumentParser: Parser with one sub-command per constructor
    """
    parser = argparse.ArgumentParser(
        prog="outcomes",
        description="Run the outcomes safe constructors on command line input",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Path to a JSON or YAML configuration file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides the configuration)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    light_parser = subparsers.add_parser(
        "traffic-light", help="Build a traffic light from its name"
    )
    light_parser.add_argument("text", help="Light name: red, green or yellow")

    person_parser = subparsers.add_parser(
        "person", help="Validate a name and an age and build a person"
    )
    person_parser.add_argument("name", help="Person's name")
    person_parser.add_argument("age", help="Person's age as text")

    mean_parser = subparsers.add_parser("mean", help="Mean of a list of integers")
    mean_parser.add_argument("numbers", type=int, nargs="*", help="Integers to average")

    subparsers.add_parser(
        "batch", help="Process the built-in list of (name, age) pairs"
    )

    return parser


def _run_command(args: argparse.Namespace) -> List[str]:
    """Evaluate the selected sub-command and return the lines to print."""
    if args.command == "traffic-light":
        return [mk_traffic_light_then_show(args.text)]

    if args.command == "person":
        return [create_person_and_show(args.name, args.age)]

    if args.command == "mean":
        return [
            safe_mean(args.numbers).fold(
                lambda: "no mean for an empty sequence",
                lambda mean: str(mean),
            )
        ]

    if args.command == "batch":
        lines = ["Valid people:"]
        lines.extend(f"  {person.name} is {person.age}" for person in create_valid_people())
        lines.append("Errors:")
        lines.extend(f"  {error.message}" for error in collect_errors())
        return lines

    raise ValueError(f"Unknown command: {args.command}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the outcomes CLI."""
    args = build_parser().parse_args(argv)

    try:
        settings = OutcomesConfig.from_file(args.config) if args.config else get_config()
    except ConfigurationError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    setup_logger(
        "outcomes",
        level=args.log_level,
        debug_mode=settings.get_debug_mode("outcomes"),
        logging_config=settings.logging,
    )
    logger.debug(f"Running command {args.command}")

    for line in _run_command(args):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
