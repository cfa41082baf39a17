"""Command-line wrapper around the version helpers."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .constants import ExitCodes
from .constraints import composer_to_pear
from .errors import VersionError
from .logging_utils import configure_logging, extra_context, is_debug_enabled
from .models import StabilityLevel
from .parser import normalize, validate_api_stability, validate_release_stability
from .transform import (
    next_pear_version,
    next_version,
    snapshot_version,
    to_branch_qualified,
    to_ticket_description,
)

logger = logging.getLogger(__name__)

STABILITY_CHOICES = [level.value for level in StabilityLevel]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="pear-version",
        description="PEAR version normalization, validation and constraint translation",
        add_help=True,
    )
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        default=None)

    commands = parser.add_subparsers(dest="command", required=True)

    cmd = commands.add_parser("normalize", help="Validate a version and strip a -git suffix")
    cmd.add_argument("version")

    cmd = commands.add_parser("describe", help="Print the ticket description of a version")
    cmd.add_argument("version")
    cmd.add_argument("-b", "--branch",
                     dest="BRANCH",
                     help="Qualify the description with a branch name",
                     default="")

    cmd = commands.add_parser("next", help="Print the version following the given one")
    cmd.add_argument("version")
    cmd.add_argument("--pear",
                     dest="PEAR",
                     help="Increment the stability number instead of appending -git",
                     action="store_true")

    cmd = commands.add_parser("check-stability", help="Validate a version against stability levels")
    cmd.add_argument("version")
    cmd.add_argument("--release",
                     dest="RELEASE",
                     help="Declared release stability",
                     choices=STABILITY_CHOICES)
    cmd.add_argument("--api",
                     dest="API",
                     help="Declared api stability",
                     choices=STABILITY_CHOICES)

    cmd = commands.add_parser("constraint", help="Translate a Composer constraint to PEAR bounds")
    cmd.add_argument("expression")

    cmd = commands.add_parser("snapshot", help="Print the snapshot version for a release")
    cmd.add_argument("version")

    args = parser.parse_args(argv)
    if args.command == "check-stability" and not (args.RELEASE or args.API):
        parser.error("check-stability requires --release and/or --api")
    return args


def run(args: argparse.Namespace) -> str:
    """Execute the selected command and return its output line."""
    if args.command == "normalize":
        return normalize(args.version)
    if args.command == "describe":
        return to_branch_qualified(to_ticket_description(args.version), args.BRANCH)
    if args.command == "next":
        if args.PEAR:
            return next_pear_version(args.version)
        return next_version(args.version)
    if args.command == "check-stability":
        if args.RELEASE:
            validate_release_stability(args.version, args.RELEASE)
        if args.API:
            validate_api_stability(args.version, args.API)
        return "OK"
    if args.command == "constraint":
        return json.dumps(composer_to_pear(args.expression).to_dict(), sort_keys=True)
    if args.command == "snapshot":
        return snapshot_version(normalize(args.version))
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action=args.command),
        )

    try:
        output = run(args)
    except VersionError as exc:
        logger.error("%s", exc)
        sys.exit(ExitCodes.INVALID_INPUT.value)
    print(output)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
