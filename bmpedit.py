#!/usr/bin/env python3
"""
Command line editor for 24-bit BMP images.

Usage:
    bmpedit list                                  # List operations and menu codes
    bmpedit info <file.bmp>                       # Show header fields and row layout
    bmpedit apply <file.bmp> grayscale            # Write <file>_grayscale.bmp
    bmpedit apply <file.bmp> lighten --scale 0.5  # Operations taking a scale factor
    bmpedit apply <file.bmp> rotate --turns 3     # Three clockwise quarter turns
    bmpedit apply <file.bmp> enlarge --xscale 2 --yscale 3
    bmpedit apply <file.bmp> 3 7 --name bw        # Menu codes, chained, custom label
"""

import argparse
import logging
import sys

from cli.apply import add_apply_subparser
from cli.info import add_info_subparser
from cli.operations import add_list_subparser
from logging_utils import add_logging_args, configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bmpedit",
        description="Decode a 24-bit bitmap, transform it and save the result",
    )
    add_logging_args(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_apply_subparser(subparsers)
    add_info_subparser(subparsers)
    add_list_subparser(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cmd = getattr(args, "_cmd", None)
    if args.command is None or cmd is None:
        parser.print_help()
        return 1
    return cmd(args)


if __name__ == "__main__":
    sys.exit(main())
