"""Info command: show header fields of a bitmap."""

from __future__ import annotations

import argparse
import logging

from bitmap import BitmapError, read_header

logger = logging.getLogger(__name__)


def add_info_subparser(subparsers: argparse._SubParsersAction) -> None:
    info_parser = subparsers.add_parser(
        "info",
        help="Show header fields and row layout of a bitmap",
    )
    info_parser.add_argument("source", help="Bitmap file to inspect")
    info_parser.set_defaults(_cmd=cmd_info)


def cmd_info(args: argparse.Namespace) -> int:
    try:
        info = read_header(args.source)
    except BitmapError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("%s", args.source)
    for key, value in info.summary().items():
        logger.info("  %-20s %s", key, value)
    return 0
