"""List command: show the operations table."""

from __future__ import annotations

import argparse

from transforms import OPERATIONS


def add_list_subparser(subparsers: argparse._SubParsersAction) -> None:
    list_parser = subparsers.add_parser(
        "list",
        help="List available operations and their menu codes",
    )
    list_parser.set_defaults(_cmd=cmd_list)


def format_operations() -> list[str]:
    lines = [f"{'Code':<5} {'Name':<14} {'Parameters':<16} Summary"]
    for op in OPERATIONS:
        params = ", ".join(op.parameters) or "-"
        lines.append(f"{op.code:<5} {op.name:<14} {params:<16} {op.summary}")
    return lines


def cmd_list(args: argparse.Namespace) -> int:
    for line in format_operations():
        print(line)
    return 0
