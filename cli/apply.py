"""Apply command CLI parsing and control flow."""

from __future__ import annotations

import argparse
import logging

from bitmap import BitmapError, read_bitmap, write_bitmap
from naming import default_label, derive_output_path
from transforms import Pipeline, TransformParams, build_steps, get_operation

logger = logging.getLogger(__name__)


def _operation_arg(value: str) -> str:
    try:
        return get_operation(value).name
    except BitmapError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _unit_scale_arg(value: str) -> float:
    try:
        scale = float(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from exc
    if not 0.0 <= scale <= 1.0:
        raise argparse.ArgumentTypeError(f"scale factor must be between 0 and 1, got {value}")
    return scale


def _positive_int_arg(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not a whole number: {value!r}") from exc
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a whole number greater than 0, got {value}")
    return number


def add_apply_subparser(subparsers: argparse._SubParsersAction) -> None:
    apply_parser = subparsers.add_parser(
        "apply",
        help="Apply one or more transformations to a bitmap",
    )
    apply_parser.add_argument("source", help="Source bitmap (24-bit uncompressed)")
    apply_parser.add_argument(
        "operations",
        nargs="+",
        type=_operation_arg,
        metavar="OPERATION",
        help="Operation name or menu code, applied in order (see 'bmpedit list')",
    )
    apply_parser.add_argument(
        "--scale",
        type=_unit_scale_arg,
        help="Scale factor between 0 and 1 (clarendon, lighten, darken)",
    )
    apply_parser.add_argument(
        "--turns",
        type=int,
        default=1,
        help="Number of clockwise 90 degree turns for rotate (default: 1)",
    )
    apply_parser.add_argument(
        "--degrees",
        type=int,
        help="Clockwise rotation angle for rotate; must be a multiple of 90",
    )
    apply_parser.add_argument(
        "--xscale",
        type=_positive_int_arg,
        default=1,
        help="Width enlargement factor for enlarge (default: 1)",
    )
    apply_parser.add_argument(
        "--yscale",
        type=_positive_int_arg,
        default=1,
        help="Height enlargement factor for enlarge (default: 1)",
    )
    output_group = apply_parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "--name",
        dest="label",
        help="Label appended to the source name: <source>_<label>.bmp",
    )
    output_group.add_argument(
        "-o", "--output",
        help="Explicit output path",
    )
    apply_parser.add_argument(
        "--artifacts",
        metavar="DIR",
        help="Save every intermediate result as a numbered bitmap in DIR",
    )
    apply_parser.set_defaults(_cmd=cmd_apply)


def cmd_apply(args: argparse.Namespace) -> int:
    params = TransformParams(
        scale=args.scale,
        turns=args.turns,
        degrees=args.degrees,
        xscale=args.xscale,
        yscale=args.yscale,
    )

    try:
        steps = build_steps(args.operations, params)
        if args.output:
            output = args.output
        else:
            output = derive_output_path(args.source, args.label or default_label(args.operations))

        grid = read_bitmap(args.source)
        logger.info("Loaded %s (%dx%d)", args.source, grid.width, grid.height)

        result = Pipeline(steps=steps).run(grid, artifact_dir=args.artifacts)
        for step in result.steps:
            logger.info(
                "  %-20s %-8s %dx%d",
                step.name,
                step.status,
                step.grid.width,
                step.grid.height,
            )

        size = write_bitmap(output, result.final)
    except BitmapError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Saved %s (%d bytes)", output, size)
    if result.rejected:
        logger.warning("%d step(s) rejected; their input was kept", len(result.rejected))
        return 1
    return 0
