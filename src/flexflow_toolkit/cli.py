"""
Module: cli

Purpose:
    Command line entry point. Loads a canvas JSON file, groups its
    elements, and prints or saves the resulting flow layout plan.

Usage:
    flexflow plan canvas.json
    flexflow plan canvas.json --width 400 --output plan.json
    flexflow plan canvas.json --debug-image rows.png --verbose
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from flexflow_toolkit import __version__
from flexflow_toolkit.flow import FlowConfig, FlowError, LayoutSession
from flexflow_toolkit.utils.serialization import SerializationError, load_canvas, plan_to_json, save_plan

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flexflow",
        description="Convert absolutely positioned elements into a row-based flow layout.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan = subparsers.add_parser("plan", help="Group a canvas into rows and emit the layout plan")
    plan.add_argument("canvas", type=Path, help="Canvas JSON file")
    plan.add_argument(
        "--width",
        type=float,
        default=None,
        help="Container width to plan for (default: the canvas container width)",
    )
    plan.add_argument(
        "--threshold",
        type=float,
        default=FlowConfig().compact_threshold,
        help="Widths at or below this are laid out in compact mode (default: %(default)s)",
    )
    plan.add_argument("--output", "-o", type=Path, default=None, help="Write the plan to this file")
    plan.add_argument("--debug-image", type=Path, default=None, help="Save a row overlay image")
    plan.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return parser


def run_plan(args: argparse.Namespace) -> int:
    surface, container_id = load_canvas(args.canvas)
    width = args.width if args.width is not None else surface.container(container_id).width
    config = FlowConfig(compact_threshold=args.threshold)

    session = LayoutSession(container_id, config=config, width=width)
    rows = session.initialize(surface)
    plan = session.convert(surface)

    if args.output:
        save_plan(plan, args.output)
        logger.info(f"Wrote {plan.mode.value} plan with {plan.row_count} rows to {args.output}")
    else:
        print(plan_to_json(plan))

    if args.debug_image:
        # Imported here so planning does not pay for Pillow
        from flexflow_toolkit.utils.visualizer import save_debug_overlay

        container = surface.container(container_id)
        save_debug_overlay(rows, args.debug_image, origin=(container.left, container.top), config=config)
        logger.info(f"Saved row overlay to {args.debug_image}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(message)s",
    )

    try:
        return run_plan(args)
    except FileNotFoundError as e:
        logger.error(f"Canvas not found: {e.filename}")
    except (SerializationError, FlowError) as e:
        logger.error(f"Planning failed: {e}")
    return 1


if __name__ == "__main__":
    sys.exit(main())
