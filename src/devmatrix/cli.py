"""Command-line entry point: `devmatrix target` and `devmatrix supported-devices`."""

from __future__ import annotations

import argparse
import logging
import sys

from devmatrix.errors import DevmatrixError, OutputWriteError
from devmatrix.project.config import resolve_target
from devmatrix.project.root import find_project_root
from devmatrix.render.color import Color
from devmatrix.render.matrix import supported_devices

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devmatrix",
        description="Report firmware build target and supported devices",
    )
    parser.add_argument(
        "--color",
        default=Color.AUTO.value,
        choices=[c.value for c in Color],
        help="When to use terminal styling (default: auto)",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=["debug", "info", "warning", "error"],
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("target", help="Print the configured build target triple")
    sub.add_parser(
        "supported-devices",
        help="Print the device x probe compatibility table",
    )
    sub.add_parser("serve", help="Run the MCP tool server over stdio")
    return parser


def _print_line(text: str) -> None:
    try:
        sys.stdout.write(f"{text}\n")
        sys.stdout.flush()
    except OSError as e:
        raise OutputWriteError(f"Failed to write output: {e}") from e


def run(args: argparse.Namespace) -> int:
    """Dispatch a parsed command. Returns the exit code."""
    if args.command == "target":
        root = find_project_root()
        _print_line(resolve_target(root))
        return 0
    if args.command == "supported-devices":
        supported_devices(Color(args.color))
        return 0
    if args.command == "serve":
        from devmatrix.server import mcp

        logger.info("devmatrix MCP server starting")
        mcp.run()
        return 0
    raise AssertionError(f"Unhandled command {args.command!r}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    try:
        return run(args)
    except DevmatrixError as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
