"""Argument parsing for the outlinesync CLI."""

import argparse
from pathlib import Path


def _cursor(value: str) -> tuple[int, int]:
    """Parse a LINE:COL cursor argument."""
    line, sep, col = value.partition(":")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected LINE:COL, got {value!r}")
    try:
        return int(line), int(col)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers in LINE:COL, got {value!r}") from None


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add --config and --verbose to a parser."""
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Config file (default: ~/.outlinesync/config.json merged with ./.outlinesync/config.json)",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="outlinesync",
        description="Render and replay live document outlines",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser(
        "render",
        help="Render an outline notification as a tree",
    )
    render_parser.add_argument("notification", type=Path, help="JSON file with {uri, outline}")
    render_parser.add_argument(
        "--line-numbers",
        action="store_true",
        default=None,
        help="Append the declaration line to each node",
    )
    render_parser.add_argument(
        "--detail",
        action="store_true",
        help="Show parameters and return types next to each name",
    )
    render_parser.add_argument(
        "--cursor",
        type=_cursor,
        default=None,
        metavar="LINE:COL",
        help="Resolve and print the breadcrumb for a cursor (host coordinates)",
    )
    add_common_args(render_parser)

    replay_parser = subparsers.add_parser(
        "replay",
        help="Feed a JSON-lines event log through the adapter and print the view",
    )
    replay_parser.add_argument("events", type=Path, help="JSON-lines event file")
    add_common_args(replay_parser)

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    return build_parser().parse_args(argv)
