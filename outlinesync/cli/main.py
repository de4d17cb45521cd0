"""Entry point for the outlinesync CLI.

Commands:
    outlinesync render NOTIFICATION.json [--line-numbers] [--detail] [--cursor LINE:COL]
    outlinesync replay EVENTS.jsonl
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from rich.markup import escape
from rich.text import Text

from outlinesync.cli.arg_parser import parse_args
from outlinesync.cli.replay import load_events
from outlinesync.config.load_utils import load_json_object
from outlinesync.config.loader import load_config
from outlinesync.config.schema import Config, SurfaceConfig
from outlinesync.core.errors import OutlineSyncError
from outlinesync.display.console import get_console
from outlinesync.display.status import ConsoleStatus
from outlinesync.display.tree import styled_outline
from outlinesync.outline.locate import locate_path, normalize_cursor
from outlinesync.outline.model import OutlineNotification
from outlinesync.outline.render import render_outline
from outlinesync.session.adapter import NotificationAdapter
from outlinesync.session.events import AdapterEvent, OutlineNotificationReceived
from outlinesync.session.interfaces import OpenDocuments
from outlinesync.view.memory import MemorySurface

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Send outlinesync.* log records to stderr."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    package_logger = logging.getLogger("outlinesync")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def cmd_render(args: argparse.Namespace, config: Config) -> int:
    """Render one notification file, optionally with a cursor breadcrumb."""
    notification = OutlineNotification.from_dict(load_json_object(args.notification, "notification"))
    line_numbers = config.outline.line_numbers if args.line_numbers is None else args.line_numbers
    rendered = render_outline(
        notification.outline,
        line_numbers=line_numbers,
        fold_indicators=config.outline.fold_indicators,
        detail=args.detail,
    )

    console = get_console()
    current_line = None
    breadcrumb = None
    if args.cursor is not None:
        line, column = args.cursor
        position = normalize_cursor(
            line,
            column,
            line_origin=config.cursor.line_origin,
            column_origin=config.cursor.column_origin,
        )
        located = locate_path(notification.outline, position)
        span = rendered.span_for(located.node)
        current_line = span.line if span is not None else None
        breadcrumb = located.breadcrumb

    console.print(Text(notification.uri, style="bold"))
    if rendered.lines:
        console.print(styled_outline(rendered, current_line))
    else:
        console.print(Text("(empty outline)", style="dim"))
    if breadcrumb is not None:
        console.print(Text(breadcrumb or "(outside all elements)", style="dim"))
    return 0


async def replay_events(
    events: list[AdapterEvent], config: Config
) -> tuple[NotificationAdapter, MemorySurface | None]:
    """Run events through a fresh adapter backed by in-memory surfaces.

    Every view open creates a new surface, as a real split would be. The
    last one created is returned with the adapter.
    """
    uris = {
        event.params.get("uri")
        for event in events
        if isinstance(event, OutlineNotificationReceived)
    }
    documents = OpenDocuments({uri for uri in uris if isinstance(uri, str)})
    surfaces: list[MemorySurface] = []

    async def surface_factory(surface_config: SurfaceConfig) -> MemorySurface:
        surfaces.append(MemorySurface.from_config(surface_config))
        return surfaces[-1]

    adapter = NotificationAdapter(config, documents, ConsoleStatus(), surface_factory)
    runner = asyncio.create_task(adapter.run())
    for event in events:
        adapter.post(event)
    adapter.stop()
    await runner
    return adapter, surfaces[-1] if surfaces else None


def cmd_replay(args: argparse.Namespace, config: Config) -> int:
    """Replay an event log and print what the outline view ends up showing."""
    events = load_events(args.events)
    logger.debug("Replaying %d events from %s", len(events), args.events)
    adapter, surface = asyncio.run(replay_events(events, config))

    console = get_console()
    active = adapter.synchronizer.state.active_document
    if surface is None or adapter.synchronizer.surface is None or active is None:
        console.print(Text("(outline view not open)", style="dim"))
        return 0

    console.print(Text(active, style="bold"))
    console.print(Text(f"{surface.name} ({surface.position}, {surface.width} columns)", style="dim"))
    doc_state = adapter.store.state(active)
    if doc_state is not None and doc_state.rendered is not None and (
        surface.lines == doc_state.rendered_lines
    ):
        highlight = adapter.synchronizer.state.highlight
        console.print(styled_outline(doc_state.rendered, highlight[0] if highlight else None))
    else:
        for line in surface.lines:
            console.print(Text(line))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    console = get_console()
    try:
        config = load_config(args.config)
        if args.command == "render":
            return cmd_render(args, config)
        return cmd_replay(args, config)
    except OutlineSyncError as e:
        console.print(f"[red]Error:[/] {escape(e.message)}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
