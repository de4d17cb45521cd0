"""JSON readers shared by config loading and the CLI.

Three input shapes pass through here:
- config layers and notification files hold one JSON object,
- replay logs hold one JSON object per line (blank lines allowed).

Every failure is raised as LoadError naming the file, and the line for
JSON-lines input.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from outlinesync.core.errors import LoadError

logger = logging.getLogger(__name__)


def _prefix(context: str) -> str:
    return f"{context}: " if context else ""


def read_text(path: Path, context: str = "") -> str:
    """Read a UTF-8 file (BOM tolerated), raising LoadError on failure."""
    try:
        return path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise LoadError(f"{_prefix(context)}File not found: {path}") from None
    except OSError as e:
        raise LoadError(f"{_prefix(context)}Failed to read file {path}: {e}") from e


def parse_object(text: str, source: str, context: str = "") -> dict[str, Any]:
    """Parse one JSON object; ``source`` names it in error messages."""
    try:
        result = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"{_prefix(context)}Invalid JSON in {source}: {e}") from e
    if not isinstance(result, dict):
        raise LoadError(
            f"{_prefix(context)}Expected object in {source}, got {type(result).__name__}"
        )
    return result


def load_json_object(path: Path, context: str = "") -> dict[str, Any]:
    """Load a file holding one JSON object. An empty file loads as ``{}``."""
    text = read_text(path, context).strip()
    if not text:
        return {}
    return parse_object(text, str(path), context)


def load_config_layer(path: Path) -> dict[str, Any] | None:
    """Load one optional config layer, or None if the file does not exist."""
    if not path.is_file():
        logger.debug("No config layer at %s", path)
        return None
    logger.debug("Loading config layer %s", path)
    return load_json_object(path, "config")


def load_json_lines(path: Path, context: str = "") -> list[dict[str, Any]]:
    """Load a JSON-lines file: one object per non-blank line."""
    records: list[dict[str, Any]] = []
    for number, raw in enumerate(read_text(path, context).splitlines(), start=1):
        if raw.strip():
            records.append(parse_object(raw, f"{path}:{number}", context))
    return records
