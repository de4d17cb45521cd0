"""Terminal display helpers built on rich."""

from outlinesync.display.console import get_console, set_console
from outlinesync.display.status import ConsoleStatus
from outlinesync.display.tree import styled_outline

__all__ = ["ConsoleStatus", "get_console", "set_console", "styled_outline"]
