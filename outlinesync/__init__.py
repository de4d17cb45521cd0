"""outlinesync: a live, cursor-synchronized outline view for editors.

The engine keeps one outline tree per document (TreeStore), renders it
into box-drawing lines (render_outline), resolves the cursor to a
breadcrumb (locate_path), and mirrors the result into a display surface
with minimal writes (ViewSynchronizer). NotificationAdapter wires these to
outline and cursor events.
"""

from outlinesync.config import Config, load_config
from outlinesync.core.errors import OutlineSyncError
from outlinesync.outline import (
    ElementKind,
    OutlineNode,
    TreeStore,
    locate_path,
    render_outline,
)
from outlinesync.session import NotificationAdapter
from outlinesync.view import DisplaySurface, MemorySurface, ViewSynchronizer

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DisplaySurface",
    "ElementKind",
    "MemorySurface",
    "NotificationAdapter",
    "OutlineNode",
    "OutlineSyncError",
    "TreeStore",
    "ViewSynchronizer",
    "__version__",
    "load_config",
    "locate_path",
    "render_outline",
]
