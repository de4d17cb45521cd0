"""Display surfaces and the view synchronizer."""

from outlinesync.view.memory import MemorySurface
from outlinesync.view.surface import DisplaySurface, SurfaceSyntax, build_surface_syntax
from outlinesync.view.synchronizer import SynchronizerState, ViewSynchronizer

__all__ = [
    "DisplaySurface",
    "MemorySurface",
    "SurfaceSyntax",
    "SynchronizerState",
    "ViewSynchronizer",
    "build_surface_syntax",
]
