"""Code generation from the graph IR."""

from .dot import render_dot
from .golang import render_go
from .snapshot import Snapshot, render_snapshot

__all__ = ["render_dot", "render_go", "Snapshot", "render_snapshot"]
