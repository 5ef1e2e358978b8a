"""Immutable text renderings handed to external tools."""

from dataclasses import dataclass

from ..graph.codec import dumps_graph
from ..graph.model import Graph
from ..schema.loader import DocumentFormat
from .dot import render_dot
from .golang import render_go


@dataclass(frozen=True)
class Snapshot:
    """Document, diagram and program text rendered from one graph state."""

    document: str
    dot: str
    go: str


def render_snapshot(graph: Graph, format: DocumentFormat = "json") -> Snapshot:
    """Render everything under one hold of the graph's lock.

    Slow collaborators (gofmt, dot, go build) work on the snapshot, never on
    the live graph.
    """
    with graph.locked():
        return Snapshot(
            document=dumps_graph(graph, format),
            dot=render_dot(graph),
            go=render_go(graph),
        )
