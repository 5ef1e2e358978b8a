"""Detect loops of unbuffered channels."""

import networkx as nx

from ..graph.model import Graph
from .base import ValidationResult


def check_unbuffered_cycles(graph: Graph) -> ValidationResult:
    """Check for cycles made only of unbuffered channels.

    Goroutines in such a loop each block sending to the next, so the cycle
    deadlocks unless the parts interleave sends and receives carefully.

    Args:
        graph: The graph to check.

    Returns:
        ValidationResult with a warning per cycle.
    """
    result = ValidationResult()

    unbuffered = nx.DiGraph()
    unbuffered.add_nodes_from(graph.nodes)
    channels: dict[tuple[str, str], list[str]] = {}
    for edge in graph.sorted_edges():
        if edge.cap == 0:
            unbuffered.add_edge(edge.src, edge.dst)
            channels.setdefault((edge.src, edge.dst), []).append(edge.name)

    cycles = sorted(_rotate(cycle) for cycle in nx.simple_cycles(unbuffered))
    for cycle in cycles:
        hops = list(zip(cycle, cycle[1:] + cycle[:1]))
        names = [channels[hop][0] for hop in hops]
        result.add_warning(
            code="UNBUFFERED_CYCLE",
            message="Unbuffered channels form a cycle: " + " -> ".join(cycle + cycle[:1]),
            node=cycle[0],
            channel=names[0],
            channels=names,
        )

    return result


def _rotate(cycle: list[str]) -> list[str]:
    """Start a cycle at its smallest node name so output is stable."""
    start = cycle.index(min(cycle))
    return cycle[start:] + cycle[:start]
