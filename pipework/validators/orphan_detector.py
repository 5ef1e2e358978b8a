"""Orphan node detection validator."""

import networkx as nx

from ..graph.model import Graph
from .base import ValidationResult


def check_orphan_nodes(graph: Graph) -> ValidationResult:
    """Check for nodes with no channels.

    An orphan goroutine cannot communicate with the rest of the program,
    which usually means a channel is missing.

    Args:
        graph: The graph to check.

    Returns:
        ValidationResult with warnings for orphan nodes.
    """
    result = ValidationResult()
    if len(graph.nodes) < 2:
        return result

    for node_name in sorted(nx.isolates(graph.as_digraph())):
        result.add_warning(
            code="ORPHAN_NODE",
            message=f"Node '{node_name}' has no channels to other nodes",
            node=node_name,
        )

    return result
