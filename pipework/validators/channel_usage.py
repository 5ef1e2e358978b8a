"""Compare what parts declare with how channels are wired."""

from ..graph.model import Graph
from .base import ValidationResult


def check_channel_usage(graph: Graph) -> ValidationResult:
    """Check that each channel's endpoints use it in the right direction.

    Declared channel usage is advisory, so mismatches are warnings: the
    source node should write the channel and the destination should read it.

    Args:
        graph: The graph to check.

    Returns:
        ValidationResult with a warning per mismatched endpoint.
    """
    result = ValidationResult()

    with graph.locked():
        for edge in graph.sorted_edges():
            _, written = graph.declared_channels(edge.src)
            read, _ = graph.declared_channels(edge.dst)

            if edge.name not in written:
                result.add_warning(
                    code="CHANNEL_NOT_WRITTEN",
                    message=f"Channel '{edge.name}' is never written by its source '{edge.src}'",
                    node=edge.src,
                    channel=edge.name,
                )
            if edge.name not in read:
                result.add_warning(
                    code="CHANNEL_NOT_READ",
                    message=f"Channel '{edge.name}' is never read by its destination '{edge.dst}'",
                    node=edge.dst,
                    channel=edge.name,
                )

    return result
