"""Document-level checks run before a graph is built."""

from ..parts.registry import FACTORIES
from ..schema.identifiers import is_identifier
from ..schema.models import GraphDocument
from .base import ValidationResult


def check_reference_integrity(document: GraphDocument) -> ValidationResult:
    """Check that every edge endpoint names a node in the document.

    Args:
        document: The parsed document.

    Returns:
        ValidationResult with errors for dangling endpoints.
    """
    result = ValidationResult()
    node_names = {name.strip() for name in document.get_node_names()}

    for edge_name, edge in document.edges.items():
        for end, node_name in (("src", edge.src), ("dst", edge.dst)):
            if node_name.strip() not in node_names:
                result.add_error(
                    code="UNDEFINED_NODE_REF",
                    message=f"Channel {end} references undefined node '{node_name}'",
                    node=node_name,
                    channel=edge_name,
                    end=end,
                )

    return result


def check_identifiers(document: GraphDocument) -> ValidationResult:
    """Check names, capacities and part types in a document.

    Args:
        document: The parsed document.

    Returns:
        ValidationResult with errors for each malformed entry.
    """
    result = ValidationResult()

    for node_name, node in document.nodes.items():
        if not node_name.strip():
            result.add_error(
                code="EMPTY_NODE_NAME",
                message="Node name must not be empty",
            )
        if node.part_type not in FACTORIES:
            result.add_error(
                code="UNKNOWN_PART_TYPE",
                message=f"Node uses unknown part type '{node.part_type}'",
                node=node_name,
                part_type=node.part_type,
            )

    for edge_name, edge in document.edges.items():
        if not is_identifier(edge_name):
            result.add_error(
                code="INVALID_CHANNEL_NAME",
                message=f"Channel name '{edge_name}' is not a valid identifier",
                channel=edge_name,
            )
        if edge.cap < 0:
            result.add_error(
                code="NEGATIVE_CAPACITY",
                message=f"Channel capacity must be non-negative, got {edge.cap}",
                channel=edge_name,
                cap=edge.cap,
            )

    return result
