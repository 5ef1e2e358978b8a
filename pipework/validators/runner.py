"""Lint runner that orchestrates all validators."""

from pathlib import Path

from ..graph.codec import decode_graph
from ..graph.model import Graph
from ..schema.loader import parse_document
from ..schema.models import GraphDocument
from .base import ValidationResult
from .channel_usage import check_channel_usage
from .cycles import check_unbuffered_cycles
from .orphan_detector import check_orphan_nodes
from .reference_integrity import check_identifiers, check_reference_integrity


def check_document(document: GraphDocument) -> ValidationResult:
    """Run the document-level validators."""
    result = ValidationResult()
    result.merge(check_reference_integrity(document))
    result.merge(check_identifiers(document))
    return result


def run_validators(graph: Graph) -> ValidationResult:
    """Run all graph-level validators.

    Args:
        graph: The graph to lint.

    Returns:
        Combined ValidationResult from all validators.
    """
    result = ValidationResult()
    with graph.locked():
        result.merge(check_orphan_nodes(graph))
        result.merge(check_channel_usage(graph))
        result.merge(check_unbuffered_cycles(graph))
    return result


def validate_graph_file(path: str | Path) -> ValidationResult:
    """Load and lint a document file.

    Graph-level checks only run once the document-level checks pass, since
    a document with dangling references cannot be built into a graph.

    Raises:
        DocumentLoadError: If the file cannot be loaded.
        DecodeError: If the document has the wrong shape.
        ValidationError: If a part rejects its decoded state.
    """
    document = parse_document(path)
    result = check_document(document)
    if result.has_errors:
        return result

    result.merge(run_validators(decode_graph(document)))
    return result
