"""Encoding graphs to documents and decoding them back.

Nodes are wrapped in an envelope carrying the part's type tag next to the
part's own payload, so one document can hold any mix of part types.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..parts.registry import decode_part
from ..schema.errors import DecodeError
from ..schema.loader import (
    DocumentFormat,
    dump_document_data,
    parse_document,
    parse_document_data,
    parse_document_from_string,
    pydantic_errors,
)
from ..schema.models import EdgeEnvelope, GraphDocument, NodeEnvelope
from .model import Edge, Graph, Node

logger = logging.getLogger(__name__)


def encode_node(node: Node) -> dict[str, Any]:
    """Encode a node as a part-tagged envelope."""
    envelope = NodeEnvelope(
        name=node.name,
        wait=node.wait,
        multiplicity=node.multiplicity,
        part_type=node.part.type_key,
        part=node.part.model_dump(mode="json"),
    )
    return envelope.model_dump(mode="json")


def decode_node(data: dict[str, Any] | NodeEnvelope) -> Node:
    """Decode a node envelope, instantiating the registered part type.

    Raises:
        DecodeError: If the envelope or payload has the wrong shape.
        UnknownPartTypeError: If the part type is not registered.
        ValidationError: If the part rejects its decoded state.
    """
    if isinstance(data, NodeEnvelope):
        envelope = data
    else:
        try:
            envelope = NodeEnvelope.model_validate(data)
        except ValidationError as e:
            raise DecodeError("Node envelope has the wrong shape", pydantic_errors(e)) from e

    part = decode_part(envelope.part_type, envelope.part)
    return Node(
        name=envelope.name,
        part=part,
        multiplicity=envelope.multiplicity,
        wait=envelope.wait,
    )


def encode_edge(edge: Edge) -> dict[str, Any]:
    """Encode an edge."""
    return EdgeEnvelope(
        name=edge.name, src=edge.src, dst=edge.dst, type=edge.type, cap=edge.cap
    ).model_dump(mode="json")


def decode_edge(data: dict[str, Any] | EdgeEnvelope) -> Edge:
    """Decode an edge without checking it against any graph.

    Raises:
        DecodeError: If the data has the wrong shape.
    """
    if isinstance(data, EdgeEnvelope):
        envelope = data
    else:
        try:
            envelope = EdgeEnvelope.model_validate(data)
        except ValidationError as e:
            raise DecodeError("Edge envelope has the wrong shape", pydantic_errors(e)) from e
    # Endpoints are trimmed the same way node names are.
    return Edge(
        name=envelope.name,
        src=envelope.src.strip(),
        dst=envelope.dst.strip(),
        type=envelope.type,
        cap=envelope.cap,
    )


def encode_graph(graph: Graph) -> dict[str, Any]:
    """Encode a graph as document data, with nodes and edges sorted by name."""
    with graph.locked():
        return {
            "name": graph.name,
            "package_name": graph.package_name,
            "package_path": graph.package_path,
            "imports": list(graph.imports),
            "nodes": {node.name: encode_node(node) for node in graph.sorted_nodes()},
            "edges": {edge.name: encode_edge(edge) for edge in graph.sorted_edges()},
        }


def decode_graph(data: dict[str, Any] | GraphDocument) -> Graph:
    """Decode document data into a graph.

    Nodes and edges go through the graph's own checks, so a document with
    bad channel names, negative capacities or dangling references fails
    to decode.

    Raises:
        DecodeError: If the document has the wrong shape.
        UnknownPartTypeError: If a node uses an unregistered part type.
        ValidationError: If a name, capacity or part is invalid.
        ReferentialError: If an edge refers to a missing node.
        NameConflictError: If two nodes trim to the same name.
    """
    document = data if isinstance(data, GraphDocument) else parse_document_data(data)

    graph = Graph(
        name=document.name,
        package_name=document.package_name,
        package_path=document.package_path,
        imports=document.imports,
    )
    for envelope in document.nodes.values():
        graph.add_node(decode_node(envelope))
    for envelope in document.edges.values():
        graph.add_edge(decode_edge(envelope))

    logger.debug(
        f"Decoded graph {graph.name!r} with {len(graph.nodes)} node(s) "
        f"and {len(graph.edges)} edge(s)"
    )
    return graph


def dumps_graph(graph: Graph, format: DocumentFormat = "json") -> str:
    """Serialize a graph to JSON or YAML text."""
    return dump_document_data(encode_graph(graph), format)


def loads_graph(text: str) -> Graph:
    """Parse a graph from JSON or YAML text."""
    return decode_graph(parse_document_from_string(text))


def load_graph(path: str | Path) -> Graph:
    """Load a graph from a JSON or YAML file."""
    return decode_graph(parse_document(path))


def save_graph(graph: Graph, path: str | Path) -> None:
    """Write a graph to a file; ``.yaml``/``.yml`` files get YAML, others JSON."""
    path = Path(path)
    format: DocumentFormat = "yaml" if path.suffix in (".yaml", ".yml") else "json"
    path.write_text(dumps_graph(graph, format), encoding="utf-8")
    logger.debug(f"Saved graph {graph.name!r} to {path}")
