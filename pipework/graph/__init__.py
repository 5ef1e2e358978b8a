"""Graph IR: goroutine nodes, channel edges and their serialization."""

from .model import Edge, Graph, Node, coerce_capacity, coerce_multiplicity
from .codec import (
    decode_edge,
    decode_graph,
    decode_node,
    dumps_graph,
    encode_edge,
    encode_graph,
    encode_node,
    load_graph,
    loads_graph,
    save_graph,
)
from .examples import example_graph

__all__ = [
    "Edge",
    "Graph",
    "Node",
    "coerce_capacity",
    "coerce_multiplicity",
    "decode_edge",
    "decode_graph",
    "decode_node",
    "dumps_graph",
    "encode_edge",
    "encode_graph",
    "encode_node",
    "load_graph",
    "loads_graph",
    "save_graph",
    "example_graph",
]
