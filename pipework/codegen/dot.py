"""Render a graph as a Graphviz dot description."""

from urllib.parse import quote

from ..graph.model import Edge, Graph, Node


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _node_line(node: Node) -> str:
    label = node.name
    if node.multiplicity > 1:
        label += f" ×{node.multiplicity}"
    attrs = [
        f"label={_quote(label)}",
        f"URL={_quote('/node/' + quote(node.name, safe=''))}",
    ]
    if node.wait:
        attrs.append("peripheries=2")
    return f"\t{_quote(node.name)} [{', '.join(attrs)}];"


def _edge_line(edge: Edge) -> str:
    detail = f"{edge.type} (cap {edge.cap})" if edge.type else f"cap {edge.cap}"
    label = f"{edge.name}\n{detail}"
    attrs = [
        f"label={_quote(label)}",
        f"URL={_quote('/edge/' + quote(edge.name, safe=''))}",
    ]
    return f"\t{_quote(edge.src)} -> {_quote(edge.dst)} [{', '.join(attrs)}];"


def render_dot(graph: Graph) -> str:
    """Render the graph as a dot digraph with nodes and edges in name order."""
    with graph.locked():
        nodes = graph.sorted_nodes()
        edges = graph.sorted_edges()
        lines = [
            f"digraph {_quote(graph.name)} {{",
            '\tgraph [fontname="Helvetica", rankdir="TB"];',
            '\tnode [shape=box, fontname="Helvetica"];',
            '\tedge [fontname="Helvetica"];',
        ]
        lines.extend(_node_line(node) for node in nodes)
        lines.extend(_edge_line(edge) for edge in edges)
    lines.append("}")
    return "\n".join(lines) + "\n"
