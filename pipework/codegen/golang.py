"""Render a graph as a Go program: one goroutine per node, one channel per edge."""

from ..graph.model import Graph, Node
from ..schema.errors import TemplateError

# Channels whose element type was left blank carry any value.
DEFAULT_ELEMENT_TYPE = "interface{}"


def _comment(text: str) -> str:
    """Make text safe for a single-line Go comment."""
    return " ".join(text.split())


def _indent(code: str, depth: int) -> list[str]:
    prefix = "\t" * depth
    return [prefix + line if line.strip() else "" for line in code.splitlines()]


def node_impl(node: Node) -> str:
    """Get a node's emitted code, or raise TemplateError."""
    try:
        impl = node.part.impl()
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise TemplateError(f"Node {node.name!r} could not emit code: {e}") from e
    if not isinstance(impl, str):
        raise TemplateError(
            f"Node {node.name!r} emitted {type(impl).__name__}, expected str"
        )
    return impl


def collect_imports(graph: Graph, nodes: list[Node]) -> list[str]:
    """Graph imports first, then part imports, then sync if a barrier is needed."""
    imports = list(graph.imports)
    extra: set[str] = set()
    for node in nodes:
        extra.update(node.part.imports())
    if any(node.wait for node in nodes):
        extra.add("sync")
    imports.extend(sorted(extra - set(imports)))
    return imports


def _goroutine(node: Node, impl: str) -> list[str]:
    lines = [f"\t// {_comment(node.name)}"]
    if node.wait:
        lines.append(f"\twg.Add({node.multiplicity})")
    done = ["\t\tdefer wg.Done()"] if node.wait else []

    if node.multiplicity == 1:
        lines.append("\tgo func() {")
        lines.extend(done)
        lines.extend(_indent(impl, 2))
        lines.append("\t}()")
        return lines

    lines.append(f"\tfor n := 0; n < {node.multiplicity}; n++ {{")
    lines.append("\t\tgo func(instanceNumber int) {")
    lines.extend("\t" + line for line in done)
    lines.extend(_indent(impl, 3))
    lines.append("\t\t}(n)")
    lines.append("\t}")
    return lines


def render_go(graph: Graph) -> str:
    """Render the graph as Go source for package main.

    Channels and goroutines are emitted in name order. Part code is inserted
    as is; gofmt normalises the result and the Go compiler checks it.

    Raises:
        TemplateError: If a part's code cannot be composed.
    """
    with graph.locked():
        nodes = graph.sorted_nodes()
        edges = graph.sorted_edges()
        impls = [node_impl(node) for node in nodes]
        imports = collect_imports(graph, nodes)
        title = _comment(graph.name) or "graph"
        source = _comment(graph.package_path)

    lines = [
        f"// Code generated by pipework from {title}. DO NOT EDIT.",
    ]
    if source:
        lines.append(f"// Source package path: {source}")
    lines.extend(["", "package main", ""])

    if imports:
        lines.append("import (")
        lines.extend(f'\t"{path}"' for path in imports)
        lines.append(")")
        lines.append("")

    lines.append("func main() {")
    if edges:
        lines.append("\t// Channels")
        for edge in edges:
            element = edge.type.strip() or DEFAULT_ELEMENT_TYPE
            lines.append(f"\t{edge.name} := make(chan {element}, {edge.cap})")
        lines.append("")

    waiting = any(node.wait for node in nodes)
    if waiting:
        lines.append("\tvar wg sync.WaitGroup")
        lines.append("")

    for node, impl in zip(nodes, impls):
        lines.extend(_goroutine(node, impl))
        lines.append("")

    if waiting:
        lines.append("\t// Wait for the goroutines marked wait.")
        lines.append("\twg.Wait()")
    elif lines[-1] == "":
        lines.pop()
    lines.append("}")
    return "\n".join(lines) + "\n"
