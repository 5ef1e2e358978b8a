"""A built-in example: a prime sieve over small integers."""

from ..parts.code import Code
from ..parts.filter import Filter, FilterPath
from .model import Edge, Graph, Node


def example_graph() -> Graph:
    """Build the example graph shown when the editor starts."""
    graph = Graph(
        name="Example",
        package_name="example",
        package_path="example",
        imports=["fmt"],
    )

    graph.add_node(Node(
        name="Generate integers ≥ 2",
        part=Code(code="for i := 2; i < 100; i++ {\n\traw <- i\n}\nclose(raw)"),
        wait=True,
    ))
    graph.add_node(Node(
        name="Filter divisible by 2",
        part=Filter(
            input="raw",
            paths=[FilterPath(pred="v <= 2 || v%2 != 0", output="div2")],
        ),
        wait=True,
    ))
    graph.add_node(Node(
        name="Filter divisible by 3",
        part=Filter(
            input="div2",
            paths=[FilterPath(pred="v <= 3 || v%3 != 0", output="out")],
        ),
        wait=True,
    ))
    graph.add_node(Node(
        name="Print output",
        part=Code(code="for n := range out {\n\tfmt.Println(n)\n}"),
        wait=True,
    ))

    graph.add_edge(Edge(
        name="raw", src="Generate integers ≥ 2", dst="Filter divisible by 2", type="int"
    ))
    graph.add_edge(Edge(
        name="div2", src="Filter divisible by 2", dst="Filter divisible by 3", type="int"
    ))
    graph.add_edge(Edge(
        name="out", src="Filter divisible by 3", dst="Print output", type="int"
    ))

    return graph
