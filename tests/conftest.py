"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from pipework.editor.templates import build_editor_templates
from pipework.graph.examples import example_graph
from pipework.graph.model import Edge, Graph, Node
from pipework.parts.code import Code


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def pipeline_graph() -> Graph:
    """Generate -> FilterEven -> Print, joined by two unbuffered int channels."""
    graph = Graph(name="Pipeline", package_name="pipeline", imports=["fmt"])
    graph.add_node(Node(
        name="Generate",
        part=Code(code="for i := 0; i < 10; i++ {\n\traw <- i\n}\nclose(raw)"),
        wait=True,
    ))
    graph.add_node(Node(
        name="FilterEven",
        part=Code(code="for n := range raw {\n\tif n%2 == 0 {\n\t\tout <- n\n\t}\n}\nclose(out)"),
        wait=True,
    ))
    graph.add_node(Node(
        name="Print",
        part=Code(code="for n := range out {\n\tfmt.Println(n)\n}"),
        wait=True,
    ))
    graph.add_edge(Edge(name="raw", src="Generate", dst="FilterEven", type="int", cap=0))
    graph.add_edge(Edge(name="out", src="FilterEven", dst="Print", type="int", cap=0))
    return graph


@pytest.fixture
def example():
    """Return the built-in example graph."""
    return example_graph()


@pytest.fixture
def templates():
    """Return the editor views for every part type."""
    return build_editor_templates()
