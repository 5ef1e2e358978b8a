"""Tests for applying editor forms to a graph."""

import pytest

from pipework.editor.forms import apply_edge_form, apply_node_form, create_node_from_form
from pipework.parts.filter import Filter, FilterPath
from pipework.schema.errors import (
    EmptyIdentifierError,
    InvalidCapacityError,
    NameConflictError,
    UnknownNodeError,
    UnknownPartTypeError,
    ValidationError,
)


class TestNodeForm:
    def test_rename_and_update(self, pipeline_graph):
        node = apply_node_form(pipeline_graph, "FilterEven", {
            "Name": "Filter2",
            "Wait": "on",
            "Multiplicity": "2",
            "Code": "for n := range raw {\r\n\tout <- n\r\n}\r\nclose(out)",
        })
        assert node.name == "Filter2"
        assert node.wait is True
        assert node.multiplicity == 2
        assert "\r" not in node.part.code
        assert pipeline_graph.edges["raw"].dst == "Filter2"
        assert pipeline_graph.edges["out"].src == "Filter2"

    def test_unchecked_wait(self, pipeline_graph):
        node = apply_node_form(pipeline_graph, "Print", {"Name": "Print"})
        assert node.wait is False
        assert node.multiplicity == 1

    def test_zero_multiplicity_clamped(self, pipeline_graph):
        node = apply_node_form(pipeline_graph, "Print", {"Name": "Print", "Multiplicity": "0"})
        assert node.multiplicity == 1

    def test_bad_multiplicity(self, pipeline_graph):
        with pytest.raises(ValidationError) as exc_info:
            apply_node_form(pipeline_graph, "Print", {"Name": "Print", "Multiplicity": "many"})
        assert exc_info.value.field == "Multiplicity"

    def test_blank_name(self, pipeline_graph):
        with pytest.raises(EmptyIdentifierError):
            apply_node_form(pipeline_graph, "Print", {"Name": "  "})
        assert "Print" in pipeline_graph.nodes

    def test_unknown_node(self, pipeline_graph):
        with pytest.raises(UnknownNodeError):
            apply_node_form(pipeline_graph, "Missing", {"Name": "Missing"})


class TestCreateNodeForm:
    def test_create_filter(self, pipeline_graph):
        node = create_node_from_form(pipeline_graph, "Filter", {
            "Name": "Positive",
            "Input": "raw",
            "Pred": ["v > 0"],
            "Output": ["pos"],
        })
        assert pipeline_graph.nodes["Positive"] is node
        assert node.part == Filter(input="raw", paths=[FilterPath(pred="v > 0", output="pos")])

    def test_unknown_part_type(self, pipeline_graph):
        with pytest.raises(UnknownPartTypeError):
            create_node_from_form(pipeline_graph, "Nonexistent", {"Name": "X"})
        assert "X" not in pipeline_graph.nodes

    def test_taken_name(self, pipeline_graph):
        with pytest.raises(NameConflictError):
            create_node_from_form(pipeline_graph, "Code", {"Name": "Print"})


class TestEdgeForm:
    def test_create(self, pipeline_graph):
        edge = apply_edge_form(pipeline_graph, "new", {
            "Name": "done", "Src": "Print", "Dst": "Generate", "Type": " bool ", "Cap": "2",
        })
        assert pipeline_graph.edges["done"] is edge
        assert (edge.type, edge.cap) == ("bool", 2)

    def test_create_with_taken_name(self, pipeline_graph):
        with pytest.raises(NameConflictError):
            apply_edge_form(pipeline_graph, None, {
                "Name": "raw", "Src": "Print", "Dst": "Generate", "Type": "int", "Cap": "0",
            })
        assert pipeline_graph.edges["raw"].src == "Generate"

    def test_rename(self, pipeline_graph):
        apply_edge_form(pipeline_graph, "raw", {
            "Name": "nums", "Src": "Generate", "Dst": "FilterEven", "Type": "int", "Cap": "4",
        })
        assert set(pipeline_graph.edges) == {"nums", "out"}
        assert pipeline_graph.edges["nums"].cap == 4

    def test_negative_capacity(self, pipeline_graph):
        with pytest.raises(InvalidCapacityError):
            apply_edge_form(pipeline_graph, "raw", {
                "Name": "raw", "Src": "Generate", "Dst": "FilterEven", "Type": "int", "Cap": "-1",
            })
        assert pipeline_graph.edges["raw"].cap == 0

    def test_unknown_source(self, pipeline_graph):
        with pytest.raises(UnknownNodeError):
            apply_edge_form(pipeline_graph, "new", {
                "Name": "x", "Src": "Nope", "Dst": "Print", "Type": "int", "Cap": "0",
            })
        assert "x" not in pipeline_graph.edges
