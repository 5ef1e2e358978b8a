"""Tests for document loading."""

import pytest

from pipework.schema.errors import DecodeError, DocumentLoadError
from pipework.schema.loader import (
    dump_document_data,
    load_document_data,
    parse_document,
    parse_document_from_string,
)


class TestLoadDocumentData:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "graph.yaml"
        path.write_text("name: G\nimports:\n  - fmt\n")

        data = load_document_data(path)
        assert data == {"name": "G", "imports": ["fmt"]}

    def test_load_json(self, tmp_path):
        path = tmp_path / "graph.json"
        path.write_text('{"name": "G", "imports": ["fmt"]}')

        data = load_document_data(path)
        assert data["imports"] == ["fmt"]

    def test_file_not_found(self):
        with pytest.raises(DocumentLoadError) as exc_info:
            load_document_data("/nonexistent/graph.json")
        assert "not found" in str(exc_info.value).lower()

    def test_invalid_syntax(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("nodes: [unclosed")

        with pytest.raises(DocumentLoadError) as exc_info:
            load_document_data(path)
        assert "Invalid document" in str(exc_info.value)

    def test_empty_file_returns_empty_dict(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        assert load_document_data(path) == {}

    def test_non_mapping_at_root(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(DocumentLoadError) as exc_info:
            load_document_data(path)
        assert "mapping" in str(exc_info.value).lower()


class TestParseDocument:
    def test_parse_example_file(self, examples_dir):
        document = parse_document(examples_dir / "example.yaml")
        assert len(document.nodes) == 4
        assert set(document.edges) == {"raw", "div2", "out"}

    def test_parse_json_file(self, examples_dir):
        document = parse_document(examples_dir / "pipeline.json")
        assert document.nodes["Print"].multiplicity == 1

    def test_shape_error_lists_locations(self):
        with pytest.raises(DecodeError) as exc_info:
            parse_document_from_string("edges:\n  raw:\n    dst: B\n")
        locations = [err["loc"] for err in exc_info.value.errors]
        assert "edges.raw.src" in locations

    def test_invalid_string(self):
        with pytest.raises(DocumentLoadError):
            parse_document_from_string("nodes: [oops")


class TestDumpDocumentData:
    def test_json_is_sorted(self):
        text = dump_document_data({"b": 1, "a": 2})
        assert text.index('"a"') < text.index('"b"')
        assert text.endswith("\n")

    def test_yaml(self):
        text = dump_document_data({"name": "G"}, "yaml")
        assert text == "name: G\n"
