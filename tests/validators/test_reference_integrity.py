"""Tests for document reference and identifier checks."""

from pipework.schema.loader import parse_document_from_string
from pipework.validators.reference_integrity import (
    check_identifiers,
    check_reference_integrity,
)


class TestReferenceIntegrity:
    def test_valid_references(self, examples_dir):
        from pipework.schema.loader import parse_document

        document = parse_document(examples_dir / "example.yaml")

        result = check_reference_integrity(document)

        assert result.is_valid

    def test_undefined_destination(self):
        yaml = """
nodes:
  Source:
    part_type: Code
edges:
  out:
    src: Source
    dst: Missing
"""
        document = parse_document_from_string(yaml)

        result = check_reference_integrity(document)

        assert not result.is_valid
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == "UNDEFINED_NODE_REF"
        assert error.node == "Missing"
        assert error.channel == "out"
        assert error.details["end"] == "dst"

    def test_both_ends_undefined(self):
        yaml = """
edges:
  out:
    src: A
    dst: B
"""
        result = check_reference_integrity(parse_document_from_string(yaml))

        assert [e.details["end"] for e in result.errors] == ["src", "dst"]


class TestIdentifiers:
    def test_unknown_part_type(self):
        yaml = """
nodes:
  Mystery:
    part_type: Nonexistent
"""
        result = check_identifiers(parse_document_from_string(yaml))

        assert len(result.errors) == 1
        assert result.errors[0].code == "UNKNOWN_PART_TYPE"
        assert result.errors[0].node == "Mystery"

    def test_invalid_channel_name_and_capacity(self):
        yaml = """
nodes:
  A:
    part_type: Code
edges:
  bad name:
    src: A
    dst: A
    cap: -2
"""
        result = check_identifiers(parse_document_from_string(yaml))

        codes = sorted(e.code for e in result.errors)
        assert codes == ["INVALID_CHANNEL_NAME", "NEGATIVE_CAPACITY"]

    def test_blank_node_name(self):
        yaml = """
nodes:
  " ":
    part_type: Code
"""
        result = check_identifiers(parse_document_from_string(yaml))

        assert [e.code for e in result.errors] == ["EMPTY_NODE_NAME"]

    def test_trailing_newline_in_channel_name(self):
        yaml = """
nodes:
  A:
    part_type: Code
edges:
  "raw\\n":
    src: A
    dst: A
"""
        result = check_identifiers(parse_document_from_string(yaml))

        assert [e.code for e in result.errors] == ["INVALID_CHANNEL_NAME"]


def test_padded_names_resolve():
    yaml = """
nodes:
  " A ":
    part_type: Code
  B:
    part_type: Code
edges:
  c:
    src: " A "
    dst: "B "
"""
    result = check_reference_integrity(parse_document_from_string(yaml))

    assert result.is_valid
