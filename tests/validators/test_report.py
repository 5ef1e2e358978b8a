"""Tests for lint results and their reports."""

import json

from pipework.output.formatter import format_validation_result
from pipework.validators.base import Severity, ValidationIssue, ValidationResult


class TestValidationIssue:
    def test_location(self):
        assert ValidationIssue("X", "m", Severity.ERROR).location == ""
        assert ValidationIssue("X", "m", Severity.ERROR, node="A").location == "A"
        assert ValidationIssue("X", "m", Severity.ERROR, channel="c").location == ":c"
        assert ValidationIssue("X", "m", Severity.ERROR, node="A", channel="c").location == "A:c"

    def test_str(self):
        issue = ValidationIssue("ORPHAN_NODE", "alone", Severity.WARNING, node="A")
        assert str(issue) == "WARNING: ORPHAN_NODE [A] - alone"


class TestValidationResult:
    def test_details_and_merge(self):
        first = ValidationResult()
        first.add_error("NEGATIVE_CAPACITY", "bad", channel="c", cap=-1)
        second = ValidationResult()
        second.add_warning("ORPHAN_NODE", "alone", node="A")

        first.merge(second)

        assert first.codes() == ["NEGATIVE_CAPACITY", "ORPHAN_NODE"]
        assert first.errors[0].details == {"cap": -1}
        assert first.has_warnings
        assert not first.is_valid


class TestFormatter:
    def test_text_report(self):
        result = ValidationResult()
        result.add_warning("ORPHAN_NODE", "Node 'A' has no channels", node="A")

        text = format_validation_result(result)

        assert "ERRORS:\n  (none)" in text
        assert "  ⚠ ORPHAN_NODE: [A] Node 'A' has no channels" in text
        assert text.endswith("Validation passed with 1 warning(s)")

    def test_failed_summary(self):
        result = ValidationResult()
        result.add_error("UNDEFINED_NODE_REF", "dangling", node="B", channel="out")

        text = format_validation_result(result)

        assert "✘ UNDEFINED_NODE_REF: [B:out] dangling" in text
        assert text.endswith("Validation failed: 1 error(s), 0 warning(s)")

    def test_json_report(self):
        result = ValidationResult()
        result.add_error("UNDEFINED_NODE_REF", "dangling", node="B", channel="out", end="dst")

        data = json.loads(format_validation_result(result, "json"))

        assert data["valid"] is False
        assert data["error_count"] == 1
        assert data["issues"][0]["channel"] == "out"
        assert data["issues"][0]["details"] == {"end": "dst"}
