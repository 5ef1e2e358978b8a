"""Render lint results for a terminal or for other tools."""

import json
from collections.abc import Iterator
from typing import Any, Literal

from ..validators.base import Severity, ValidationIssue, ValidationResult

ReportFormat = Literal["text", "json"]

# Severities shown in text reports, with their heading and marker.
_SECTIONS = (
    (Severity.ERROR, "ERRORS", "✘"),
    (Severity.WARNING, "WARNINGS", "⚠"),
)


def format_validation_result(
    result: ValidationResult,
    format: ReportFormat = "text",
) -> str:
    """Format a lint result as a text report or a JSON document."""
    if format == "json":
        return json.dumps(_report(result), indent=2, ensure_ascii=False)
    return "\n".join(_text_lines(result))


def _text_lines(result: ValidationResult) -> Iterator[str]:
    for severity, heading, marker in _SECTIONS:
        issues = result.of(severity)
        yield f"{heading}:"
        if not issues:
            yield "  (none)"
        for issue in issues:
            yield f"  {marker} {_describe(issue)}"
        yield ""
    yield _summary(result)


def _describe(issue: ValidationIssue) -> str:
    where = f"[{issue.location}] " if issue.location else ""
    return f"{issue.code}: {where}{issue.message}"


def _summary(result: ValidationResult) -> str:
    errors = len(result.errors)
    warnings = len(result.warnings)
    if errors:
        return f"Validation failed: {errors} error(s), {warnings} warning(s)"
    if warnings:
        return f"Validation passed with {warnings} warning(s)"
    return "Validation passed"


def _report(result: ValidationResult) -> dict[str, Any]:
    return {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "severity": issue.severity.value,
                "node": issue.node,
                "channel": issue.channel,
                "message": issue.message,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }
