"""Lint issues and the result that collects them."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(str, Enum):
    """Severity level of a lint issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """One finding, located at a node, a channel, or both."""

    code: str
    message: str
    severity: Severity
    node: str | None = None
    channel: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """``node``, ``node:channel`` or ``:channel``; empty when unlocated."""
        if self.channel is None:
            return self.node or ""
        return f"{self.node or ''}:{self.channel}"

    def __str__(self) -> str:
        where = f" [{self.location}]" if self.location else ""
        return f"{self.severity.value.upper()}: {self.code}{where} - {self.message}"


@dataclass
class ValidationResult:
    """Issues found by one or more checks, in the order they were found."""

    issues: list[ValidationIssue] = field(default_factory=list)

    def of(self, severity: Severity) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity is severity]

    @property
    def errors(self) -> list[ValidationIssue]:
        return self.of(Severity.ERROR)

    @property
    def warnings(self) -> list[ValidationIssue]:
        return self.of(Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        return any(issue.severity is Severity.ERROR for issue in self.issues)

    @property
    def has_warnings(self) -> bool:
        return any(issue.severity is Severity.WARNING for issue in self.issues)

    @property
    def is_valid(self) -> bool:
        """True when nothing at error level was found."""
        return not self.has_errors

    def codes(self) -> list[str]:
        return [issue.code for issue in self.issues]

    def add(
        self,
        severity: Severity,
        code: str,
        message: str,
        node: str | None = None,
        channel: str | None = None,
        **details: Any,
    ) -> ValidationIssue:
        """Record an issue; extra keyword arguments become its details."""
        issue = ValidationIssue(
            code=code,
            message=message,
            severity=severity,
            node=node,
            channel=channel,
            details=details,
        )
        self.issues.append(issue)
        return issue

    def add_error(self, code: str, message: str, **kwargs: Any) -> ValidationIssue:
        return self.add(Severity.ERROR, code, message, **kwargs)

    def add_warning(self, code: str, message: str, **kwargs: Any) -> ValidationIssue:
        return self.add(Severity.WARNING, code, message, **kwargs)

    def merge(self, *others: "ValidationResult") -> None:
        for other in others:
            self.issues.extend(other.issues)
