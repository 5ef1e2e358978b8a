"""Validators for structural lint of graph documents."""

from .base import Severity, ValidationIssue, ValidationResult
from .channel_usage import check_channel_usage
from .cycles import check_unbuffered_cycles
from .orphan_detector import check_orphan_nodes
from .reference_integrity import check_identifiers, check_reference_integrity
from .runner import check_document, run_validators, validate_graph_file

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "check_channel_usage",
    "check_unbuffered_cycles",
    "check_orphan_nodes",
    "check_identifiers",
    "check_reference_integrity",
    "check_document",
    "run_validators",
    "validate_graph_file",
]
