"""Adapters for external tools: gofmt, Graphviz dot and go build."""

from .collaborators import (
    CollaboratorError,
    CollaboratorTimeoutError,
    build_package,
    dot_to_svg,
    format_go,
    run_tool,
)

__all__ = [
    "CollaboratorError",
    "CollaboratorTimeoutError",
    "build_package",
    "dot_to_svg",
    "format_go",
    "run_tool",
]
