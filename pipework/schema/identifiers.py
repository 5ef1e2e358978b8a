"""Identifier grammar shared by channels and channel-bearing part fields."""

import re

from .errors import EmptyIdentifierError, InvalidIdentifierError

IDENTIFIER_RE = re.compile(r"[_a-zA-Z][_a-zA-Z0-9]*")


def is_identifier(name: str) -> bool:
    """Check whether a name can be used as a channel identifier."""
    return IDENTIFIER_RE.fullmatch(name) is not None


def require_identifier(name: str, field: str = "Name") -> str:
    """Return the name unchanged, or raise InvalidIdentifierError."""
    if not is_identifier(name):
        raise InvalidIdentifierError(name, field)
    return name


def require_node_name(name: str, field: str = "Name") -> str:
    """Return the trimmed node name, or raise EmptyIdentifierError."""
    name = name.strip()
    if not name:
        raise EmptyIdentifierError(field)
    return name
