"""Schema layer for parsing and validating graph documents."""

from .errors import (
    DecodeError,
    DocumentLoadError,
    EditorSetupError,
    EmptyIdentifierError,
    InvalidCapacityError,
    InvalidIdentifierError,
    NameConflictError,
    PipeworkError,
    ReferentialError,
    TemplateError,
    UnknownEdgeError,
    UnknownNodeError,
    UnknownPartTypeError,
    ValidationError,
)
from .models import EdgeEnvelope, GraphDocument, NodeEnvelope
from .loader import (
    dump_document_data,
    load_document_data,
    parse_document,
    parse_document_data,
    parse_document_from_string,
)

__all__ = [
    "DecodeError",
    "DocumentLoadError",
    "EditorSetupError",
    "EmptyIdentifierError",
    "InvalidCapacityError",
    "InvalidIdentifierError",
    "NameConflictError",
    "PipeworkError",
    "ReferentialError",
    "TemplateError",
    "UnknownEdgeError",
    "UnknownNodeError",
    "UnknownPartTypeError",
    "ValidationError",
    "EdgeEnvelope",
    "GraphDocument",
    "NodeEnvelope",
    "dump_document_data",
    "load_document_data",
    "parse_document",
    "parse_document_data",
    "parse_document_from_string",
]
