"""Loading and dumping pipework documents as JSON or YAML."""

import json
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import ValidationError

from .errors import DecodeError, DocumentLoadError
from .models import GraphDocument

DocumentFormat = Literal["json", "yaml"]


def load_document_data(path: str | Path) -> dict:
    """Load a JSON or YAML file and return the raw data.

    YAML is a superset of JSON, so both are read with the YAML parser.

    Args:
        path: Path to the document file.

    Returns:
        The parsed data as a dictionary.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise DocumentLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise DocumentLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"Invalid document: {e}", str(path)) from e
    except OSError as e:
        raise DocumentLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise DocumentLoadError(
            f"Expected mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_document(path: str | Path) -> GraphDocument:
    """Load and parse a file into a GraphDocument.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
        DecodeError: If the data does not have the document shape.
    """
    return parse_document_data(load_document_data(path))


def parse_document_from_string(text: str) -> GraphDocument:
    """Parse a JSON or YAML string into a GraphDocument.

    Raises:
        DocumentLoadError: If the text cannot be parsed.
        DecodeError: If the data does not have the document shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise DocumentLoadError(f"Invalid document: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise DocumentLoadError(f"Expected mapping at root, got {type(data).__name__}")

    return parse_document_data(data)


def parse_document_data(data: dict) -> GraphDocument:
    """Validate raw data as a GraphDocument.

    Raises:
        DecodeError: If the data fails validation.
    """
    try:
        return GraphDocument.model_validate(data)
    except ValidationError as e:
        raise DecodeError(
            f"Document has {e.error_count()} shape error(s)", pydantic_errors(e)
        ) from e


def pydantic_errors(error: ValidationError) -> list[dict]:
    """Flatten a pydantic error into loc/msg/type records."""
    return [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]


def dump_document_data(data: dict[str, Any], format: DocumentFormat = "json") -> str:
    """Serialize raw document data deterministically."""
    if format == "yaml":
        return yaml.safe_dump(data, sort_keys=True, allow_unicode=True)
    return json.dumps(data, indent=2, sort_keys=True, ensure_ascii=False) + "\n"
