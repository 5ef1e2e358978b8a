"""The closed set of part types, keyed by type tag."""

import logging
from typing import Any

from pydantic import ValidationError

from ..schema.errors import DecodeError, UnknownPartTypeError
from ..schema.loader import pydantic_errors
from .base import Part
from .code import Code
from .filter import Filter
from .multiplexer import Multiplexer

logger = logging.getLogger(__name__)

# Every known part type. Decoding only ever instantiates these classes.
FACTORIES: dict[str, type[Part]] = {
    Code.type_key: Code,
    Filter.type_key: Filter,
    Multiplexer.type_key: Multiplexer,
}


def part_factory(part_type: str) -> type[Part]:
    """Get the factory for a part type tag.

    Raises:
        UnknownPartTypeError: If the tag is not registered.
    """
    factory = FACTORIES.get(part_type)
    if factory is None:
        raise UnknownPartTypeError(part_type)
    return factory


def new_part(part_type: str) -> Part:
    """Create an empty part of the given type."""
    return part_factory(part_type)()


def decode_part(part_type: str, payload: dict[str, Any]) -> Part:
    """Decode a part payload into a fresh instance of its registered type.

    Raises:
        UnknownPartTypeError: If the tag is not registered.
        DecodeError: If the payload does not fit the part type.
        ValidationError: If the decoded part fails self-normalisation.
    """
    factory = part_factory(part_type)
    try:
        part = factory.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(
            f"Payload does not fit part type {part_type!r}", pydantic_errors(e)
        ) from e
    part.update(None)
    logger.debug(f"Decoded {part_type} part")
    return part
