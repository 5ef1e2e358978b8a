"""Node behaviours and their registry."""

from .base import FormData, Part, form_value, form_values
from .code import Code
from .filter import Filter, FilterPath
from .multiplexer import Multiplexer
from .registry import FACTORIES, decode_part, new_part, part_factory

__all__ = [
    "FormData",
    "Part",
    "form_value",
    "form_values",
    "Code",
    "Filter",
    "FilterPath",
    "Multiplexer",
    "FACTORIES",
    "decode_part",
    "new_part",
    "part_factory",
]
