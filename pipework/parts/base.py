"""Base class for node behaviours (parts)."""

import html
from abc import abstractmethod
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel

if TYPE_CHECKING:
    from ..editor.templates import EditorTemplates

FormData = Mapping[str, Any]


def form_values(form: FormData, key: str) -> list[str]:
    """Get every submitted value for a form field."""
    value = form.get(key)
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(v) for v in value]
    return [str(value)]


def form_value(form: FormData, key: str, default: str = "") -> str:
    """Get the first submitted value for a form field."""
    values = form_values(form, key)
    return values[0] if values else default


def normalize_newlines(text: str) -> str:
    """Convert browser line endings to plain newlines."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


class Part(BaseModel):
    """The behaviour attached to a node.

    Public fields are the part's serialized payload. Derived state lives in
    private attributes and is rebuilt by ``update(None)``.
    """

    type_key: ClassVar[str]
    editor_template: ClassVar[str] = ""

    @abstractmethod
    def impl(self) -> str:
        """Return Go source implementing the part."""

    @abstractmethod
    def channels(self) -> tuple[list[str], list[str]]:
        """Return the (read, written) channel names this part uses.

        Anything returned that is not a channel in the graph is ignored.
        """

    @abstractmethod
    def update(self, form: FormData | None = None) -> None:
        """Apply submitted form fields, or re-derive state when form is None.

        Raises:
            ValidationError: If a field is malformed. The part is unchanged.
        """

    def imports(self) -> list[str]:
        """Return extra Go import paths the implementation needs."""
        return []

    def editor_context(self) -> dict[str, str]:
        """Return HTML-escaped values for the editor fragment."""
        return {
            name: html.escape(str(value))
            for name, value in self.model_dump().items()
        }

    @classmethod
    def view_name(cls) -> str:
        """Name of the editor fragment in a template set."""
        return f"part_view/{cls.type_key}"

    def associate_editor(self, templates: "EditorTemplates") -> None:
        """Register this part's editor fragment with a template set.

        Raises:
            EditorSetupError: If the fragment is malformed.
        """
        templates.register(
            self.view_name(), self.editor_template, fields=self.editor_context()
        )
