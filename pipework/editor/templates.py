"""The shared set of editor form fragments, one per part type."""

import logging
from collections.abc import Iterable, Mapping
from string import Template
from typing import TYPE_CHECKING

from ..parts.registry import FACTORIES
from ..schema.errors import EditorSetupError, TemplateError

if TYPE_CHECKING:
    from ..graph.model import Node

logger = logging.getLogger(__name__)


class EditorTemplates:
    """Named ``string.Template`` fragments filled with HTML-escaped values."""

    def __init__(self):
        self._templates: dict[str, Template] = {}

    def __contains__(self, name: str) -> bool:
        return name in self._templates

    def names(self) -> list[str]:
        """Registered fragment names in order."""
        return sorted(self._templates)

    def register(
        self, name: str, source: str, fields: Iterable[str] | None = None
    ) -> None:
        """Compile and add a fragment.

        Args:
            name: Fragment name, e.g. ``part_view/Code``.
            source: Template text with ``$field`` placeholders.
            fields: Placeholders the fragment may use; unchecked when None.

        Raises:
            EditorSetupError: If the fragment is empty, malformed, duplicated
                or uses an unknown placeholder.
        """
        if not source.strip():
            raise EditorSetupError(f"Editor view {name!r} is empty")
        if name in self._templates:
            raise EditorSetupError(f"Editor view {name!r} is already registered")

        template = Template(source)
        if not template.is_valid():
            raise EditorSetupError(f"Editor view {name!r} has a malformed placeholder")
        if fields is not None:
            unknown = set(template.get_identifiers()) - set(fields)
            if unknown:
                raise EditorSetupError(
                    f"Editor view {name!r} uses unknown field(s): "
                    + ", ".join(sorted(unknown))
                )

        self._templates[name] = template
        logger.debug(f"Registered editor view {name!r}")

    def render(self, name: str, context: Mapping[str, str]) -> str:
        """Fill a fragment.

        Raises:
            TemplateError: If the fragment is unknown or a value is missing.
        """
        template = self._templates.get(name)
        if template is None:
            raise TemplateError(f"No editor view called {name!r}")
        try:
            return template.substitute(context)
        except KeyError as e:
            raise TemplateError(f"Editor view {name!r} is missing value {e}") from e

    def render_part_view(self, node: "Node") -> str:
        """Fill the fragment for a node's part."""
        return self.render(node.part.view_name(), node.part.editor_context())


def build_editor_templates() -> EditorTemplates:
    """Associate every registered part type's editor view.

    Called once at startup; an EditorSetupError here is fatal.
    """
    templates = EditorTemplates()
    for factory in FACTORIES.values():
        factory().associate_editor(templates)
    logger.info(f"Associated {len(templates.names())} editor view(s)")
    return templates
