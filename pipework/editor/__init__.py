"""Editor bindings: form submissions and per-part form fragments."""

from .forms import NEW_EDGE, apply_edge_form, apply_node_form, create_node_from_form
from .templates import EditorTemplates, build_editor_templates

__all__ = [
    "NEW_EDGE",
    "apply_edge_form",
    "apply_node_form",
    "create_node_from_form",
    "EditorTemplates",
    "build_editor_templates",
]
