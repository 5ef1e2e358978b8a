"""Apply submitted editor forms to a graph."""

from ..graph.model import Edge, Graph, Node, coerce_multiplicity
from ..parts.base import FormData, form_value
from ..parts.registry import new_part
from ..schema.errors import NameConflictError

NEW_EDGE = "new"


def _multiplicity(form: FormData) -> int | None:
    raw = form_value(form, "Multiplicity").strip()
    if not raw:
        return None
    return coerce_multiplicity(raw)


def apply_node_form(graph: Graph, original: str, form: FormData) -> Node:
    """Update the node called ``original`` from form fields.

    Reads ``Name``, ``Wait`` (checked when ``"on"``) and ``Multiplicity``;
    the whole form is passed on to the node's part.

    Raises:
        ValidationError: If a field is malformed. The graph is unchanged.
        UnknownNodeError: If ``original`` is not a node.
        NameConflictError: If the new name is taken.
    """
    return graph.upsert_node(
        form_value(form, "Name"),
        form_value(form, "Wait") == "on",
        form,
        original=original,
        multiplicity=_multiplicity(form),
    )


def create_node_from_form(graph: Graph, part_type: str, form: FormData) -> Node:
    """Create a node with a fresh part of ``part_type`` from form fields."""
    return graph.upsert_node(
        form_value(form, "Name"),
        form_value(form, "Wait") == "on",
        form,
        multiplicity=_multiplicity(form),
        part=new_part(part_type),
    )


def apply_edge_form(graph: Graph, original: str | None, form: FormData) -> Edge:
    """Create or update an edge from form fields.

    ``original`` of None or ``"new"`` creates an edge; otherwise the edge
    called ``original`` is updated and renamed if ``Name`` differs.

    Raises:
        InvalidIdentifierError: If ``Name`` is not an identifier.
        UnknownNodeError: If ``Src`` or ``Dst`` is not a node.
        InvalidCapacityError: If ``Cap`` is not a non-negative integer.
        NameConflictError: If the name is taken.
    """
    name = form_value(form, "Name").strip()
    with graph.locked():
        if original in (None, NEW_EDGE):
            if name in graph.edges:
                raise NameConflictError(name, "edge")
            original = None
        return graph.upsert_edge(
            name,
            form_value(form, "Src"),
            form_value(form, "Dst"),
            form_value(form, "Type").strip(),
            form_value(form, "Cap"),
            original=original,
        )
