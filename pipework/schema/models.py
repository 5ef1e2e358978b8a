"""Pydantic models for pipework graph documents."""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class NodeEnvelope(BaseModel):
    """A node with its part payload, tagged by part type."""

    name: str = ""  # Will be set from the key
    wait: bool = False
    multiplicity: int = 1
    part_type: str
    part: dict[str, Any] = Field(default_factory=dict)

    @field_validator("multiplicity", mode="after")
    @classmethod
    def coerce_multiplicity(cls, value: int) -> int:
        """Clamp multiplicity to at least one instance."""
        return max(value, 1)


class EdgeEnvelope(BaseModel):
    """A channel between two nodes."""

    name: str = ""  # Will be set from the key
    src: str
    dst: str
    type: str = ""
    cap: int = 0


class GraphDocument(BaseModel):
    """Root model for a pipework document."""

    name: str = ""
    package_name: str = "main"
    package_path: str = ""
    imports: list[str] = Field(default_factory=list)
    nodes: dict[str, NodeEnvelope] = Field(default_factory=dict)
    edges: dict[str, EdgeEnvelope] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data: Any) -> Any:
        """Set node and edge names from their keys."""
        if not isinstance(data, dict):
            return data

        # Work on copies; the caller's data is left untouched.
        data = dict(data)
        for section in ("nodes", "edges"):
            items = data.get(section)
            if items is None:
                data[section] = {}
                continue
            if isinstance(items, dict):
                data[section] = {
                    name: {**item, "name": name} if isinstance(item, dict) else item
                    for name, item in items.items()
                }

        if data.get("imports") is None:
            data["imports"] = []

        return data

    def get_node_names(self) -> list[str]:
        """Get all node names."""
        return list(self.nodes.keys())
