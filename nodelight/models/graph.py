"""Graph data models for node/edge records and selection input.

Includes Pydantic models mirroring the records a vis-network style node/edge
store hands out, plus the selection events and attribute filters that drive
highlighting.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator


class HighlightColor(BaseModel):
    """Colors a renderer uses while a node is hovered or selected."""

    background: str | None = Field(default=None, description="Fill color")
    border: str | None = Field(default=None, description="Outline color")


class StructuredColor(BaseModel):
    """A full color record (fill, outline and highlight variants)."""

    background: str | None = Field(default=None, description="Fill color")
    border: str | None = Field(default=None, description="Outline color")
    highlight: HighlightColor | None = Field(
        default=None, description="Colors used while the node is highlighted"
    )


# A node color is either a plain token ("#97C2FC", "rgba(...)", "red")
# or a structured record.
NodeColor = str | StructuredColor


class NodeRecord(BaseModel):
    """A node as held by the node store.

    ``hidden_label`` and ``saved_label`` are shadow fields owned by the
    highlight state machine: the first holds the label while the node is
    dimmed, the second while it is filtered out.
    """

    id: str = Field(description="Unique, stable node identifier")
    color: NodeColor | None = Field(default=None, description="Current node color")
    label: str | None = Field(default=None, description="Display label")
    hidden: bool = Field(default=False, description="Whether the node is hidden")
    hidden_label: str | None = Field(
        default=None,
        alias="hiddenLabel",
        description="Label stashed while the node is dimmed",
    )
    saved_label: str | None = Field(
        default=None,
        alias="savedLabel",
        description="Label stashed while the node is filtered out",
    )

    model_config = {"populate_by_name": True, "extra": "allow", "coerce_numbers_to_str": True}

    def property_value(self, name: str) -> Any:
        """Return a named property (declared field, alias or extra), or None."""
        return _lookup_property(self, name)


class EdgeRecord(BaseModel):
    """An edge as held by the edge store."""

    id: str = Field(description="Unique edge identifier")
    source: str = Field(alias="from", description="Source node ID")
    target: str = Field(alias="to", description="Target node ID")

    model_config = {"populate_by_name": True, "extra": "allow", "coerce_numbers_to_str": True}

    def property_value(self, name: str) -> Any:
        """Return a named property (declared field, alias or extra), or None."""
        return _lookup_property(self, name)


class SelectionEvent(BaseModel):
    """Payload delivered by the renderer on selection and click-elsewhere."""

    nodes: list[str] = Field(default_factory=list, description="Selected node IDs")

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}

    @field_validator("nodes", mode="before")
    @classmethod
    def _none_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class FilterCriteria(BaseModel):
    """Attribute-based selector for ``highlight_filter``."""

    item: Literal["node", "edge"] = Field(description="Which collection to scan")
    property: str = Field(description="Property name to compare")
    value: list[str] = Field(default_factory=list, description="Allowed textual values")


def _lookup_property(record: BaseModel, name: str) -> Any:
    fields = type(record).model_fields
    if name in fields:
        return getattr(record, name)
    for field_name, info in fields.items():
        if info.alias == name:
            return getattr(record, field_name)
    extra = record.model_extra or {}
    return extra.get(name)
