"""Domain value objects for the ISA graph bounded context.

Graph nodes, edges and aggregation summaries are transient: they are built
fresh for every graph request and discarded once the graph is rendered.
Equality is based on the identity of the wrapped domain object, never on
Python object identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from isa.domain.labels import humanize, pluralize, singularize

# Identity key of anything that can be wrapped by a GraphNode.
# Domain objects are keyed by (asset_type, id); aggregation summaries by
# (asset_type, id, type, count).
IdentityKey: TypeAlias = tuple[Any, ...]


class AssetType(StrEnum):
    """Asset types that take part in the ISA graph.

    Values match the class names of the hosting application's models, so an
    object without an explicit `asset_type` attribute dispatches on its
    class name.
    """

    PROGRAMME = "Programme"
    PROJECT = "Project"
    INVESTIGATION = "Investigation"
    STUDY = "Study"
    ASSAY = "Assay"
    PUBLICATION = "Publication"
    EVENT = "Event"
    DATA_FILE = "DataFile"
    DOCUMENT = "Document"
    MODEL = "Model"
    SOP = "Sop"
    SAMPLE = "Sample"
    PRESENTATION = "Presentation"


class TraversalMode(StrEnum):
    """Direction of a graph traversal."""

    CHILDREN = "children"
    PARENTS = "parents"


def asset_type_of(obj: Any) -> str:
    """Return the type name used for dispatch and identity of an object."""
    asset_type = getattr(obj, "asset_type", None)
    if asset_type is None:
        return type(obj).__name__
    return str(asset_type)


def identity_of(obj: Any) -> IdentityKey:
    """Return the identity key used for node and edge deduplication."""
    if isinstance(obj, AggregationSummary):
        return obj.key
    return (asset_type_of(obj), obj.id)


def format_key(key: IdentityKey) -> str:
    """Render an identity key as a stable string id, e.g. "Study-42"."""
    return "-".join(str(part) for part in key)


class RelationshipSpec(BaseModel):
    """Static relation configuration for one asset type.

    Attributes:
        children: Relations yielding child collections
        parents: Relations yielding parent collections
        related: Relations merged into the children during descent
        aggregated_children: Label to relation mapping; each relation is
            collapsed into a single AggregationSummary instead of being
            expanded item by item
    """

    model_config = ConfigDict(frozen=True)

    children: tuple[str, ...] = ()
    parents: tuple[str, ...] = ()
    related: tuple[str, ...] = ()
    aggregated_children: dict[str, str] = Field(default_factory=dict)


@dataclass(frozen=True, eq=False)
class AggregationSummary:
    """N children of one kind belonging to an object, shown as a single node.

    Two summaries are equal only when their counts match, so aggregating the
    same collection after it grew yields a distinct summary.
    """

    object: Any
    type: str
    count: int

    @classmethod
    def of(cls, obj: Any, label: str, items: list[Any]) -> AggregationSummary:
        return cls(object=obj, type=label, count=len(items))

    @property
    def key(self) -> IdentityKey:
        return (asset_type_of(self.object), self.object.id, self.type, self.count)

    @property
    def id(self) -> str:
        return format_key(self.key)

    @property
    def title(self) -> str:
        """Human-readable label, e.g. "5 samples"."""
        return pluralize(self.count, singularize(humanize(self.type)).lower())

    @property
    def avatar_key(self) -> str:
        """Icon key derived from the aggregated type, e.g. "sample_avatar"."""
        return f"{singularize(self.type)}_avatar"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AggregationSummary):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass(eq=False)
class GraphNode:
    """A node of the ISA graph wrapping a domain object or an aggregation.

    Attributes:
        object: The wrapped domain object or AggregationSummary
        child_count: Number of direct children found during traversal
        can_view: Visibility flag; None when authorization was not requested
    """

    object: Any
    child_count: int = 0
    can_view: bool | None = None

    @property
    def key(self) -> IdentityKey:
        return identity_of(self.object)

    @property
    def is_aggregation(self) -> bool:
        return isinstance(self.object, AggregationSummary)

    @property
    def title(self) -> str | None:
        if self.is_aggregation:
            return self.object.title
        return getattr(self.object, "title", None)

    @property
    def avatar_key(self) -> str | None:
        if self.is_aggregation:
            return self.object.avatar_key
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GraphNode):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": format_key(self.key),
            "title": self.title,
            "avatar_key": self.avatar_key,
            "child_count": self.child_count,
            "can_view": self.can_view,
            "aggregation": self.is_aggregation,
        }


@dataclass(frozen=True, eq=False)
class Edge:
    """Directed edge between two wrapped objects (parent to child)."""

    source: Any
    target: Any

    @property
    def source_key(self) -> IdentityKey:
        return identity_of(self.source)

    @property
    def target_key(self) -> IdentityKey:
        return identity_of(self.target)

    @property
    def key(self) -> tuple[IdentityKey, IdentityKey]:
        return (self.source_key, self.target_key)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)


@dataclass
class IsaGraph:
    """Result of a graph generation request."""

    nodes: list[GraphNode] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)

    def node_for(self, obj: Any) -> GraphNode | None:
        """Return the node wrapping the given object, if present."""
        key = identity_of(obj)
        return next((node for node in self.nodes if node.key == key), None)

    def as_dict(self) -> dict[str, list[Any]]:
        """Serialize for a rendering layer."""
        return {
            "nodes": [node.as_dict() for node in self.nodes],
            "edges": [
                [format_key(edge.source_key), format_key(edge.target_key)]
                for edge in self.edges
            ],
        }
