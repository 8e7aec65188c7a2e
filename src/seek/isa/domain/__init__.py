"""ISA graph domain module.

Contains value objects, the static relationship table and the traversal
accumulator for the ISA graph bounded context.
"""

from isa.domain.accumulator import GraphAccumulator
from isa.domain.exceptions import GraphSizeLimitExceededError, IsaGraphError
from isa.domain.relationships import (
    EMPTY_RELATIONSHIP_SPEC,
    RELATIONSHIP_TABLE,
    lookup_asset_type,
    relationship_spec_for,
)
from isa.domain.value_objects import (
    AggregationSummary,
    AssetType,
    Edge,
    GraphNode,
    IsaGraph,
    RelationshipSpec,
    TraversalMode,
    asset_type_of,
    identity_of,
)

__all__ = [
    "AggregationSummary",
    "AssetType",
    "EMPTY_RELATIONSHIP_SPEC",
    "Edge",
    "GraphAccumulator",
    "GraphNode",
    "GraphSizeLimitExceededError",
    "IsaGraph",
    "IsaGraphError",
    "RELATIONSHIP_TABLE",
    "RelationshipSpec",
    "TraversalMode",
    "asset_type_of",
    "identity_of",
    "lookup_asset_type",
    "relationship_spec_for",
]
