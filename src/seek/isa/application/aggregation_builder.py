"""Aggregation of leaf collections into summary nodes."""

from __future__ import annotations

from typing import Any

from isa.application.association_resolver import AssociationResolver
from isa.domain.accumulator import GraphAccumulator
from isa.domain.value_objects import AggregationSummary, GraphNode, RelationshipSpec


class AggregationBuilder:
    """Collapses aggregated relations of an object into AggregationSummary nodes.

    Aggregation nodes are always visible: they stand for a count, not for
    the individual items, so no per-item authorization applies.
    """

    def __init__(self, resolver: AssociationResolver):
        self._resolver = resolver

    def build(
        self, obj: Any, spec: RelationshipSpec | None = None
    ) -> list[AggregationSummary]:
        """Return one summary per non-empty aggregated relation of obj."""
        return [
            AggregationSummary.of(obj, label, items)
            for label, items in self._resolver.aggregated_children_of(obj, spec).items()
            if items
        ]

    def add_to(
        self,
        obj: Any,
        accumulator: GraphAccumulator,
        spec: RelationshipSpec | None = None,
    ) -> list[AggregationSummary]:
        """Add the aggregation nodes of obj and their edges to the accumulator."""
        summaries = self.build(obj, spec)
        for summary in summaries:
            accumulator.add_node(GraphNode(object=summary, can_view=True))
            accumulator.add_edge(obj, summary)
        return summaries
