"""Recursive traversal engine of the ISA graph.

Walks children (descent) or parents (ascent) from an object, collecting
nodes and edges into a GraphAccumulator. The engine performs no cycle
detection; termination relies on depth limits or on the acyclic
relationship table.
"""

from __future__ import annotations

from isa.application.aggregation_builder import AggregationBuilder
from isa.application.association_resolver import AssociationResolver
from isa.domain.accumulator import GraphAccumulator
from isa.domain.value_objects import GraphNode, TraversalMode
from isa.ports.protocols import DomainObject
from shared_kernel.authorization.protocols import VisibilityPredicate


class TraversalEngine:
    """Builds partial ISA graphs by walking relations of domain objects.

    The engine holds no per-request state: every call receives the
    accumulator it writes into and the visibility predicate to apply.
    """

    def __init__(
        self,
        resolver: AssociationResolver,
        aggregations: AggregationBuilder | None = None,
    ):
        self._resolver = resolver
        self._aggregations = aggregations or AggregationBuilder(resolver)

    def descendants(
        self,
        obj: DomainObject,
        accumulator: GraphAccumulator,
        max_depth: int | None = None,
        visibility: VisibilityPredicate | None = None,
    ) -> GraphNode:
        """Collect obj, its children, related objects and aggregations."""
        return self.traverse(
            TraversalMode.CHILDREN, obj, accumulator, max_depth, 0, visibility
        )

    def ancestors(
        self,
        obj: DomainObject,
        accumulator: GraphAccumulator,
        max_depth: int | None = None,
        visibility: VisibilityPredicate | None = None,
    ) -> GraphNode:
        """Collect obj and its parents up to the top tier."""
        return self.traverse(
            TraversalMode.PARENTS, obj, accumulator, max_depth, 0, visibility
        )

    def traverse(
        self,
        mode: TraversalMode,
        obj: DomainObject,
        accumulator: GraphAccumulator,
        max_depth: int | None = None,
        depth: int = 0,
        visibility: VisibilityPredicate | None = None,
    ) -> GraphNode:
        """Walk relations of obj in the given direction.

        Relations are followed while max_depth is None, while depth is below
        max_depth, or when obj has exactly one related object. Single-object
        chains are therefore always expanded to the end.

        Edges always point from parent to child: (obj, child) in descent and
        (parent, obj) in ascent.

        Args:
            mode: TraversalMode.CHILDREN or TraversalMode.PARENTS
            obj: The object to start from
            accumulator: Receives nodes and edges; the first node seen for an
                object is kept
            max_depth: Depth limit, or None for unbounded traversal
            depth: Depth of obj relative to the traversal start
            visibility: Predicate setting `can_view`; None skips authorization

        Returns:
            The accumulated node for obj

        Raises:
            GraphSizeLimitExceededError: If the accumulator's node limit is hit
        """
        mode = TraversalMode(mode)
        node = accumulator.get(obj)
        is_new = node is None
        if node is None:
            node = GraphNode(object=obj)
            if visibility is not None:
                node.can_view = visibility(obj)
            accumulator.add_node(node)

        spec = self._resolver.resolve(obj)
        if mode is TraversalMode.CHILDREN:
            related = self._resolver.children_of(obj, spec)
            if is_new:
                node.child_count = len(related)
            self._aggregations.add_to(obj, accumulator, spec)
        else:
            related = self._resolver.parents_of(obj, spec)
            if is_new:
                node.child_count = len(self._resolver.children_of(obj, spec))

        if max_depth is None or depth < max_depth or len(related) == 1:
            for other in related:
                self.traverse(mode, other, accumulator, max_depth, depth + 1, visibility)
                if mode is TraversalMode.CHILDREN:
                    accumulator.add_edge(obj, other)
                else:
                    accumulator.add_edge(other, obj)

        return node
