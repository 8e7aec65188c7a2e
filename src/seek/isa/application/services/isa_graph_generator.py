"""ISA graph generator.

Application service building the graph shown around an asset: its own
descendants, and optionally its ancestors and the subtrees of its parents.
"""

from __future__ import annotations

from isa.application.association_resolver import AssociationResolver
from isa.application.observability import DefaultIsaGraphProbe, IsaGraphProbe
from isa.application.services.generation_options import GenerationOptions
from isa.application.traversal import TraversalEngine
from isa.domain.accumulator import GraphAccumulator
from isa.domain.exceptions import GraphSizeLimitExceededError
from isa.domain.value_objects import IsaGraph, asset_type_of
from isa.ports.protocols import DomainObject
from shared_kernel.authorization import (
    ObjectPermissionPredicate,
    VisibilityPredicate,
    format_resource,
)


class IsaGraphGenerator:
    """Application service for ISA graph generation.

    The generator holds only shared, immutable collaborators; every
    call to generate works on its own accumulator, so one instance can
    serve concurrent requests.
    """

    def __init__(
        self,
        resolver: AssociationResolver | None = None,
        engine: TraversalEngine | None = None,
        visibility: VisibilityPredicate | None = None,
        max_nodes: int | None = None,
        probe: IsaGraphProbe | None = None,
    ):
        """Initialize the generator.

        Args:
            resolver: Resolver for the relationship table.
            engine: Traversal engine; built from the resolver when omitted.
            visibility: Predicate used when auth is requested. Defaults to
                the objects' own `can_view` checks.
            max_nodes: Optional ceiling on the number of nodes per graph.
            probe: Optional domain probe for observability.
        """
        self._probe = probe or DefaultIsaGraphProbe()
        self._resolver = resolver or AssociationResolver(probe=self._probe)
        self._engine = engine or TraversalEngine(self._resolver)
        self._visibility = visibility or ObjectPermissionPredicate()
        self._max_nodes = max_nodes

    def generate(
        self,
        root: DomainObject,
        depth: int = 1,
        deep: bool = False,
        include_parents: bool = False,
        include_self: bool = True,
        auth: bool = True,
    ) -> IsaGraph:
        """Generate the graph around root.

        See GenerationOptions for the meaning of the arguments.

        Raises:
            GraphSizeLimitExceededError: If max_nodes is set and exceeded.
        """
        options = GenerationOptions(
            depth=depth,
            deep=deep,
            include_parents=include_parents,
            include_self=include_self,
            auth=auth,
        )
        return self.generate_with_options(root, options)

    def generate_with_options(
        self, root: DomainObject, options: GenerationOptions
    ) -> IsaGraph:
        """Generate the graph around root for prepared options."""
        root_ref = format_resource(asset_type_of(root), root.id)
        visibility = self._visibility if options.auth else None
        accumulator = GraphAccumulator(max_nodes=self._max_nodes)

        try:
            if options.include_parents:
                # Parents and siblings, then all ancestors
                for parent in self._resolver.parents_of(root):
                    self._engine.descendants(parent, accumulator, None, visibility)
                self._engine.ancestors(root, accumulator, None, visibility)

            # Self and descendants
            self._engine.descendants(root, accumulator, options.max_depth, visibility)
        except GraphSizeLimitExceededError as e:
            self._probe.graph_size_limit_exceeded(root=root_ref, limit=e.limit)
            raise

        if not options.include_self:
            accumulator.discard(root)

        graph = accumulator.to_graph()
        self._probe.graph_generated(
            root=root_ref,
            depth=options.max_depth,
            include_parents=options.include_parents,
            node_count=len(graph.nodes),
            edge_count=len(graph.edges),
        )
        return graph
