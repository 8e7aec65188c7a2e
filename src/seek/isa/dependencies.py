"""Dependency composition for the ISA graph bounded context.

Builds the generator from settings so that hosting applications only
supply the observation context of a request.
"""

from infrastructure.settings import get_isa_graph_settings
from isa.application.association_resolver import AssociationResolver
from isa.application.observability import DefaultIsaGraphProbe
from isa.application.services import IsaGraphGenerator
from isa.application.traversal import TraversalEngine
from shared_kernel.authorization import ObjectPermissionPredicate
from shared_kernel.observability_context import ObservationContext


def get_isa_graph_generator(
    context: ObservationContext | None = None,
) -> IsaGraphGenerator:
    """Get an IsaGraphGenerator configured from settings.

    Args:
        context: Optional request-scoped observation context bound to the
            generator's probe

    Returns:
        IsaGraphGenerator using the configured node limit and permission
    """
    settings = get_isa_graph_settings()
    probe = DefaultIsaGraphProbe()
    if context is not None:
        probe = probe.with_context(context)

    resolver = AssociationResolver(probe=probe)
    return IsaGraphGenerator(
        resolver=resolver,
        engine=TraversalEngine(resolver),
        visibility=ObjectPermissionPredicate(settings.visibility_permission),
        max_nodes=settings.max_nodes,
        probe=probe,
    )
