"""ISA graph application layer.

Contains the association resolver, aggregation builder and traversal
engine, and the generator service that is the public API of the ISA graph
bounded context.
"""

from isa.application.aggregation_builder import AggregationBuilder
from isa.application.association_resolver import AssociationResolver
from isa.application.services import GenerationOptions, IsaGraphGenerator
from isa.application.traversal import TraversalEngine

__all__ = [
    "AggregationBuilder",
    "AssociationResolver",
    "GenerationOptions",
    "IsaGraphGenerator",
    "TraversalEngine",
]
