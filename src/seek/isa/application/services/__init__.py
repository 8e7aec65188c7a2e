"""Application services for the ISA graph bounded context."""

from isa.application.services.generation_options import GenerationOptions
from isa.application.services.isa_graph_generator import IsaGraphGenerator

__all__ = [
    "GenerationOptions",
    "IsaGraphGenerator",
]
