"""Domain probes for the ISA graph application layer."""

from isa.application.observability.isa_graph_probe import IsaGraphProbe
from isa.application.observability.default_isa_graph_probe import (
    DefaultIsaGraphProbe,
)

__all__ = [
    "IsaGraphProbe",
    "DefaultIsaGraphProbe",
]
