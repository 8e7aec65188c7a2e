"""Protocol for ISA graph observability.

Defines the interface for domain probes that capture application-level
events of graph generation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IsaGraphProbe(Protocol):
    """Domain probe for ISA graph generation."""

    def graph_generated(
        self,
        root: str,
        depth: int | None,
        include_parents: bool,
        node_count: int,
        edge_count: int,
    ) -> None:
        """Record that a graph was generated for a root object."""
        ...

    def graph_size_limit_exceeded(self, root: str, limit: int) -> None:
        """Record that generation was aborted by the node limit."""
        ...

    def unknown_asset_type(self, asset_type: str) -> None:
        """Record that an object of an unconfigured type was treated as a leaf."""
        ...

    def with_context(self, context: ObservationContext) -> IsaGraphProbe:
        """Create a new probe with observation context bound."""
        ...
