"""Default implementation of the ISA graph probe.

Provides a structlog-based implementation of the IsaGraphProbe protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from isa.application.observability.isa_graph_probe import IsaGraphProbe

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class DefaultIsaGraphProbe(IsaGraphProbe):
    """Default implementation of IsaGraphProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def _event_kwargs(self, **fields: Any) -> dict[str, Any]:
        """Merge the bound context with event fields; event fields win."""
        return {**self._get_context_kwargs(), **fields}

    def with_context(self, context: ObservationContext) -> DefaultIsaGraphProbe:
        return DefaultIsaGraphProbe(logger=self._logger, context=context)

    def graph_generated(
        self,
        root: str,
        depth: int | None,
        include_parents: bool,
        node_count: int,
        edge_count: int,
    ) -> None:
        self._logger.info(
            "isa_graph_generated",
            **self._event_kwargs(
                root=root,
                depth=depth,
                include_parents=include_parents,
                node_count=node_count,
                edge_count=edge_count,
            ),
        )

    def graph_size_limit_exceeded(self, root: str, limit: int) -> None:
        self._logger.warning(
            "isa_graph_size_limit_exceeded",
            **self._event_kwargs(root=root, limit=limit),
        )

    def unknown_asset_type(self, asset_type: str) -> None:
        self._logger.debug(
            "isa_graph_unknown_asset_type",
            **self._event_kwargs(asset_type=asset_type),
        )
