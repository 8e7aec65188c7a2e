"""Observation context for domain-oriented observability.

Observation contexts carry request-scoped metadata that probes attach to
every event they emit.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable metadata bound to probe events.

    Attributes:
        request_id: Identifier of the request that triggered the operation.
        user_id: Identifier of the user the graph is rendered for.
        root: Identity of the root object of a graph request, formatted as
            "Type:id" (e.g. "Study:42").
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(request_id="req-1", user_id="user-7")
        probe = DefaultIsaGraphProbe().with_context(context.with_root("Study", 42))
    """

    request_id: str | None = None
    user_id: str | None = None
    root: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.user_id is not None:
            result["user_id"] = self.user_id
        if self.root is not None:
            result["root"] = self.root
        result.update(self.extra)
        return result

    def with_root(self, asset_type: str, object_id: Any) -> ObservationContext:
        """Create a new context describing the root of a graph request."""
        return replace(self, root=f"{asset_type}:{object_id}")

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return replace(self, extra={**self.extra, **kwargs})
