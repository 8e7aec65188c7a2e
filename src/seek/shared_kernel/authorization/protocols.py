"""Authorization predicate protocol.

Defines the interface the graph engine uses to decide whether a node is
visible, allowing the hosting application to plug in its own policy layer
(object methods, a policy service, or a stub in tests).
"""

from __future__ import annotations

from typing import Any, Protocol


class VisibilityPredicate(Protocol):
    """Protocol for object visibility checks.

    Implementations answer whether the current subject may view an object.
    Errors raised by an implementation indicate a fault in the hosting
    application and are not handled by callers.
    """

    def __call__(self, obj: Any) -> bool:
        """Return True if the object may be viewed."""
        ...
