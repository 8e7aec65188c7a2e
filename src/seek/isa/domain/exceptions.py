"""Exceptions for the ISA graph bounded context.

Unknown asset types and missing relations are not errors: they resolve to
empty relation sets. Faults raised by collaborators (relation accessors,
visibility predicates) are never wrapped and reach the caller unchanged.
"""


class IsaGraphError(Exception):
    """Base exception for ISA graph generation."""

    pass


class GraphSizeLimitExceededError(IsaGraphError):
    """Raised when a traversal accumulates more nodes than allowed."""

    def __init__(self, limit: int):
        super().__init__(f"ISA graph exceeds the limit of {limit} nodes")
        self.limit = limit
