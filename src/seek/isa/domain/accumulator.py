"""Merge-capable accumulator for graph traversals.

A single accumulator is threaded through every traversal of a request.
Nodes are keyed by identity and the first node seen for an object wins;
edges are kept in insertion order and deduplicated by value.
"""

from __future__ import annotations

from typing import Any

from isa.domain.exceptions import GraphSizeLimitExceededError
from isa.domain.value_objects import Edge, GraphNode, IdentityKey, IsaGraph, identity_of


class GraphAccumulator:
    """Ordered, deduplicating collection of nodes and edges."""

    def __init__(self, max_nodes: int | None = None):
        self._max_nodes = max_nodes
        self._nodes: dict[IdentityKey, GraphNode] = {}
        self._edges: dict[tuple[IdentityKey, IdentityKey], Edge] = {}

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def nodes(self) -> list[GraphNode]:
        return list(self._nodes.values())

    @property
    def edges(self) -> list[Edge]:
        return list(self._edges.values())

    def get(self, obj: Any) -> GraphNode | None:
        return self._nodes.get(identity_of(obj))

    def add_node(self, node: GraphNode) -> GraphNode:
        """Add a node unless one for the same object exists; return the kept node.

        Raises:
            GraphSizeLimitExceededError: If the node limit would be exceeded
        """
        existing = self._nodes.get(node.key)
        if existing is not None:
            return existing
        if self._max_nodes is not None and len(self._nodes) >= self._max_nodes:
            raise GraphSizeLimitExceededError(self._max_nodes)
        self._nodes[node.key] = node
        return node

    def add_edge(self, source: Any, target: Any) -> Edge:
        edge = Edge(source=source, target=target)
        return self._edges.setdefault(edge.key, edge)

    def discard(self, obj: Any) -> GraphNode | None:
        """Remove the node wrapping obj; edges touching it are kept."""
        return self._nodes.pop(identity_of(obj), None)

    def to_graph(self) -> IsaGraph:
        return IsaGraph(nodes=self.nodes, edges=self.edges)
