"""
Summary: Small adjacency-list graph with optional data and weighted links.
Why: Give algorithms a node/edge container that works oriented or not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from toolbox.features.alg.usecases.search import binary_search

T = TypeVar("T")


@dataclass(slots=True)
class Node(Generic[T]):
    """Graph node; ``id`` is unique for the lifetime of its graph."""

    id: int
    data: T | None = None


@dataclass(slots=True, frozen=True)
class Edge:
    """Directed link ``source -> target`` with an optional weight."""

    source: int
    target: int
    weight: float | None = None


class Graph(Generic[T]):
    """Oriented or non-oriented graph.

    Node ids increase monotonically and are never reused, so the node list
    stays sorted by id and lookups are binary searches. A non-oriented graph
    stores every link as two mirrored edges.
    """

    def __init__(self, oriented: bool = False) -> None:
        self._oriented = oriented
        self._nodes: list[Node[T]] = []
        self._ids: list[int] = []
        self._edges: list[Edge] = []
        self._next_id = 0

    @property
    def is_oriented(self) -> bool:
        return self._oriented

    @property
    def is_empty(self) -> bool:
        return not self._nodes

    @property
    def nodes_count(self) -> int:
        return len(self._nodes)

    @property
    def edges_count(self) -> int:
        """Number of links; a mirrored pair in a non-oriented graph counts once."""
        if self._oriented:
            return len(self._edges)
        return len(self._edges) // 2

    def _index_of(self, node_id: int) -> int | None:
        return binary_search(self._ids, node_id)

    def __contains__(self, node_id: object) -> bool:
        return isinstance(node_id, int) and self._index_of(node_id) is not None

    def node(self, node_id: int) -> Node[T]:
        idx = self._index_of(node_id)
        if idx is None:
            raise KeyError(node_id)
        return self._nodes[idx]

    def add_node(
        self,
        data: T | None = None,
        linked_from: int | None = None,
        weight: float | None = None,
    ) -> int:
        """Add a node, optionally linking ``linked_from -> new node``.

        Returns:
            int: Id of the new node.

        Raises:
            KeyError: If ``linked_from`` is not a node of this graph.
        """
        if linked_from is not None and linked_from not in self:
            raise KeyError(linked_from)

        node_id = self._next_id
        self._next_id += 1
        self._nodes.append(Node(node_id, data))
        self._ids.append(node_id)
        if linked_from is not None:
            self.add_link(linked_from, node_id, weight)
        return node_id

    def add_link(self, source: int, target: int, weight: float | None = None) -> None:
        """Link ``source -> target``; non-oriented graphs also get ``target -> source``.

        Raises:
            KeyError: If either end is not a node of this graph.
        """
        for node_id in (source, target):
            if node_id not in self:
                raise KeyError(node_id)
        self._edges.append(Edge(source, target, weight))
        if not self._oriented:
            self._edges.append(Edge(target, source, weight))

    def remove_node(self, node_id: int) -> None:
        """Remove a node and every edge touching it; unknown ids are ignored."""
        idx = self._index_of(node_id)
        if idx is None:
            return
        del self._nodes[idx]
        del self._ids[idx]
        self._edges = [e for e in self._edges if node_id not in (e.source, e.target)]

    def neighbors(self, node_id: int) -> list[tuple[int, float | None]]:
        """Nodes reachable from ``node_id`` in one step, with link weights."""
        if node_id not in self:
            raise KeyError(node_id)
        return [(e.target, e.weight) for e in self._edges if e.source == node_id]


__all__ = ["Edge", "Graph", "Node"]
