"""Directed graph over a contiguous vertex set ``1..n``.

`IndexedDiGraph` extends `networkx.DiGraph` so the vertex set always stays
``{1, ..., n}``, which is what the flow algorithms and capacity matrices
index by. Edges carry arbitrary attributes; ``capacity`` is the attribute
read by ``MatrixCapacity.from_graph``.
"""

from __future__ import annotations

from pickle import dumps, loads
from typing import Any, Iterable, Optional, Sequence, Tuple, Union

import networkx as nx

from flownet.types import Capacity, Vertex

EdgeSpec = Union[Tuple[Vertex, Vertex], Tuple[Vertex, Vertex, Capacity]]


class IndexedDiGraph(nx.DiGraph):
    """A directed graph whose vertices are exactly ``1..n``.

    This class enforces:
      - Vertices are appended in order; adding any node other than ``n + 1``
        raises ValueError.
      - No automatic creation of missing vertices when adding an edge.
      - Removing a non-existent edge raises ValueError.
      - Only the highest-numbered vertex may be removed.
      - ``copy()`` performs a pickle-based deep copy.

    Args:
        n: Number of vertices to create.
        **attr: Graph attributes forwarded to ``networkx.DiGraph``.

    Example:
        >>> g = IndexedDiGraph(3)
        >>> g.add_edge(1, 2, capacity=10)
        >>> g.nv
        3
    """

    def __init__(self, n: int = 0, **attr: Any) -> None:
        super().__init__(**attr)
        if n < 0:
            raise ValueError(f"Vertex count must be non-negative, got {n}.")
        for vertex in range(1, n + 1):
            self.add_node(vertex)

    @classmethod
    def from_edges(cls, n: int, edges: Iterable[EdgeSpec]) -> "IndexedDiGraph":
        """Build a graph from ``(u, v)`` pairs or ``(u, v, capacity)`` triples.

        Args:
            n: Number of vertices.
            edges: Edge specifications. A third element is stored as the
                edge's ``capacity`` attribute.

        Returns:
            IndexedDiGraph with ``n`` vertices and the given edges.
        """
        graph = cls(n)
        for spec in edges:
            if len(spec) == 3:
                u, v, cap = spec  # type: ignore[misc]
                graph.add_edge(u, v, capacity=cap)
            else:
                u, v = spec  # type: ignore[misc]
                graph.add_edge(u, v)
        return graph

    @property
    def nv(self) -> int:
        """Number of vertices."""
        return self.number_of_nodes()

    def copy(self, as_view: bool = False) -> "IndexedDiGraph":  # type: ignore[override]
        """Return a deep copy of this graph, or a read-only view if ``as_view``."""
        if as_view:
            return super().copy(as_view=True)  # type: ignore[return-value]
        return loads(dumps(self))

    #
    # Vertex management
    #
    def add_vertex(self, **attr: Any) -> Vertex:
        """Append vertex ``n + 1`` and return its index."""
        vertex = self.number_of_nodes() + 1
        super().add_node(vertex, **attr)
        return vertex

    def add_vertices(self, count: int) -> Sequence[Vertex]:
        """Append ``count`` vertices and return their indices."""
        return [self.add_vertex() for _ in range(count)]

    def add_node(self, node_for_adding: Vertex, **attr: Any) -> None:
        """Add vertex ``n + 1``; any other node is rejected.

        Raises:
            ValueError: If ``node_for_adding`` is not the next vertex index.
        """
        expected = self.number_of_nodes() + 1
        if node_for_adding != expected or isinstance(node_for_adding, bool):
            raise ValueError(
                f"Next vertex must be {expected}, got {node_for_adding!r}."
            )
        super().add_node(node_for_adding, **attr)

    def add_nodes_from(self, nodes_for_adding: Iterable[Any], **attr: Any) -> None:
        for item in nodes_for_adding:
            if isinstance(item, tuple) and len(item) == 2 and isinstance(item[1], dict):
                self.add_node(item[0], **{**attr, **item[1]})
            else:
                self.add_node(item, **attr)

    def remove_node(self, n: Vertex) -> None:
        """Remove the highest-numbered vertex and its incident edges.

        Raises:
            ValueError: If ``n`` is not the highest-numbered vertex.
        """
        if n != self.number_of_nodes() or n not in self:
            raise ValueError(
                f"Only vertex {self.number_of_nodes()} can be removed, got {n!r}."
            )
        super().remove_node(n)

    def remove_nodes_from(self, nodes: Iterable[Vertex]) -> None:
        for node in sorted(nodes, reverse=True):
            self.remove_node(node)

    #
    # Edge management
    #
    def add_edge(self, u_of_edge: Vertex, v_of_edge: Vertex, **attr: Any) -> None:
        """Add a directed edge between existing vertices.

        Adding an edge that already exists updates its attributes.

        Raises:
            ValueError: If either vertex does not exist.
        """
        if u_of_edge not in self:
            raise ValueError(f"Source vertex {u_of_edge!r} does not exist.")
        if v_of_edge not in self:
            raise ValueError(f"Target vertex {v_of_edge!r} does not exist.")
        super().add_edge(u_of_edge, v_of_edge, **attr)

    def add_edges_from(self, ebunch_to_add: Iterable[Any], **attr: Any) -> None:
        for edge in ebunch_to_add:
            if len(edge) == 3:
                u, v, data = edge
                self.add_edge(u, v, **{**attr, **data})
            else:
                u, v = edge
                self.add_edge(u, v, **attr)

    def remove_edge(self, u: Vertex, v: Vertex) -> None:
        """Remove the edge ``u -> v``.

        Raises:
            ValueError: If the edge does not exist.
        """
        if not self.has_edge(u, v):
            raise ValueError(f"No edge from {u!r} to {v!r} to remove.")
        super().remove_edge(u, v)

    def capacity(
        self, u: Vertex, v: Vertex, default: Optional[Capacity] = None
    ) -> Capacity:
        """Return the ``capacity`` attribute of ``u -> v``.

        Args:
            u: Source vertex.
            v: Target vertex.
            default: Value for an edge without a ``capacity`` attribute.

        Raises:
            ValueError: If the edge does not exist, or has no capacity and no
                default was given.
        """
        if not self.has_edge(u, v):
            raise ValueError(f"No edge from {u!r} to {v!r}.")
        data = self[u][v]
        if "capacity" in data:
            return data["capacity"]
        if default is None:
            raise ValueError(f"Edge ({u!r}, {v!r}) has no capacity attribute.")
        return default
