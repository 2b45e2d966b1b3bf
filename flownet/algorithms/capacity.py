"""Capacity matrices for flow networks.

A capacity matrix answers ``get(u, v)`` with the non-negative capacity of the
directed edge ``u -> v`` (zero when absent) for vertices ``1..n``.

Two variants are provided:

- ``DefaultCapacity`` answers 1 for every edge present in a graph and 0
  otherwise. It keeps only a reference to the graph.
- ``MatrixCapacity`` answers from a stored square table.

Both are read-only and can be shared across concurrent solver calls.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence, Tuple, Union

import networkx as nx
import numpy as np

from flownet.algorithms.common import is_integral, is_vertex
from flownet.errors import MalformedGraphError
from flownet.types import Capacity, Vertex


class CapacityMatrix(ABC):
    """Read-only capacity lookup over vertices ``1..n``."""

    @abstractmethod
    def dimension(self) -> int:
        """Return the number of vertices ``n`` this matrix covers."""

    @abstractmethod
    def _lookup(self, u: Vertex, v: Vertex) -> Capacity:
        """Return the capacity of ``u -> v`` for in-range vertices."""

    def get(self, u: Vertex, v: Vertex) -> Capacity:
        """Return the capacity of the directed edge ``u -> v``.

        Raises:
            IndexError: If either vertex is outside ``1..n``.
        """
        n = self.dimension()
        if not (1 <= u <= n and 1 <= v <= n):
            raise IndexError(f"Vertex pair ({u}, {v}) outside range 1..{n}.")
        return self._lookup(u, v)

    def __getitem__(self, pair: Tuple[Vertex, Vertex]) -> Capacity:
        u, v = pair
        return self.get(u, v)

    def __len__(self) -> int:
        return self.dimension()


class DefaultCapacity(CapacityMatrix):
    """Structural capacity: 1 for each edge of ``graph``, 0 otherwise."""

    def __init__(self, graph: nx.DiGraph) -> None:
        self.graph = graph

    def dimension(self) -> int:
        return self.graph.number_of_nodes()

    def _lookup(self, u: Vertex, v: Vertex) -> Capacity:
        return 1 if self.graph.has_edge(u, v) else 0

    def __repr__(self) -> str:
        return f"DefaultCapacity(n={self.dimension()})"


class MatrixCapacity(CapacityMatrix):
    """Explicit capacity table.

    Row ``u - 1``, column ``v - 1`` of ``matrix`` holds the capacity of
    ``u -> v``. The table is copied on construction.

    Args:
        matrix: Square, two-dimensional, non-negative numeric table (nested
            sequences or a numpy array).

    Raises:
        ValueError: If the table is not square or holds negative or
            non-numeric entries.

    Example:
        >>> caps = MatrixCapacity([[0, 10, 3], [0, 0, 5], [0, 0, 0]])
        >>> caps.get(1, 2)
        10
    """

    def __init__(self, matrix: Union[Sequence[Sequence[Capacity]], np.ndarray]) -> None:
        table = np.array(matrix)
        if table.size == 0:
            table = table.reshape(0, 0)
        if table.ndim != 2 or table.shape[0] != table.shape[1]:
            raise ValueError(
                "Capacity matrix must be square and two-dimensional, "
                f"got shape {table.shape}."
            )
        if table.dtype == np.bool_ or not np.issubdtype(table.dtype, np.number):
            raise ValueError(
                f"Capacity matrix must be numeric, got dtype '{table.dtype}'."
            )
        if (table < 0).any():
            raise ValueError("Capacity matrix entries must be non-negative.")
        table.setflags(write=False)
        self._matrix = table

    @classmethod
    def from_graph(
        cls,
        graph: nx.DiGraph,
        capacity_attr: str = "capacity",
        default_capacity: Capacity = 1,
    ) -> "MatrixCapacity":
        """Build a capacity table from edge attributes of ``graph``.

        Args:
            graph: Directed graph over vertices ``1..n``.
            capacity_attr: Edge attribute holding the capacity.
            default_capacity: Capacity used for edges missing the attribute.

        Returns:
            MatrixCapacity with the edge capacities and zeros elsewhere.

        Raises:
            MalformedGraphError: If an edge endpoint lies outside ``1..n``.
        """
        n = graph.number_of_nodes()
        entries = []
        for u, v, data in graph.edges(data=True):
            if not (is_vertex(u, n) and is_vertex(v, n)):
                raise MalformedGraphError(
                    f"Edge ({u!r}, {v!r}) references a vertex outside 1..{n}."
                )
            entries.append((u, v, data.get(capacity_attr, default_capacity)))

        integral = all(is_integral(c) for _, _, c in entries) and is_integral(
            default_capacity
        )
        table = np.zeros((n, n), dtype=np.int64 if integral else np.float64)
        for u, v, cap in entries:
            table[u - 1, v - 1] = cap
        return cls(table)

    def dimension(self) -> int:
        return int(self._matrix.shape[0])

    def _lookup(self, u: Vertex, v: Vertex) -> Capacity:
        return self._matrix[u - 1, v - 1].item()

    def to_numpy(self) -> np.ndarray:
        """Return a writable copy of the underlying table."""
        return self._matrix.copy()

    def __repr__(self) -> str:
        return f"MatrixCapacity(n={self.dimension()}, dtype={self._matrix.dtype})"
