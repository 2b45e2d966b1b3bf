"""NetworkX graph conversion utilities.

Flow algorithms index vertices ``1..n``. ``from_networkx`` relabels any
NetworkX graph to that numbering and extracts its capacities, and
``flow_by_name`` maps a flow assignment back to the original node names.

Example:
    >>> import networkx as nx
    >>> from flownet import from_networkx, maximum_flow
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=10)
    >>> G.add_edge("a", "t", capacity=5)
    >>>
    >>> graph, node_map, caps = from_networkx(G)
    >>> value, flow = maximum_flow(
    ...     graph, node_map.to_index["s"], node_map.to_index["t"], caps
    ... )
    >>> value
    5
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Tuple, Union

import numpy as np

from flownet.algorithms.capacity import MatrixCapacity
from flownet.algorithms.common import is_integral
from flownet.graph.indexed_digraph import IndexedDiGraph
from flownet.types import Capacity, FlowAssignment, Vertex

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices ``1..n``.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        1
        >>> node_map.to_name[2]
        'B'
    """

    to_index: Dict[Hashable, Vertex] = field(default_factory=dict)
    to_name: Dict[Vertex, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap numbering ``names`` from 1 in list order."""
        to_index = {name: i for i, name in enumerate(names, start=1)}
        to_name = {i: name for i, name in enumerate(names, start=1)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    capacity_attr: str = "capacity",
    default_capacity: Capacity = 1,
) -> Tuple[IndexedDiGraph, NodeMap, MatrixCapacity]:
    """Convert a NetworkX graph to an indexed flow network.

    Nodes are numbered from 1 in ``G.nodes`` order. Undirected edges become a
    pair of opposite directed edges with the same capacity. Parallel edges of
    multigraphs are consolidated and their capacities summed.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        capacity_attr: Edge attribute name for capacity.
        default_capacity: Capacity for edges missing the attribute.

    Returns:
        ``(graph, node_map, capacities)``. Each edge of ``graph`` also carries
        its consolidated capacity as the ``capacity`` attribute.

    Raises:
        ValueError: If a capacity is negative.
    """
    node_map = NodeMap.from_names(list(G.nodes))
    n = len(node_map)

    consolidated: Dict[Tuple[Vertex, Vertex], Capacity] = {}
    for u, v, data in G.edges(data=True):
        cap = data.get(capacity_attr, default_capacity)
        if cap < 0:
            raise ValueError(f"Edge ({u!r}, {v!r}) has negative capacity {cap}.")
        iu, iv = node_map.to_index[u], node_map.to_index[v]
        pairs = [(iu, iv)] if G.is_directed() or iu == iv else [(iu, iv), (iv, iu)]
        for pair in pairs:
            consolidated[pair] = consolidated.get(pair, 0) + cap

    graph = IndexedDiGraph(n)
    for (iu, iv), cap in consolidated.items():
        graph.add_edge(iu, iv, capacity=cap)

    integral = all(is_integral(c) for c in consolidated.values())
    table = np.zeros((n, n), dtype=np.int64 if integral else np.float64)
    for (iu, iv), cap in consolidated.items():
        table[iu - 1, iv - 1] = cap
    return graph, node_map, MatrixCapacity(table)


def flow_by_name(
    flow: FlowAssignment, node_map: NodeMap, *, positive_only: bool = True
) -> Dict[Hashable, Dict[Hashable, Capacity]]:
    """Map a flow assignment back to original node names.

    Args:
        flow: Net flow per ordered vertex pair.
        node_map: Mapping produced by ``from_networkx``.
        positive_only: If True, keep only pairs carrying positive flow.

    Returns:
        Nested dict ``{u_name: {v_name: flow}}`` in the style of
        ``networkx.maximum_flow``.
    """
    result: Dict[Hashable, Dict[Hashable, Capacity]] = {}
    for (u, v), amount in flow.items():
        if positive_only and amount <= 0:
            continue
        result.setdefault(node_map.to_name[u], {})[node_map.to_name[v]] = amount
    return result
