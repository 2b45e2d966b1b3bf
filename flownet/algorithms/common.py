"""Helpers shared by the flow algorithms.

Every algorithm keeps its mutable state in a residual-capacity ``dict`` keyed
by ordered vertex pair. The net flow on a pair is recovered at the end as
``capacity(u, v) - residual(u, v)``, which is skew-symmetric because each
augmentation debits ``(u, v)`` and credits ``(v, u)`` by the same amount.
Reverse edges added by ``residual_graph`` have capacity 0 whatever the
capacity matrix holds for that pair.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

import networkx as nx
import numpy as np

from flownet.types import Capacity, Edge, FlowAssignment, Vertex

if TYPE_CHECKING:
    from flownet.algorithms.capacity import CapacityMatrix


def is_vertex(node: Any, n: int) -> bool:
    """Return True if ``node`` is an integer vertex index in ``1..n``."""
    return (
        isinstance(node, (int, np.integer))
        and not isinstance(node, bool)
        and 1 <= node <= n
    )


def is_integral(value: Any) -> bool:
    """Return True for integer (non-bool) numbers, including numpy integers."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def adjacency_lists(residual: nx.DiGraph) -> Dict[Vertex, List[Vertex]]:
    """Snapshot successor lists of ``residual`` in node insertion order.

    Algorithms walk these lists with integer pointers, so they must not
    change during a run.
    """
    return {u: list(residual.successors(u)) for u in residual.nodes}


def edge_capacities(
    residual: nx.DiGraph, capacities: CapacityMatrix
) -> Dict[Edge, Capacity]:
    """Return the capacity of every residual edge.

    Edges marked ``reverse`` by ``residual_graph`` are not edges of the input
    graph and get 0.
    """
    return {
        (u, v): 0 if reverse else capacities.get(u, v)
        for u, v, reverse in residual.edges(data="reverse", default=False)
    }


def build_flow_assignment(
    capacity: Dict[Edge, Capacity], residual_cap: Dict[Edge, Capacity]
) -> FlowAssignment:
    """Convert final residual capacities into net flow per ordered pair."""
    return {
        (u, v): capacity[(u, v)] - remaining
        for (u, v), remaining in residual_cap.items()
    }
