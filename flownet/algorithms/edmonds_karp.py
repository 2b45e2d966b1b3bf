"""Edmonds-Karp maximum flow.

Repeatedly augments along a shortest (fewest edges) source-to-target path in
the residual network, found by breadth-first search over edges whose residual
capacity exceeds ``MIN_FLOW``. Runs in O(V * E^2).
"""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Tuple

import networkx as nx

from flownet.algorithms.capacity import CapacityMatrix
from flownet.algorithms.common import (
    adjacency_lists,
    build_flow_assignment,
    edge_capacities,
)
from flownet.logging import get_logger
from flownet.types import MIN_FLOW, Capacity, Edge, FlowAssignment, Vertex

logger = get_logger(__name__)


def edmonds_karp(
    residual: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacities: CapacityMatrix,
) -> Tuple[Capacity, FlowAssignment]:
    """Compute maximum flow with BFS augmenting paths.

    Args:
        residual: Residual network (see ``residual_graph``).
        source: Source vertex.
        target: Target vertex.
        capacities: Capacity of each ordered pair.

    Returns:
        ``(flow_value, flow_assignment)`` where the assignment covers every
        ordered pair of ``residual``.
    """
    adjacency = adjacency_lists(residual)
    capacity = edge_capacities(residual, capacities)
    residual_cap = dict(capacity)

    total_flow: Capacity = 0
    augmentations = 0
    while True:
        path = _shortest_augmenting_path(adjacency, residual_cap, source, target)
        if not path:
            break

        bottleneck = min(residual_cap[edge] for edge in path)
        for u, v in path:
            residual_cap[(u, v)] -= bottleneck
            residual_cap[(v, u)] += bottleneck
        total_flow += bottleneck
        augmentations += 1

    logger.debug(
        "Edmonds-Karp %s -> %s: flow=%s after %d augmentations",
        source,
        target,
        total_flow,
        augmentations,
    )
    return total_flow, build_flow_assignment(capacity, residual_cap)


def _shortest_augmenting_path(
    adjacency: Dict[Vertex, List[Vertex]],
    residual_cap: Dict[Edge, Capacity],
    source: Vertex,
    target: Vertex,
) -> List[Edge]:
    """Return the edges of a fewest-edge augmenting path, or [] if none."""
    parent: Dict[Vertex, Vertex] = {source: source}
    queue = deque([source])
    while queue and target not in parent:
        u = queue.popleft()
        for v in adjacency[u]:
            if v not in parent and residual_cap[(u, v)] > MIN_FLOW:
                parent[v] = u
                if v == target:
                    break
                queue.append(v)

    if target not in parent:
        return []

    path: List[Edge] = []
    v = target
    while v != source:
        u = parent[v]
        path.append((u, v))
        v = u
    path.reverse()
    return path
