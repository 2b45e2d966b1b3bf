"""Dinic's blocking-flow maximum flow.

Each phase builds a level graph by BFS from the source and then saturates it
with a blocking flow. At most O(V) phases are needed and each blocking flow
costs O(V * E), for O(V^2 * E) overall.

The blocking-flow search is an explicit-stack DFS so deep networks do not hit
the interpreter recursion limit.
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


def dinic(
    residual: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacities: CapacityMatrix,
) -> Tuple[Capacity, FlowAssignment]:
    """Compute maximum flow with Dinic's algorithm.

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
    phases = 0
    while True:
        level = _build_levels(adjacency, residual_cap, source, target)
        if target not in level:
            break
        phases += 1
        phase_flow = _blocking_flow(adjacency, residual_cap, level, source, target)
        logger.debug(
            "Dinic phase %d: target level %d, blocking flow %s",
            phases,
            level[target],
            phase_flow,
        )
        total_flow += phase_flow

    logger.debug(
        "Dinic %s -> %s: flow=%s in %d phases", source, target, total_flow, phases
    )
    return total_flow, build_flow_assignment(capacity, residual_cap)


def _build_levels(
    adjacency: Dict[Vertex, List[Vertex]],
    residual_cap: Dict[Edge, Capacity],
    source: Vertex,
    target: Vertex,
) -> Dict[Vertex, int]:
    """BFS distances from ``source`` over positive-residual edges.

    Vertices farther than the target are never useful in the phase, so the
    search stops expanding once the target's level is known.
    """
    level = {source: 0}
    queue = deque([source])
    while queue:
        u = queue.popleft()
        if target in level and level[u] >= level[target]:
            break
        for v in adjacency[u]:
            if v not in level and residual_cap[(u, v)] > MIN_FLOW:
                level[v] = level[u] + 1
                queue.append(v)
    return level


def _blocking_flow(
    adjacency: Dict[Vertex, List[Vertex]],
    residual_cap: Dict[Edge, Capacity],
    level: Dict[Vertex, int],
    source: Vertex,
    target: Vertex,
) -> Capacity:
    """Saturate the level graph and return the flow pushed in this phase.

    ``pointer[u]`` indexes the next edge of ``u`` to try. It only moves
    forward, so an exhausted edge is never revisited within the phase.
    """
    pointer = {u: 0 for u in adjacency}
    path: List[Vertex] = [source]
    phase_flow: Capacity = 0

    while path:
        u = path[-1]

        if u == target:
            edges = list(zip(path, path[1:]))
            bottleneck = min(residual_cap[edge] for edge in edges)
            for a, b in edges:
                residual_cap[(a, b)] -= bottleneck
                residual_cap[(b, a)] += bottleneck
            phase_flow += bottleneck
            # Retreat to the tail of the first saturated edge.
            for i, edge in enumerate(edges):
                if residual_cap[edge] <= MIN_FLOW:
                    del path[i + 1 :]
                    break
            continue

        neighbors = adjacency[u]
        next_level = level[u] + 1
        while pointer[u] < len(neighbors):
            v = neighbors[pointer[u]]
            if residual_cap[(u, v)] > MIN_FLOW and level.get(v) == next_level:
                path.append(v)
                break
            pointer[u] += 1
        else:
            # Dead end: drop u and skip the edge that led here.
            path.pop()
            if path:
                pointer[path[-1]] += 1

    return phase_flow
