"""Minimum cut and flow summary derived from a computed maximum flow."""

from __future__ import annotations

from typing import Dict, List, Set

import networkx as nx

from flownet.algorithms.capacity import CapacityMatrix
from flownet.algorithms.common import edge_capacities
from flownet.types import (
    MIN_FLOW,
    Capacity,
    Edge,
    FlowAlgorithm,
    FlowAssignment,
    FlowSummary,
    Vertex,
)


def residual_capacities(
    capacity: Dict[Edge, Capacity], flow: FlowAssignment
) -> Dict[Edge, Capacity]:
    """Return ``capacity - flow`` for every ordered pair of ``flow``."""
    return {(u, v): capacity[(u, v)] - f for (u, v), f in flow.items()}


def reachable_from(
    residual: nx.DiGraph,
    source: Vertex,
    residual_cap: Dict[Edge, Capacity],
) -> Set[Vertex]:
    """Vertices reachable from ``source`` over residual capacity above ``MIN_FLOW``.

    After a maximum flow this is the source side of a minimum cut.
    """
    reachable = {source}
    stack = [source]
    while stack:
        u = stack.pop()
        for v in residual.successors(u):
            if v not in reachable and residual_cap[(u, v)] > MIN_FLOW:
                reachable.add(v)
                stack.append(v)
    return reachable


def cut_edges(
    residual: nx.DiGraph, reachable: Set[Vertex], capacity: Dict[Edge, Capacity]
) -> List[Edge]:
    """Edges with positive capacity leaving ``reachable``, sorted."""
    return sorted(
        (u, v)
        for u, v in residual.edges()
        if u in reachable and v not in reachable and capacity[(u, v)] > 0
    )


def build_flow_summary(
    residual: nx.DiGraph,
    source: Vertex,
    capacities: CapacityMatrix,
    total_flow: Capacity,
    flow: FlowAssignment,
    algorithm: FlowAlgorithm,
) -> FlowSummary:
    """Construct a ``FlowSummary`` from a finished run."""
    capacity = edge_capacities(residual, capacities)
    residual_cap = residual_capacities(capacity, flow)
    reachable = reachable_from(residual, source, residual_cap)
    return FlowSummary(
        total_flow=total_flow,
        edge_flow=flow,
        residual_cap=residual_cap,
        reachable=reachable,
        min_cut=cut_edges(residual, reachable, capacity),
        algorithm=algorithm,
    )
