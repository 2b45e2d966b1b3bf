"""flownet: maximum flow on directed capacitated networks.

flownet computes maximum flows and minimum cuts between a source and a target
vertex with one of three interchangeable algorithms, returning the flow value
and a per-edge flow assignment.

Primary API:
    maximum_flow() - Flow value and assignment for one (source, target) pair
    minimum_cut() - Source/sink partition and cut value
    FlowAlgorithm - EDMONDS_KARP, DINIC or PUSH_RELABEL (default)
    DefaultCapacity, MatrixCapacity - Capacity matrices
    IndexedDiGraph - Directed graph over vertices 1..n
    from_networkx() - Convert any NetworkX graph

Example:
    from flownet import FlowAlgorithm, IndexedDiGraph, MatrixCapacity, maximum_flow

    g = IndexedDiGraph.from_edges(3, [(1, 2, 10), (2, 3, 5), (1, 3, 3)])
    value, flow = maximum_flow(
        g, 1, 3, MatrixCapacity.from_graph(g), FlowAlgorithm.DINIC
    )
    assert value == 8
"""

from __future__ import annotations

from flownet import logging
from flownet._version import __version__
from flownet.algorithms.capacity import CapacityMatrix, DefaultCapacity, MatrixCapacity
from flownet.algorithms.residual import residual_graph
from flownet.config import DEFAULT_CONFIG, MaxFlowConfig
from flownet.errors import (
    DimensionMismatchError,
    FlowNetworkError,
    InvalidEndpointsError,
    MalformedGraphError,
)
from flownet.graph.convert import NodeMap, flow_by_name, from_networkx
from flownet.graph.indexed_digraph import IndexedDiGraph
from flownet.solver.maxflow import maximum_flow, minimum_cut
from flownet.types import MIN_FLOW, FlowAlgorithm, FlowAssignment, FlowSummary

__all__ = [
    # Version
    "__version__",
    # Solver (primary API)
    "maximum_flow",
    "minimum_cut",
    "MaxFlowConfig",
    "DEFAULT_CONFIG",
    # Types
    "FlowAlgorithm",
    "FlowAssignment",
    "FlowSummary",
    "MIN_FLOW",
    # Capacities and residual network
    "CapacityMatrix",
    "DefaultCapacity",
    "MatrixCapacity",
    "residual_graph",
    # Graphs
    "IndexedDiGraph",
    "NodeMap",
    "from_networkx",
    "flow_by_name",
    # Errors
    "FlowNetworkError",
    "InvalidEndpointsError",
    "DimensionMismatchError",
    "MalformedGraphError",
    # Utilities
    "logging",
]
