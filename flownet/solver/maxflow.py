"""Maximum-flow entry points.

``maximum_flow`` resolves defaults once, validates the endpoints and capacity
dimension, builds the residual network and dispatches to the selected
algorithm. ``minimum_cut`` derives the source/sink partition from that flow.

Example:
    >>> import networkx as nx
    >>> from flownet import FlowAlgorithm, MatrixCapacity, maximum_flow
    >>> g = nx.DiGraph()
    >>> g.add_nodes_from([1, 2, 3])
    >>> g.add_edges_from([(1, 2), (2, 3), (1, 3)])
    >>> caps = MatrixCapacity([[0, 10, 3], [0, 0, 5], [0, 0, 0]])
    >>> value, flow = maximum_flow(g, 1, 3, caps, FlowAlgorithm.DINIC)
    >>> value
    8
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Dict, Literal, Optional, Set, Tuple, Union, overload

import networkx as nx

from flownet.algorithms.capacity import CapacityMatrix
from flownet.algorithms.common import is_vertex
from flownet.algorithms.dinic import dinic
from flownet.algorithms.edmonds_karp import edmonds_karp
from flownet.algorithms.min_cut import build_flow_summary
from flownet.algorithms.push_relabel import push_relabel
from flownet.algorithms.residual import residual_graph
from flownet.config import DEFAULT_CONFIG, MaxFlowConfig
from flownet.errors import DimensionMismatchError, InvalidEndpointsError
from flownet.logging import get_logger
from flownet.types import Capacity, FlowAlgorithm, FlowAssignment, FlowSummary, Vertex

logger = get_logger(__name__)

FlowFunc = Callable[
    [nx.DiGraph, Vertex, Vertex, CapacityMatrix], Tuple[Capacity, FlowAssignment]
]

_ALGORITHMS: Dict[FlowAlgorithm, FlowFunc] = {
    FlowAlgorithm.EDMONDS_KARP: edmonds_karp,
    FlowAlgorithm.DINIC: dinic,
    FlowAlgorithm.PUSH_RELABEL: push_relabel,
}


@overload
def maximum_flow(
    graph: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacity_matrix: Optional[CapacityMatrix] = None,
    algorithm: Union[FlowAlgorithm, str, None] = None,
    *,
    config: Optional[MaxFlowConfig] = None,
    return_summary: Literal[False] = False,
) -> Tuple[Capacity, FlowAssignment]: ...


@overload
def maximum_flow(
    graph: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacity_matrix: Optional[CapacityMatrix] = None,
    algorithm: Union[FlowAlgorithm, str, None] = None,
    *,
    config: Optional[MaxFlowConfig] = None,
    return_summary: Literal[True],
) -> Tuple[Capacity, FlowAssignment, FlowSummary]: ...


def maximum_flow(
    graph: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacity_matrix: Optional[CapacityMatrix] = None,
    algorithm: Union[FlowAlgorithm, str, None] = None,
    *,
    config: Optional[MaxFlowConfig] = None,
    return_summary: bool = False,
) -> tuple:
    """Compute the maximum flow from ``source`` to ``target``.

    Args:
        graph: Directed graph over vertices ``1..n``. Never mutated.
        source: Source vertex.
        target: Target vertex.
        capacity_matrix: Edge capacities. Overrides ``config.capacity_matrix``.
            Defaults to one unit per edge of ``graph``.
        algorithm: Strategy, as a ``FlowAlgorithm`` or its name. Overrides
            ``config.algorithm``. Defaults to push-relabel.
        config: Base configuration. Defaults to ``DEFAULT_CONFIG``.
        return_summary: If True, also return a ``FlowSummary`` with residual
            capacities and the minimum cut.

    Returns:
        ``(flow_value, flow_assignment)``, or
        ``(flow_value, flow_assignment, summary)`` with ``return_summary``.
        The assignment maps every ordered pair of the residual network to its
        net flow.

    Raises:
        InvalidEndpointsError: If ``source == target`` or either is outside
            ``1..n``.
        DimensionMismatchError: If the capacity matrix dimension differs from
            the vertex count.
        MalformedGraphError: If the graph is undirected or its vertices or
            edge endpoints are not within ``1..n``.
    """
    cfg = _resolve_config(config, capacity_matrix, algorithm)
    n = graph.number_of_nodes()
    _validate_endpoints(source, target, n)

    capacities = cfg.capacities_for(graph)
    if capacities.dimension() != n:
        raise DimensionMismatchError(
            f"Capacity matrix covers {capacities.dimension()} vertices "
            f"but the graph has {n}."
        )

    residual = residual_graph(graph)
    algo = FlowAlgorithm(cfg.algorithm)
    logger.debug(
        "Solving max flow %s -> %s on %d vertices with %s", source, target, n, algo.name
    )
    flow_value, flow = _ALGORITHMS[algo](residual, source, target, capacities)

    if not return_summary:
        return flow_value, flow
    summary = build_flow_summary(residual, source, capacities, flow_value, flow, algo)
    return flow_value, flow, summary


def minimum_cut(
    graph: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacity_matrix: Optional[CapacityMatrix] = None,
    algorithm: Union[FlowAlgorithm, str, None] = None,
    *,
    config: Optional[MaxFlowConfig] = None,
) -> Tuple[Set[Vertex], Set[Vertex], Capacity]:
    """Compute a minimum ``source``-``target`` cut.

    Arguments and errors are as for ``maximum_flow``.

    Returns:
        ``(source_side, sink_side, cut_value)``. ``source_side`` holds the
        vertices reachable from ``source`` in the final residual network and
        ``cut_value`` is the total capacity of edges crossing from it to
        ``sink_side``, which equals the maximum flow value.
    """
    _, _, summary = maximum_flow(
        graph,
        source,
        target,
        capacity_matrix,
        algorithm,
        config=config,
        return_summary=True,
    )
    capacities = _resolve_config(config, capacity_matrix, algorithm).capacities_for(
        graph
    )
    source_side = set(summary.reachable)
    sink_side = set(range(1, graph.number_of_nodes() + 1)) - source_side
    cut_value = sum(capacities.get(u, v) for u, v in summary.min_cut)
    return source_side, sink_side, cut_value


def _resolve_config(
    config: Optional[MaxFlowConfig],
    capacity_matrix: Optional[CapacityMatrix],
    algorithm: Union[FlowAlgorithm, str, None],
) -> MaxFlowConfig:
    cfg = config if config is not None else DEFAULT_CONFIG
    overrides = {}
    if capacity_matrix is not None:
        overrides["capacity_matrix"] = capacity_matrix
    if algorithm is not None:
        overrides["algorithm"] = algorithm
    return replace(cfg, **overrides) if overrides else cfg


def _validate_endpoints(source: Vertex, target: Vertex, n: int) -> None:
    if not is_vertex(source, n):
        raise InvalidEndpointsError(f"Source {source!r} is not a vertex in 1..{n}.")
    if not is_vertex(target, n):
        raise InvalidEndpointsError(f"Target {target!r} is not a vertex in 1..{n}.")
    if source == target:
        raise InvalidEndpointsError(f"Source and target must differ, got {source!r}.")
