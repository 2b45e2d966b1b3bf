"""Global pytest configuration and sample flow networks.

Vertices are numbered from 1. Capacities are stored as the ``capacity`` edge
attribute; tests build matrices with ``MatrixCapacity.from_graph``.
"""

from __future__ import annotations

import random
from typing import Callable

import networkx as nx
import pytest
from pytest import approx

from flownet.algorithms.capacity import CapacityMatrix
from flownet.graph.indexed_digraph import IndexedDiGraph
from flownet.types import FlowAlgorithm, FlowAssignment

ALGORITHMS = list(FlowAlgorithm)


@pytest.fixture(params=ALGORITHMS, ids=lambda a: a.name.lower())
def algorithm(request) -> FlowAlgorithm:
    """Each flow algorithm in turn."""
    return request.param


@pytest.fixture
def scenario_a() -> IndexedDiGraph:
    # s=1, a=2, t=3
    #
    #        [10]       [5]
    #   s ────────► a ────────► t
    #   │                       ▲
    #   └───────────────────────┘
    #              [3]
    return IndexedDiGraph.from_edges(3, [(1, 2, 10), (2, 3, 5), (1, 3, 3)])


@pytest.fixture
def scenario_b() -> IndexedDiGraph:
    # s=1, a=2, b=3, t=4
    #
    #        [3]        [2]
    #   s ────────► a ────────► t
    #   │           │[1]        ▲
    #   │    [2]    ▼    [3]    │
    #   └─────────► b ──────────┘
    return IndexedDiGraph.from_edges(
        4, [(1, 2, 3), (1, 3, 2), (2, 4, 2), (3, 4, 3), (2, 3, 1)]
    )


@pytest.fixture
def scenario_c() -> IndexedDiGraph:
    """Two disconnected vertices."""
    return IndexedDiGraph(2)


@pytest.fixture
def scenario_d() -> IndexedDiGraph:
    """Path 1 -> 2 -> 3 without capacities."""
    return IndexedDiGraph.from_edges(3, [(1, 2), (2, 3)])


@pytest.fixture
def triangle() -> IndexedDiGraph:
    # Both directions present with equal capacity.
    #
    #      [15]        [15]
    #   ┌──────► 2 ◄──────┐
    #   ▼                 ▼
    #   1 ◄─────────────► 3
    #          [5]
    return IndexedDiGraph.from_edges(
        3,
        [(1, 2, 15), (2, 1, 15), (2, 3, 15), (3, 2, 15), (1, 3, 5), (3, 1, 5)],
    )


@pytest.fixture
def clrs() -> IndexedDiGraph:
    """Classic six-vertex textbook network; max flow 1 -> 6 is 23."""
    return IndexedDiGraph.from_edges(
        6,
        [
            (1, 2, 16),
            (1, 3, 13),
            (3, 2, 4),
            (2, 4, 12),
            (4, 3, 9),
            (3, 5, 14),
            (5, 4, 7),
            (4, 6, 20),
            (5, 6, 4),
        ],
    )


def make_random_network(
    n: int, p: float, seed: int, max_capacity: int = 20, floats: bool = False
) -> IndexedDiGraph:
    """Seeded random directed network with capacities in 1..max_capacity.

    Capacities are integers unless ``floats`` is set, in which case they are
    drawn uniformly from ``[0.1, max_capacity]``.
    """
    rng = random.Random(seed)
    base = nx.gnp_random_graph(n, p, seed=seed, directed=True)
    edges = [
        (
            u + 1,
            v + 1,
            rng.uniform(0.1, max_capacity) if floats else rng.randint(1, max_capacity),
        )
        for u, v in base.edges()
    ]
    return IndexedDiGraph.from_edges(n, edges)


@pytest.fixture
def random_network() -> Callable[..., IndexedDiGraph]:
    return make_random_network


@pytest.fixture
def check_flow() -> Callable[..., None]:
    """Return a checker for capacity bounds, skew symmetry and conservation."""

    def _check(
        graph: nx.DiGraph,
        capacities: CapacityMatrix,
        source: int,
        target: int,
        flow_value,
        flow: FlowAssignment,
    ) -> None:
        for (u, v), f in flow.items():
            # Pairs that are not graph edges have capacity 0.
            cap = capacities.get(u, v) if graph.has_edge(u, v) else 0
            assert f <= cap + 1e-9, (u, v, f)
            assert (v, u) in flow, (u, v)
            assert f == approx(-flow[(v, u)]), (u, v)

        for w in range(1, graph.number_of_nodes() + 1):
            if w in (source, target):
                continue
            out_flow = sum(f for (u, _), f in flow.items() if u == w and f > 0)
            in_flow = sum(f for (_, v), f in flow.items() if v == w and f > 0)
            assert out_flow == approx(in_flow), w

        net_out_of_source = sum(f for (u, _), f in flow.items() if u == source)
        net_into_target = sum(f for (_, v), f in flow.items() if v == target)
        assert net_out_of_source == approx(flow_value)
        assert net_into_target == approx(flow_value)

    return _check
