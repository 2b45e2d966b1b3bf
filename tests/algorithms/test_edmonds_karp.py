from flownet.algorithms.capacity import DefaultCapacity, MatrixCapacity
from flownet.algorithms.common import adjacency_lists, edge_capacities
from flownet.algorithms.edmonds_karp import _shortest_augmenting_path, edmonds_karp
from flownet.algorithms.residual import residual_graph
from flownet.graph.indexed_digraph import IndexedDiGraph


def _run(graph, source, target, caps=None):
    caps = caps if caps is not None else MatrixCapacity.from_graph(graph)
    return edmonds_karp(residual_graph(graph), source, target, caps), caps


class TestEdmondsKarp:
    def test_scenario_a(self, scenario_a, check_flow):
        (value, flow), caps = _run(scenario_a, 1, 3)
        assert value == 8
        assert flow[(1, 2)] == 5
        assert flow[(2, 3)] == 5
        assert flow[(1, 3)] == 3
        check_flow(scenario_a, caps, 1, 3, value, flow)

    def test_scenario_b(self, scenario_b, check_flow):
        (value, flow), caps = _run(scenario_b, 1, 4)
        assert value == 5
        check_flow(scenario_b, caps, 1, 4, value, flow)

    def test_disconnected(self, scenario_c):
        (value, flow), _ = _run(scenario_c, 1, 2, DefaultCapacity(scenario_c))
        assert value == 0
        assert flow == {}

    def test_unit_capacity_path(self, scenario_d):
        (value, flow), _ = _run(scenario_d, 1, 3, DefaultCapacity(scenario_d))
        assert value == 1
        assert flow[(1, 2)] == 1
        assert flow[(2, 1)] == -1

    def test_clrs(self, clrs, check_flow):
        (value, flow), caps = _run(clrs, 1, 6)
        assert value == 23
        check_flow(clrs, caps, 1, 6, value, flow)

    def test_assignment_covers_residual_pairs(self, scenario_b):
        residual = residual_graph(scenario_b)
        caps = MatrixCapacity.from_graph(scenario_b)
        _, flow = edmonds_karp(residual, 1, 4, caps)
        assert set(flow) == set(residual.edges())

    def test_diamond_with_cross_edge(self, check_flow):
        g = IndexedDiGraph.from_edges(
            4, [(1, 2, 1), (1, 3, 1), (2, 3, 1), (2, 4, 1), (3, 4, 1)]
        )
        (value, flow), caps = _run(g, 1, 4)
        assert value == 2
        check_flow(g, caps, 1, 4, value, flow)


class TestShortestAugmentingPath:
    def test_prefers_fewest_edges(self, scenario_a):
        residual = residual_graph(scenario_a)
        caps = MatrixCapacity.from_graph(scenario_a)
        residual_cap = edge_capacities(residual, caps)
        path = _shortest_augmenting_path(
            adjacency_lists(residual), residual_cap, 1, 3
        )
        assert path == [(1, 3)]

    def test_skips_saturated_edges(self, scenario_a):
        residual = residual_graph(scenario_a)
        caps = MatrixCapacity.from_graph(scenario_a)
        residual_cap = edge_capacities(residual, caps)
        residual_cap[(1, 3)] = 0
        path = _shortest_augmenting_path(
            adjacency_lists(residual), residual_cap, 1, 3
        )
        assert path == [(1, 2), (2, 3)]

    def test_ignores_rounding_residue(self, scenario_a):
        residual = residual_graph(scenario_a)
        residual_cap = {edge: 0 for edge in residual.edges()}
        residual_cap[(1, 3)] = 5e-17
        path = _shortest_augmenting_path(
            adjacency_lists(residual), residual_cap, 1, 3
        )
        assert path == []

    def test_no_path(self, scenario_a):
        residual = residual_graph(scenario_a)
        residual_cap = {edge: 0 for edge in residual.edges()}
        assert (
            _shortest_augmenting_path(adjacency_lists(residual), residual_cap, 1, 3)
            == []
        )
