from flownet.algorithms.capacity import MatrixCapacity
from flownet.algorithms.common import edge_capacities
from flownet.algorithms.dinic import dinic
from flownet.algorithms.min_cut import (
    build_flow_summary,
    cut_edges,
    reachable_from,
    residual_capacities,
)
from flownet.algorithms.residual import residual_graph
from flownet.graph.indexed_digraph import IndexedDiGraph
from flownet.types import FlowAlgorithm


class TestMinCutHelpers:
    def test_residual_capacities(self, scenario_a):
        residual = residual_graph(scenario_a)
        capacity = edge_capacities(residual, MatrixCapacity.from_graph(scenario_a))
        flow = {(1, 2): 5, (2, 1): -5}
        assert residual_capacities(capacity, flow) == {(1, 2): 5, (2, 1): 5}

    def test_reachable_after_max_flow(self, clrs):
        residual = residual_graph(clrs)
        caps = MatrixCapacity.from_graph(clrs)
        _, flow = dinic(residual, 1, 6, caps)
        capacity = edge_capacities(residual, caps)
        reachable = reachable_from(residual, 1, residual_capacities(capacity, flow))
        assert 1 in reachable
        assert 6 not in reachable

    def test_reachable_ignores_rounding_residue(self):
        g = IndexedDiGraph.from_edges(3, [(1, 2, 1.0), (2, 3, 1.0)])
        residual = residual_graph(g)
        residual_cap = {edge: 0.0 for edge in residual.edges()}
        residual_cap[(1, 2)] = 5e-17
        assert reachable_from(residual, 1, residual_cap) == {1}

    def test_cut_edges_capacity_equals_flow(self, clrs):
        residual = residual_graph(clrs)
        caps = MatrixCapacity.from_graph(clrs)
        value, flow = dinic(residual, 1, 6, caps)
        capacity = edge_capacities(residual, caps)
        reachable = reachable_from(residual, 1, residual_capacities(capacity, flow))
        edges = cut_edges(residual, reachable, capacity)
        assert sum(caps.get(u, v) for u, v in edges) == value == 23

    def test_reverse_edges_with_zero_capacity_not_in_cut(self, scenario_a):
        residual = residual_graph(scenario_a)
        capacity = edge_capacities(residual, MatrixCapacity.from_graph(scenario_a))
        edges = cut_edges(residual, {1, 2}, capacity)
        assert edges == [(1, 3), (2, 3)]

    def test_matrix_entry_on_reverse_pair_not_in_cut(self):
        g = IndexedDiGraph.from_edges(2, [(1, 2)])
        residual = residual_graph(g)
        capacity = edge_capacities(residual, MatrixCapacity([[0, 3], [5, 0]]))
        assert cut_edges(residual, {2}, capacity) == []


class TestFlowSummary:
    def test_summary_fields(self, scenario_a):
        residual = residual_graph(scenario_a)
        caps = MatrixCapacity.from_graph(scenario_a)
        value, flow = dinic(residual, 1, 3, caps)
        summary = build_flow_summary(
            residual, 1, caps, value, flow, FlowAlgorithm.DINIC
        )
        assert summary.total_flow == 8
        assert summary.edge_flow is flow
        assert summary.algorithm is FlowAlgorithm.DINIC
        # 1->2 keeps 5 units of slack, so 2 is on the source side.
        assert summary.reachable == {1, 2}
        assert summary.min_cut == [(1, 3), (2, 3)]
        assert summary.residual_cap[(1, 2)] == 5
        assert summary.residual_cap[(2, 3)] == 0
