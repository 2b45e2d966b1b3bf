"""Push-relabel (preflow-push) maximum flow.

The source starts at height ``n`` and saturates all of its outgoing edges.
Active vertices (excess above ``MIN_FLOW``, not source or target) are then
discharged in FIFO order: excess is pushed along admissible edges ``(u, v)`` with
``height[u] == height[v] + 1``, and a vertex with no admissible edge is
relabeled to one more than its lowest residual neighbor. When a relabel leaves
a height level below ``n`` empty, every vertex above that gap is lifted to
``n + 1`` since none of them can still reach the target.

When no active vertex remains, the excess at the target is the flow value.
Runs in O(V^3).
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, List, Set, Tuple

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


def push_relabel(
    residual: nx.DiGraph,
    source: Vertex,
    target: Vertex,
    capacities: CapacityMatrix,
) -> Tuple[Capacity, FlowAssignment]:
    """Compute maximum flow with the FIFO push-relabel algorithm.

    Args:
        residual: Residual network (see ``residual_graph``).
        source: Source vertex.
        target: Target vertex.
        capacities: Capacity of each ordered pair.

    Returns:
        ``(flow_value, flow_assignment)`` where the assignment covers every
        ordered pair of ``residual``.
    """
    state = _Preflow(residual, source, target, capacities)
    state.saturate_source()
    state.run()

    logger.debug(
        "Push-relabel %s -> %s: flow=%s (%d pushes, %d relabels, %d gap lifts)",
        source,
        target,
        state.excess[target],
        state.pushes,
        state.relabels,
        state.gap_lifts,
    )
    return state.excess[target], build_flow_assignment(
        state.capacity, state.residual_cap
    )


class _Preflow:
    """Per-run preflow state: residual capacities, heights and excess."""

    def __init__(
        self,
        residual: nx.DiGraph,
        source: Vertex,
        target: Vertex,
        capacities: CapacityMatrix,
    ) -> None:
        self.source = source
        self.target = target
        self.n = residual.number_of_nodes()
        self.adjacency: Dict[Vertex, List[Vertex]] = adjacency_lists(residual)
        self.capacity: Dict[Edge, Capacity] = edge_capacities(residual, capacities)
        self.residual_cap: Dict[Edge, Capacity] = dict(self.capacity)

        self.height: Dict[Vertex, int] = {u: 0 for u in self.adjacency}
        self.height[source] = self.n
        self.excess: Dict[Vertex, Capacity] = {u: 0 for u in self.adjacency}
        self.current: Dict[Vertex, int] = {u: 0 for u in self.adjacency}

        # Heights never exceed 2n - 1.
        self.count: List[int] = [0] * (2 * self.n + 1)
        self.count[0] = self.n - 1
        self.count[self.n] += 1

        self.active: Deque[Vertex] = deque()
        self.queued: Set[Vertex] = set()

        self.pushes = 0
        self.relabels = 0
        self.gap_lifts = 0

    def saturate_source(self) -> None:
        """Push the full residual capacity of every edge leaving the source."""
        s = self.source
        for v in self.adjacency[s]:
            if v == s:
                continue
            amount = self.residual_cap[(s, v)]
            if amount > 0:
                self._move(s, v, amount)

    def run(self) -> None:
        while self.active:
            u = self.active.popleft()
            self.queued.discard(u)
            self.discharge(u)

    def discharge(self, u: Vertex) -> None:
        """Push excess out of ``u`` until it is zero, relabeling as needed."""
        neighbors = self.adjacency[u]
        while self.excess[u] > MIN_FLOW:
            if self.current[u] == len(neighbors):
                if not self.relabel(u):
                    break
                continue
            v = neighbors[self.current[u]]
            if (
                self.residual_cap[(u, v)] > MIN_FLOW
                and self.height[u] == self.height[v] + 1
            ):
                self._move(u, v, min(self.excess[u], self.residual_cap[(u, v)]))
            else:
                self.current[u] += 1

    def relabel(self, u: Vertex) -> bool:
        """Set ``height[u]`` to one more than its lowest residual neighbor.

        Returns False, leaving ``u`` unchanged, if no edge out of ``u`` has
        residual capacity above ``MIN_FLOW``. The excess left at ``u`` is
        then rounding residue.
        """
        lowest = min(
            (
                self.height[v]
                for v in self.adjacency[u]
                if self.residual_cap[(u, v)] > MIN_FLOW
            ),
            default=None,
        )
        if lowest is None:
            return False
        old_height = self.height[u]
        self._set_height(u, lowest + 1)
        self.current[u] = 0
        self.relabels += 1

        if self.count[old_height] == 0 and old_height < self.n:
            self._gap_lift(old_height)
        return True

    def _gap_lift(self, gap: int) -> None:
        """Lift every vertex with ``gap < height < n`` to ``n + 1``."""
        for w, h in self.height.items():
            if gap < h < self.n:
                self._set_height(w, self.n + 1)
                self.current[w] = 0
                self.gap_lifts += 1

    def _set_height(self, u: Vertex, value: int) -> None:
        self.count[self.height[u]] -= 1
        self.height[u] = value
        self.count[value] += 1

    def _move(self, u: Vertex, v: Vertex, amount: Capacity) -> None:
        self.residual_cap[(u, v)] -= amount
        self.residual_cap[(v, u)] += amount
        self.excess[u] -= amount
        self.excess[v] += amount
        self.pushes += 1
        if v != self.source and v != self.target and v not in self.queued:
            self.active.append(v)
            self.queued.add(v)
