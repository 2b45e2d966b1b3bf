"""Shared types: algorithm selector, aliases and result containers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Set, Tuple, Union

#: Vertex index in ``1..n``.
Vertex = int

#: Numeric capacity or flow amount.
Capacity = Union[int, float]

#: Ordered vertex pair ``(u, v)`` identifying a directed edge.
Edge = Tuple[Vertex, Vertex]

#: Net flow per ordered pair of the residual network.
FlowAssignment = Dict[Edge, Capacity]

#: Flow threshold below which residual capacity and excess are treated as zero.
MIN_FLOW = 1e-9


class FlowAlgorithm(IntEnum):
    """Maximum-flow strategy used by the solver."""

    #: BFS augmenting paths. O(V * E^2).
    EDMONDS_KARP = 1
    #: Level graph plus blocking flow. O(V^2 * E).
    DINIC = 2
    #: Preflow with FIFO discharge and gap relabeling. O(V^3).
    PUSH_RELABEL = 3

    @classmethod
    def from_string(cls, value: str) -> "FlowAlgorithm":
        """Parse a string into a FlowAlgorithm enum value.

        Dashes and spaces are treated as underscores, so ``"push-relabel"``
        and ``"Edmonds Karp"`` are accepted.

        Args:
            value: Case-insensitive algorithm name.

        Returns:
            The corresponding FlowAlgorithm member.

        Raises:
            ValueError: If the string doesn't match any member.
        """
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid algorithm '{value}'. Valid values are: {valid}"
            ) from None


@dataclass(frozen=True)
class FlowSummary:
    """Summary of a max-flow computation.

    Attributes:
        total_flow: Maximum flow value achieved.
        edge_flow: Net flow per ordered pair of the residual network.
        residual_cap: Remaining capacity per ordered pair after the run.
        reachable: Vertices reachable from the source in the final residual
            network (source side of the minimum cut).
        min_cut: Edges with positive capacity crossing from ``reachable`` to
            the remaining vertices.
        algorithm: Strategy that produced the flow.
    """

    total_flow: Capacity
    edge_flow: FlowAssignment
    residual_cap: Dict[Edge, Capacity]
    reachable: Set[Vertex]
    min_cut: List[Edge]
    algorithm: FlowAlgorithm
