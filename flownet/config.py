"""Configuration classes for flownet solvers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

import networkx as nx

from flownet.algorithms.capacity import CapacityMatrix, DefaultCapacity
from flownet.types import FlowAlgorithm


@dataclass(frozen=True)
class MaxFlowConfig:
    """Options for a maximum-flow computation.

    Attributes:
        capacity_matrix: Capacities to use. ``None`` means one unit per edge
            of the graph being solved (``DefaultCapacity``).
        algorithm: Strategy to run. Strings such as ``"dinic"`` are accepted
            and converted on construction.
    """

    capacity_matrix: Optional[CapacityMatrix] = None
    algorithm: Union[FlowAlgorithm, str] = FlowAlgorithm.PUSH_RELABEL

    def __post_init__(self) -> None:
        if isinstance(self.algorithm, str):
            object.__setattr__(
                self, "algorithm", FlowAlgorithm.from_string(self.algorithm)
            )
        elif not isinstance(self.algorithm, FlowAlgorithm):
            raise TypeError(
                "algorithm must be a FlowAlgorithm or str, "
                f"got {type(self.algorithm).__name__}"
            )
        if self.capacity_matrix is not None and not isinstance(
            self.capacity_matrix, CapacityMatrix
        ):
            raise TypeError(
                "capacity_matrix must be a CapacityMatrix, "
                f"got {type(self.capacity_matrix).__name__}"
            )

    def capacities_for(self, graph: nx.DiGraph) -> CapacityMatrix:
        """Return the configured capacities, defaulting to one unit per edge."""
        if self.capacity_matrix is None:
            return DefaultCapacity(graph)
        return self.capacity_matrix


# Global default configuration instance
DEFAULT_CONFIG = MaxFlowConfig()
