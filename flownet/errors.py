"""Exception types raised for invalid flow-network input.

All errors derive from ``ValueError`` so callers that already guard against
bad arguments with ``except ValueError`` keep working.
"""

from __future__ import annotations


class FlowNetworkError(ValueError):
    """Base class for invalid flow-network input."""


class InvalidEndpointsError(FlowNetworkError):
    """Source equals target, or either lies outside the vertex range."""


class DimensionMismatchError(FlowNetworkError):
    """Capacity matrix dimension differs from the graph's vertex count."""


class MalformedGraphError(FlowNetworkError):
    """Graph cannot be turned into a residual network.

    Raised for edges whose endpoints are not vertices ``1..n`` and for
    undirected input graphs.
    """
