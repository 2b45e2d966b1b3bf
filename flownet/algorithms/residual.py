"""Residual network construction.

The residual network has the same vertex set as the input and, for every
edge ``(u, v)``, also contains ``(v, u)`` so flow can be cancelled. Reverse
edges are added only when missing and carry ``reverse=True``; they have
capacity 0 regardless of the capacity matrix. Capacities stay in the capacity
matrix and are never merged or summed here.
"""

from __future__ import annotations

import networkx as nx

from flownet.algorithms.common import is_vertex
from flownet.errors import MalformedGraphError
from flownet.logging import get_logger

logger = get_logger(__name__)


def residual_graph(graph: nx.DiGraph) -> nx.DiGraph:
    """Build the residual network of ``graph`` without mutating it.

    Args:
        graph: Directed graph whose vertices are the integers ``1..n``.

    Returns:
        A new ``networkx.DiGraph`` over ``1..n`` containing every edge of
        ``graph`` plus any missing reverse edge, marked ``reverse=True``.
        Self-loops pass through unchanged.

    Raises:
        MalformedGraphError: If ``graph`` is undirected, its vertices are not
            exactly ``1..n``, or an edge references a vertex outside ``1..n``.
    """
    if not graph.is_directed():
        raise MalformedGraphError("Flow networks must be directed graphs.")

    n = graph.number_of_nodes()
    if set(graph.nodes) != set(range(1, n + 1)):
        stray = sorted(
            (node for node in graph.nodes if not is_vertex(node, n)), key=repr
        )
        raise MalformedGraphError(
            f"Graph vertices must be exactly 1..{n}; found {stray[:5]!r} outside."
        )

    residual = nx.DiGraph()
    residual.add_nodes_from(range(1, n + 1))

    added = 0
    for u, v in graph.edges():
        if not (is_vertex(u, n) and is_vertex(v, n)):
            raise MalformedGraphError(
                f"Edge ({u!r}, {v!r}) references a vertex outside 1..{n}."
            )
        residual.add_edge(u, v, reverse=False)
        if not graph.has_edge(v, u):
            residual.add_edge(v, u, reverse=True)
            added += 1

    logger.debug(
        "Residual network: %d vertices, %d edges (%d reverse edges added)",
        n,
        residual.number_of_edges(),
        added,
    )
    return residual
