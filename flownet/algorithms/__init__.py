"""Maximum-flow algorithms and their building blocks.

Modules:
    capacity: capacity matrices (structural default and explicit table).
    residual: residual network construction.
    edmonds_karp, dinic, push_relabel: the three flow strategies, sharing the
        signature ``(residual, source, target, capacities) -> (value, flow)``.
    min_cut: residual reachability, minimum cut and ``FlowSummary``.
"""
