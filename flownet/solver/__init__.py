"""High-level solver interfaces.

`maximum_flow` and `minimum_cut` validate input, resolve defaults and dispatch
to the algorithm modules. The input graph is never mutated.
"""
