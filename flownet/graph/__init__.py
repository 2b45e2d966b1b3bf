"""Graph primitives and helpers.

This package provides `IndexedDiGraph`, a directed graph over vertices
``1..n``, and conversion helpers for arbitrary NetworkX graphs (`convert`).
"""
