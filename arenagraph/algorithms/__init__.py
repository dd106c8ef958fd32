"""Traversal and flow algorithms over `arenagraph.graph.arena.Graph`."""
