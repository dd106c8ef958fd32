"""Graph primitives and helpers.

This package provides the arena-backed `Graph` with its `NodeRef` / `EdgeRef`
handles (`arena`) and NetworkX interop helpers (`convert`).
"""
