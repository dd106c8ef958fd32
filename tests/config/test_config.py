"""Tests for `arenagraph.config`."""

import logging

import pytest

from arenagraph.algorithms.base import PathSearch
from arenagraph.algorithms.max_flow import calc_max_flow
from arenagraph.config import FLOW_CONFIG, FlowSolverConfig


def test_default_path_search_is_bfs() -> None:
    assert FlowSolverConfig().path_search == PathSearch.BFS
    assert FLOW_CONFIG.path_search == PathSearch.BFS


def test_resolve_path_search() -> None:
    config = FlowSolverConfig(path_search=PathSearch.DFS)
    assert config.resolve_path_search(None) == PathSearch.DFS
    assert config.resolve_path_search(PathSearch.BFS) == PathSearch.BFS
    assert config.resolve_path_search("bfs") == PathSearch.BFS
    assert config.resolve_path_search(2) == PathSearch.DFS


def test_resolve_path_search_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        FlowSolverConfig().resolve_path_search("dijkstra")
    with pytest.raises(ValueError):
        FlowSolverConfig().resolve_path_search(99)  # type: ignore[arg-type]


def test_global_config_drives_solver_default(monkeypatch, caplog, line1) -> None:
    """Changing FLOW_CONFIG switches the strategy used when none is passed."""
    g, n = line1
    monkeypatch.setattr(FLOW_CONFIG, "path_search", PathSearch.DFS)
    caplog.set_level(logging.DEBUG, logger="arenagraph")

    assert calc_max_flow(g, n["A"], n["C"]) == 2
    assert "using DFS" in caplog.text
