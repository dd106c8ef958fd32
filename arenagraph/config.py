"""Configuration classes for arenagraph components."""

from dataclasses import dataclass

from arenagraph.algorithms.base import PathSearch


@dataclass
class FlowSolverConfig:
    """Defaults for the max-flow solver."""

    # Strategy used when calc_max_flow() is called without path_search
    path_search: PathSearch = PathSearch.BFS

    def resolve_path_search(self, value: "PathSearch | str | None") -> PathSearch:
        """Return an explicit strategy, a parsed name, or the configured default."""
        if value is None:
            return self.path_search
        if isinstance(value, str):
            return PathSearch.from_string(value)
        return PathSearch(value)


# Global configuration instance
FLOW_CONFIG = FlowSolverConfig()
