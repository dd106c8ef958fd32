"""Enums shared by graph algorithms."""

from __future__ import annotations

from enum import IntEnum


class PathSearch(IntEnum):
    """Augmenting-path search strategy used by the max-flow solver."""

    BFS = 1  # Shortest augmenting path first (Edmonds-Karp)
    DFS = 2  # Depth-first augmenting path (plain Ford-Fulkerson)

    @classmethod
    def from_string(cls, value: str) -> "PathSearch":
        """Parse a string into a PathSearch enum value.

        Args:
            value: Case-insensitive string name (e.g., "bfs", "DFS").

        Returns:
            The corresponding PathSearch enum member.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid path_search '{value}'. Valid values are: {valid}"
            ) from None
