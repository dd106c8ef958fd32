"""Maximum-flow / minimum-cut computation via augmenting paths.

Edge payloads are read as non-negative integer capacities. The solver never
writes to the graph: flow is tracked in a private per-call list indexed by
edge position. Every directed edge ``u -> v`` also offers an implicit reverse
residual ``v -> u`` equal to the flow it currently carries, so flow can be
cancelled without the caller inserting reverse edges.

With ``PathSearch.BFS`` (the default) augmenting paths are shortest in hop
count, which is the Edmonds-Karp variant with its O(V * E^2) bound.
``PathSearch.DFS`` uses a stack instead of a queue; both searches mark nodes
when first reached, so cycles in the residual graph cannot loop.
"""

from __future__ import annotations

import numbers
from collections import deque
from typing import List, Literal, Optional, Tuple, Union, overload

from arenagraph.algorithms.base import PathSearch
from arenagraph.algorithms.types import FlowSummary
from arenagraph.config import FLOW_CONFIG
from arenagraph.graph.arena import EdgeRef, Graph, NodeRef
from arenagraph.logging import get_logger

logger = get_logger(__name__)

# Direction of a residual step relative to the underlying edge
_FORWARD = 1
_BACKWARD = -1

# Per-node predecessor on the search tree: (edge index, direction)
_Parent = Optional[Tuple[int, int]]


def _capacities(graph: Graph) -> List[int]:
    """Validate edge payloads and return them as a list of ints.

    Raises:
        ValueError: If any payload is not an integer or is negative.
    """
    caps: List[int] = []
    for idx, cap in enumerate(graph._edges):
        if isinstance(cap, bool) or not isinstance(cap, numbers.Integral):
            raise ValueError(
                f"Capacity of {EdgeRef(idx)!r} must be an integer, got {cap!r}"
            )
        if cap < 0:
            raise ValueError(f"Capacity of {EdgeRef(idx)!r} is negative: {cap}")
        caps.append(int(cap))
    return caps


def _find_augmenting_path(
    graph: Graph,
    in_adj: List[List[int]],
    capacity: List[int],
    flow: List[int],
    src: int,
    dst: int,
    path_search: PathSearch,
) -> Tuple[List[_Parent], List[bool]]:
    """Search the residual graph from ``src``.

    Returns:
        The predecessor list and the reached-node flags. ``dst`` is reached
        iff an augmenting path exists; the search stops as soon as it is.
    """
    incidence = graph._incidence
    adjacency = graph._adjacency
    parent: List[_Parent] = [None] * len(adjacency)
    seen = [False] * len(adjacency)
    seen[src] = True

    frontier = deque([src])
    pop = frontier.popleft if path_search == PathSearch.BFS else frontier.pop

    while frontier:
        u = pop()
        for entry in adjacency[u]:
            v, e = entry.node.idx, entry.edge.idx
            if not seen[v] and capacity[e] - flow[e] > 0:
                seen[v] = True
                parent[v] = (e, _FORWARD)
                if v == dst:
                    return parent, seen
                frontier.append(v)
        for e in in_adj[u]:
            w = incidence[e].src.idx
            if not seen[w] and flow[e] > 0:
                seen[w] = True
                parent[w] = (e, _BACKWARD)
                if w == dst:
                    return parent, seen
                frontier.append(w)

    return parent, seen


def _augment(
    graph: Graph,
    parent: List[_Parent],
    capacity: List[int],
    flow: List[int],
    src: int,
    dst: int,
) -> int:
    """Push the bottleneck amount along the path recorded in ``parent``."""
    incidence = graph._incidence

    path: List[Tuple[int, int]] = []
    node = dst
    while node != src:
        step = parent[node]
        if step is None:
            raise RuntimeError(
                f"Augmenting path from node {src} to {dst} is broken at node {node}"
            )
        path.append(step)
        e, direction = step
        inc = incidence[e]
        node = inc.src.idx if direction == _FORWARD else inc.dst.idx

    bottleneck = min(
        capacity[e] - flow[e] if direction == _FORWARD else flow[e]
        for e, direction in path
    )
    for e, direction in path:
        flow[e] += bottleneck * direction
    return bottleneck


def _build_summary(
    total_flow: int,
    capacity: List[int],
    flow: List[int],
    seen: List[bool],
    graph: Graph,
    src: int,
    dst: int,
) -> FlowSummary:
    reachable = {NodeRef(i) for i, hit in enumerate(seen) if hit}
    if src == dst:
        min_cut: List[EdgeRef] = []
    else:
        min_cut = [
            EdgeRef(i)
            for i, inc in enumerate(graph._incidence)
            if seen[inc.src.idx] and not seen[inc.dst.idx]
        ]
    return FlowSummary(
        total_flow=total_flow,
        edge_flow={EdgeRef(i): f for i, f in enumerate(flow)},
        residual_cap={
            EdgeRef(i): c - f for i, (c, f) in enumerate(zip(capacity, flow))
        },
        reachable=reachable,
        min_cut=min_cut,
    )


@overload
def calc_max_flow(
    graph: Graph[object, int],
    src_node: NodeRef,
    dst_node: NodeRef,
    *,
    return_summary: Literal[False] = False,
    path_search: Union[PathSearch, str, None] = None,
) -> int: ...


@overload
def calc_max_flow(
    graph: Graph[object, int],
    src_node: NodeRef,
    dst_node: NodeRef,
    *,
    return_summary: Literal[True],
    path_search: Union[PathSearch, str, None] = None,
) -> Tuple[int, FlowSummary]: ...


def calc_max_flow(
    graph: Graph[object, int],
    src_node: NodeRef,
    dst_node: NodeRef,
    *,
    return_summary: bool = False,
    path_search: Union[PathSearch, str, None] = None,
) -> Union[int, Tuple[int, FlowSummary]]:
    """Compute the maximum flow between two nodes.

    Args:
        graph: Graph whose edge payloads are non-negative integer capacities.
        src_node: Source node.
        dst_node: Sink node.
        return_summary: If True, also return a `FlowSummary` with per-edge
            flow, residual capacities, the source side of the cut and the
            cut edges.
        path_search: Augmenting-path strategy (enum or case-insensitive name).
            Defaults to ``FLOW_CONFIG.path_search``.

    Returns:
        Union[int, Tuple[int, FlowSummary]]: The flow value, or
        ``(flow, summary)`` when ``return_summary`` is True.

    Raises:
        IndexError: If ``src_node`` or ``dst_node`` is not a node of ``graph``.
        ValueError: If any edge capacity is negative or not an integer, or
            ``path_search`` names an unknown strategy.

    Examples:
        >>> g = Graph()
        >>> a, b, c = g.add_node("A"), g.add_node("B"), g.add_node("C")
        >>> _ = g.add_directed_edge(a, b, 3)
        >>> _ = g.add_directed_edge(b, c, 2)
        >>> calc_max_flow(g, a, c)
        2
    """
    src = graph._check_node(src_node)
    dst = graph._check_node(dst_node)
    search = FLOW_CONFIG.resolve_path_search(path_search)
    capacity = _capacities(graph)

    logger.debug(
        "Max flow %r -> %r on %r using %s", src_node, dst_node, graph, search.name
    )
    total, flow, seen = _solve(graph, capacity, src, dst, search)

    if not return_summary:
        return total
    return total, _build_summary(total, capacity, flow, seen, graph, src, dst)


def _solve(
    graph: Graph[object, int],
    capacity: List[int],
    src: int,
    dst: int,
    path_search: PathSearch,
) -> Tuple[int, List[int], List[bool]]:
    """Run the augmenting-path loop against an explicit capacity table.

    Capacities are read from ``capacity`` only, never from the edge payloads,
    so callers can solve variants of a graph without copying it.

    Returns:
        ``(total, flow, seen)`` where ``flow`` is indexed by edge and ``seen``
        marks the nodes reachable from ``src`` in the final residual graph.
    """
    flow = [0] * len(capacity)

    in_adj: List[List[int]] = [[] for _ in range(graph.node_count)]
    for e, inc in enumerate(graph._incidence):
        in_adj[inc.dst.idx].append(e)

    total = 0
    augmentations = 0
    # Source equal to sink carries no flow by convention.
    if src == dst:
        _, seen = _find_augmenting_path(
            graph, in_adj, capacity, flow, src, -1, path_search
        )
    else:
        while True:
            parent, seen = _find_augmenting_path(
                graph, in_adj, capacity, flow, src, dst, path_search
            )
            if not seen[dst]:
                break
            total += _augment(graph, parent, capacity, flow, src, dst)
            augmentations += 1

    logger.debug(
        "Max flow %d -> %d = %d after %d augmentations",
        src,
        dst,
        total,
        augmentations,
    )
    return total, flow, seen


def calc_min_cut(
    graph: Graph[object, int],
    src_node: NodeRef,
    dst_node: NodeRef,
    *,
    path_search: Union[PathSearch, str, None] = None,
) -> int:
    """Capacity of the minimum ``src``/``dst`` cut.

    By max-flow/min-cut duality this is the max-flow value; the cut edges
    themselves are available from ``calc_max_flow(..., return_summary=True)``.
    """
    return calc_max_flow(graph, src_node, dst_node, path_search=path_search)


def saturated_edges(
    graph: Graph[object, int],
    src_node: NodeRef,
    dst_node: NodeRef,
    **kwargs,
) -> List[EdgeRef]:
    """Identify edges left with zero residual capacity by a max-flow solution.

    Args:
        graph: The graph to analyze.
        src_node: Source node.
        dst_node: Sink node.
        **kwargs: Additional arguments passed to calc_max_flow.

    Returns:
        List[EdgeRef]: Edges whose residual capacity is zero, in edge order.
    """
    _, summary = calc_max_flow(
        graph, src_node, dst_node, return_summary=True, **kwargs
    )
    return [edge for edge, residual in summary.residual_cap.items() if residual <= 0]


def run_sensitivity(
    graph: Graph[object, int],
    src_node: NodeRef,
    dst_node: NodeRef,
    *,
    change_amount: int = 1,
    **kwargs,
) -> dict[EdgeRef, int]:
    """Measure the flow change from adjusting each saturated edge's capacity.

    Each saturated edge's capacity is changed by ``change_amount`` (clamped
    at zero) in a private capacity table and the max flow recomputed. Neither
    the graph nor its payloads are copied or modified, so payloads need not
    be picklable.

    Args:
        graph: The graph to analyze.
        src_node: Source node.
        dst_node: Sink node.
        change_amount: Capacity delta to apply (positive or negative).
        **kwargs: Additional arguments passed to calc_max_flow.

    Returns:
        dict[EdgeRef, int]: Flow delta per modified edge.
    """
    baseline, summary = calc_max_flow(
        graph, src_node, dst_node, return_summary=True, **kwargs
    )
    src = graph._check_node(src_node)
    dst = graph._check_node(dst_node)
    search = FLOW_CONFIG.resolve_path_search(kwargs.get("path_search"))
    capacity = _capacities(graph)

    sensitivity: dict[EdgeRef, int] = {}
    for edge, residual in summary.residual_cap.items():
        if residual > 0:
            continue
        trial = list(capacity)
        trial[edge.idx] = max(0, capacity[edge.idx] + change_amount)
        new_flow, _, _ = _solve(graph, trial, src, dst, search)
        sensitivity[edge] = new_flow - baseline

    return sensitivity
