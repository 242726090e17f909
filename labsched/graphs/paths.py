"""
Reachability and shortest routes over a LabelGraph.

Every function here talks to the graph only through the LabelGraph
interface, so dense and sparse graphs give identical answers. Where order
matters (bfs, get_route) neighbors are expanded in sorted label order, which
makes traversal order and the choice among equally short routes deterministic.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 22.2 (BFS).
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Hashable, List, Optional, Tuple

from ..logging import get_logger
from .base import LabelGraph
from .exceptions import NoRouteError

logger = get_logger(__name__)


def _sorted_neighbors(graph: LabelGraph, label: str) -> List[str]:
    return sorted(graph.get_neighbors(label))


def bfs(
    graph: LabelGraph, source: str
) -> Tuple[List[str], Dict[str, float], Dict[str, Optional[str]]]:
    """
    Breadth-first search from a source node.

    Args:
        graph: Graph to traverse.
        source: Label to start from.

    Returns:
        Tuple of:
        - order: Labels in BFS visitation order
        - distance: Every label -> hop count from source (``inf`` if unreached)
        - parent: Every label -> BFS parent (None for source/unreached)

        All three are empty if ``source`` is not registered.

    Complexity: O(V + E) plus the per-node neighbor sort.

    Example:
        >>> from labsched.graphs import SparseGraph
        >>> g = SparseGraph()
        >>> g.add_directed_edge("A", "B")
        >>> g.add_directed_edge("A", "C")
        >>> order, dist, parent = bfs(g, "A")
        >>> order
        ['A', 'B', 'C']
    """
    if not graph.has_node(source):
        return [], {}, {}

    order: List[str] = []
    distance: Dict[str, float] = {}
    parent: Dict[str, Optional[str]] = {}

    for node in graph.get_all_nodes():
        distance[node] = float("inf")
        parent[node] = None

    distance[source] = 0
    queue = deque([source])

    while queue:
        u = queue.popleft()
        order.append(u)

        for v in _sorted_neighbors(graph, u):
            if distance[v] == float("inf"):
                distance[v] = distance[u] + 1
                parent[v] = u
                queue.append(v)

    return order, distance, parent


def has_route(graph: LabelGraph, src: str, dst: str) -> bool:
    """
    Return True if a directed path leads from ``src`` to ``dst``.

    A label always reaches itself. Each label is expanded at most once, so
    the search is O(V + E).
    """
    seen = {src}
    queue = deque([src])

    while queue:
        current = queue.popleft()
        if current == dst:
            return True
        for neighbor in graph.get_neighbors(current):
            if neighbor not in seen:
                seen.add(neighbor)
                queue.append(neighbor)

    logger.debug("graph %r: %r does not reach %r", graph.name, src, dst)
    return False


def get_route(graph: LabelGraph, src: str, dst: str) -> List[str]:
    """
    Return a shortest route (fewest edges) from ``src`` to ``dst``.

    Records the label that first discovered each node and stops as soon as
    ``dst`` is dequeued, then walks the parent links back to ``src``.

    Args:
        graph: Graph to search.
        src: Start label.
        dst: Goal label.

    Returns:
        Labels from ``src`` to ``dst`` inclusive. ``[src]`` when they match.

    Raises:
        NoRouteError: If ``dst`` cannot be reached from ``src``.

    Example:
        >>> from labsched.graphs import DenseGraph
        >>> g = DenseGraph()
        >>> g.add_directed_edge("1", "2")
        >>> g.add_directed_edge("2", "3")
        >>> get_route(g, "1", "3")
        ['1', '2', '3']
    """
    parent: Dict[str, Optional[str]] = {src: None}
    queue = deque([src])

    while queue:
        current = queue.popleft()
        if current == dst:
            route = reconstruct_path(parent, dst)
            logger.debug("graph %r: route %r", graph.name, route)
            return route
        for neighbor in _sorted_neighbors(graph, current):
            if neighbor not in parent:
                parent[neighbor] = current
                queue.append(neighbor)

    raise NoRouteError(src, dst)


def reconstruct_path(
    parent: Dict[Hashable, Optional[Hashable]], target: Hashable
) -> Optional[List[Hashable]]:
    """
    Reconstruct the path ending at ``target`` from a parent map.

    ``parent[node]`` is the previous node on the path, or None for the root.

    Args:
        parent: Dictionary mapping node -> parent node (or None).
        target: Node to reconstruct the path to.

    Returns:
        Nodes from the root to ``target`` inclusive, or None if ``target`` is
        not in the map or the links loop.

    Example:
        >>> reconstruct_path({"A": None, "B": "A", "C": "B"}, "C")
        ['A', 'B', 'C']
        >>> reconstruct_path({"A": None}, "D") is None
        True
    """
    if target not in parent:
        return None

    path = []
    current = target
    visited = set()
    while current is not None:
        if current in visited:
            return None
        visited.add(current)
        path.append(current)
        current = parent.get(current)

    path.reverse()
    return path
