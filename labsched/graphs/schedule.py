"""
Two-way scheduling by graph two-coloring.

A schedule splits every label of a graph into two disjoint teams so that no
edge joins two labels of the same team, e.g. lab sections split between two
teaching assistants where an edge marks a time clash. Such a split exists iff
the graph, with edge direction ignored, is bipartite and has no self-loops.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, Sequence, Set

from ..logging import get_logger
from .base import LabelGraph
from .exceptions import NoScheduleError

logger = get_logger(__name__)


def check_validity(graph: LabelGraph, proposal: Sequence[Iterable[str]]) -> bool:
    """
    Check a proposed split of the graph's labels into two teams.

    The proposal is valid when it has exactly two teams, together they cover
    every label in the graph (extra labels are tolerated), no label is in both
    teams, and no label has an outgoing neighbor on its own team. Any
    self-loop makes a proposal invalid.

    Args:
        graph: Graph supplying the adjacency constraints.
        proposal: Two collections of labels. Not modified.

    Returns:
        True if the proposal is a valid schedule.
    """
    if len(proposal) != 2:
        return False

    teams = [frozenset(team) for team in proposal]

    if not set(graph.get_all_nodes()) <= teams[0] | teams[1]:
        return False

    if teams[0] & teams[1]:
        return False

    for team in teams:
        for label in team:
            if not graph.get_neighbors(label).isdisjoint(team):
                return False

    return True


def _undirected_neighbors(graph: LabelGraph) -> Dict[str, Set[str]]:
    adjacency: Dict[str, Set[str]] = {label: set() for label in graph.get_all_nodes()}
    for label in adjacency:
        for neighbor in graph.get_neighbors(label):
            adjacency[label].add(neighbor)
            adjacency[neighbor].add(label)
    return adjacency


def find_schedule(graph: LabelGraph) -> List[Set[str]]:
    """
    Split the graph's labels into two conflict-free teams.

    Labels are visited in ``get_all_nodes()`` order. Each label not yet
    assigned starts a new component on team 0, and a breadth-first expansion
    puts every newly discovered label on the team opposite to the label that
    discovered it. Edges are followed in both directions, so clashes recorded
    as a single directed edge still separate the two labels.

    Args:
        graph: Graph to schedule.

    Returns:
        ``[team_0, team_1]`` as sets of labels.

    Raises:
        NoScheduleError: If no valid split exists (odd cycle or self-loop).

    Example:
        >>> from labsched.graphs import graph_from_edges
        >>> g = graph_from_edges([("1", "2"), ("2", "3"), ("3", "4"), ("4", "1")])
        >>> sorted(map(sorted, find_schedule(g)))
        [['1', '3'], ['2', '4']]
    """
    adjacency = _undirected_neighbors(graph)
    schedule: List[Set[str]] = [set(), set()]
    team_of: Dict[str, int] = {}
    components = 0

    for root in adjacency:
        if root in team_of:
            continue
        components += 1
        team_of[root] = 0
        schedule[0].add(root)
        queue = deque([root])

        while queue:
            current = queue.popleft()
            other = 1 - team_of[current]
            for neighbor in sorted(adjacency[current]):
                if neighbor not in team_of:
                    team_of[neighbor] = other
                    schedule[other].add(neighbor)
                    queue.append(neighbor)

    if not check_validity(graph, schedule):
        logger.debug("graph %r: two-coloring of %d component(s) failed", graph.name, components)
        raise NoScheduleError(graph.name)

    logger.debug(
        "graph %r: scheduled %d component(s) into teams of %d and %d",
        graph.name,
        components,
        len(schedule[0]),
        len(schedule[1]),
    )
    return schedule
