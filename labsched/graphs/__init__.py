"""
Graph subpackage for labsched.

This package provides:
- A label-addressed directed graph interface (LabelGraph)
- Two interchangeable representations (DenseGraph, SparseGraph)
- A configuration-driven factory (GraphConfig, create_graph, graph_from_edges)
- Breadth-first reachability and shortest routes (bfs, has_route, get_route)
- Two-way scheduling by two-coloring (check_validity, find_schedule)

Algorithms depend only on LabelGraph, so either representation can be used.
"""

from .base import LabelGraph
from .dense import DenseGraph
from .exceptions import GraphError, NodeNameExistsError, NoRouteError, NoScheduleError
from .factory import REPRESENTATIONS, GraphConfig, create_graph, graph_from_edges
from .paths import bfs, get_route, has_route, reconstruct_path
from .schedule import check_validity, find_schedule
from .sparse import SparseGraph

__all__ = [
    "LabelGraph",
    "DenseGraph",
    "SparseGraph",
    "GraphConfig",
    "REPRESENTATIONS",
    "create_graph",
    "graph_from_edges",
    "bfs",
    "has_route",
    "get_route",
    "reconstruct_path",
    "check_validity",
    "find_schedule",
    "GraphError",
    "NodeNameExistsError",
    "NoRouteError",
    "NoScheduleError",
]

# Example usage:
# from labsched.graphs import create_graph, find_schedule, get_route
#
# g = create_graph("sparse", name="labs")
# g.add_undirected_edge("lab 1", "lab 2")
# g.add_undirected_edge("lab 2", "lab 3")
# get_route(g, "lab 1", "lab 3")  # ['lab 1', 'lab 2', 'lab 3']
# find_schedule(g)                # [{'lab 1', 'lab 3'}, {'lab 2'}]
