"""labsched - label-addressed graphs, shortest routes and two-way scheduling."""

__version__ = "0.1.0"

from .graphs import (
    REPRESENTATIONS,
    DenseGraph,
    GraphConfig,
    GraphError,
    LabelGraph,
    NodeNameExistsError,
    NoRouteError,
    NoScheduleError,
    SparseGraph,
    bfs,
    check_validity,
    create_graph,
    find_schedule,
    get_route,
    graph_from_edges,
    has_route,
    reconstruct_path,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "LabelGraph",
    "DenseGraph",
    "SparseGraph",
    "GraphConfig",
    "REPRESENTATIONS",
    "create_graph",
    "graph_from_edges",
    # Algorithms
    "bfs",
    "has_route",
    "get_route",
    "reconstruct_path",
    "check_validity",
    "find_schedule",
    # Errors
    "GraphError",
    "NodeNameExistsError",
    "NoRouteError",
    "NoScheduleError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
