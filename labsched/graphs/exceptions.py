"""Exceptions raised by the graph subpackage."""

from __future__ import annotations


class GraphError(Exception):
    """Base exception for graph operations."""
    pass


class NodeNameExistsError(GraphError):
    """Raised when adding a node whose label is already registered."""

    def __init__(self, label: str):
        self.label = label
        super().__init__(f"Node name already exists: {label!r}")


class NoRouteError(GraphError):
    """Raised when no directed path connects two labels."""

    def __init__(self, source: str, target: str):
        self.source = source
        self.target = target
        super().__init__(f"No route from {source!r} to {target!r}")


class NoScheduleError(GraphError):
    """Raised when a graph cannot be split into two conflict-free groups."""

    def __init__(self, graph_name: str = ""):
        self.graph_name = graph_name
        where = f" for graph {graph_name!r}" if graph_name else ""
        super().__init__(f"No valid schedule exists{where}")
