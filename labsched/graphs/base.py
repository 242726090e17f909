"""
Label-addressed directed graph interface.

LabelGraph is the single abstraction the path and scheduling algorithms work
against. Nodes are identified only by their string labels; each concrete
representation keeps its own private integer indexing.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np


class LabelGraph(ABC):
    """
    Abstract directed graph keyed by unique string labels.

    Undirected edges are stored as a pair of directed edges. Edge insertion
    registers missing endpoints and is idempotent; nodes and edges are never
    removed.

    Subclasses implement node registration, edge recording and the read-only
    queries. The base class derives undirected edges, edge listing and the
    adjacency matrix export from those primitives.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name

    # ------------------------------------------------------------------ #
    # Mutation
    # ------------------------------------------------------------------ #
    @abstractmethod
    def add_node(self, label: str) -> None:
        """
        Register a new node.

        Raises:
            NodeNameExistsError: If ``label`` is already registered. The graph
                is left unchanged.
        """

    @abstractmethod
    def ensure_node(self, label: str) -> bool:
        """Register ``label`` if absent. Returns True if it was created."""

    @abstractmethod
    def add_directed_edge(self, src: str, dst: str) -> None:
        """
        Record the edge ``src -> dst``.

        Missing endpoints are registered first. Adding an existing edge is a
        no-op. Never raises.
        """

    def add_undirected_edge(self, a: str, b: str) -> None:
        """Record both ``a -> b`` and ``b -> a``."""
        self.add_directed_edge(a, b)
        self.add_directed_edge(b, a)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    @abstractmethod
    def has_node(self, label: str) -> bool:
        """Return True if ``label`` is registered."""

    @abstractmethod
    def get_all_nodes(self) -> List[str]:
        """Return every label in first-registration order."""

    @abstractmethod
    def get_neighbors(self, label: str) -> Set[str]:
        """
        Return the labels reachable over one outgoing edge from ``label``.

        An unregistered label has no neighbors; an empty set is returned
        rather than raising.
        """

    @abstractmethod
    def count_self_edges(self) -> int:
        """Return the number of labels with an edge to themselves."""

    @abstractmethod
    def reaches_all_others(self, label: str) -> bool:
        """
        Return True if ``label`` has a direct edge to every other label.

        A self-loop neither helps nor hurts. An unregistered label returns
        False.
        """

    def edges(self) -> List[Tuple[str, str]]:
        """
        Return every directed edge as ``(src, dst)``.

        Sources follow node order; targets of one source are sorted.
        """
        return [
            (src, dst)
            for src in self.get_all_nodes()
            for dst in sorted(self.get_neighbors(src))
        ]

    def adjacency_matrix(self, order: Optional[Sequence[str]] = None) -> np.ndarray:
        """
        Return a boolean adjacency matrix.

        Args:
            order: Labels giving the row/column order. Defaults to
                ``get_all_nodes()``. Labels unknown to the graph get empty
                rows and columns.

        Returns:
            ``(n, n)`` array where ``[i, j]`` is True iff ``order[i] -> order[j]``.
        """
        labels = list(self.get_all_nodes() if order is None else order)
        index = {label: i for i, label in enumerate(labels)}
        matrix = np.zeros((len(labels), len(labels)), dtype=bool)
        for i, label in enumerate(labels):
            for neighbor in self.get_neighbors(label):
                j = index.get(neighbor)
                if j is not None:
                    matrix[i, j] = True
        return matrix

    def __len__(self) -> int:
        return len(self.get_all_nodes())

    def __contains__(self, label: object) -> bool:
        return isinstance(label, str) and self.has_node(label)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(name={self.name!r}, "
            f"nodes={len(self)}, edges={len(self.edges())})"
        )
