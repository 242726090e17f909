"""
Adjacency-matrix graph representation.

DenseGraph stores edges in a square numpy boolean matrix, with a dict from
label to row index and a list from row index back to label. Edge lookup and
insertion are O(1); listing neighbors scans one row, O(N). Memory is O(N^2),
so prefer SparseGraph for large graphs with few edges.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Set

import numpy as np

from ..logging import get_logger
from .base import LabelGraph
from .exceptions import NodeNameExistsError

logger = get_logger(__name__)


class DenseGraph(LabelGraph):
    """
    Directed graph backed by an adjacency matrix.

    Attributes:
        name: Descriptive graph name.

    Complexity:
        - add_node: O(N^2) (the matrix is reallocated one row/column larger)
        - add_directed_edge: O(1) for existing endpoints
        - get_neighbors: O(N)
        - count_self_edges: O(N)
        - reaches_all_others: O(N)

    Example:
        >>> g = DenseGraph("labs")
        >>> g.add_undirected_edge("lab 1", "lab 2")
        >>> sorted(g.get_neighbors("lab 1"))
        ['lab 2']
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._matrix = np.zeros((0, 0), dtype=bool)
        self._index: Dict[str, int] = {}
        self._labels: List[str] = []

    def _register(self, label: str) -> int:
        n = len(self._labels)
        grown = np.zeros((n + 1, n + 1), dtype=bool)
        grown[:n, :n] = self._matrix
        self._matrix = grown
        self._index[label] = n
        self._labels.append(label)
        logger.debug("graph %r: registered node %r at index %d", self.name, label, n)
        return n

    def add_node(self, label: str) -> None:
        if label in self._index:
            raise NodeNameExistsError(label)
        self._register(label)

    def ensure_node(self, label: str) -> bool:
        if label in self._index:
            return False
        self._register(label)
        return True

    def _index_of(self, label: str) -> int:
        index = self._index.get(label)
        if index is None:
            index = self._register(label)
        return index

    def add_directed_edge(self, src: str, dst: str) -> None:
        i = self._index_of(src)
        j = self._index_of(dst)
        self._matrix[i, j] = True

    def has_node(self, label: str) -> bool:
        return label in self._index

    def get_all_nodes(self) -> List[str]:
        return list(self._labels)

    def get_neighbors(self, label: str) -> Set[str]:
        index = self._index.get(label)
        if index is None:
            return set()
        return {self._labels[j] for j in np.flatnonzero(self._matrix[index])}

    def count_self_edges(self) -> int:
        return int(np.count_nonzero(np.diagonal(self._matrix)))

    def reaches_all_others(self, label: str) -> bool:
        index = self._index.get(label)
        if index is None:
            return False
        row = self._matrix[index].copy()
        row[index] = True
        return bool(row.all())

    def adjacency_matrix(self, order: Optional[Sequence[str]] = None) -> np.ndarray:
        if order is None:
            return self._matrix.copy()
        return super().adjacency_matrix(order)

    def __len__(self) -> int:
        return len(self._labels)
