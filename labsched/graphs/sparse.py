"""
Adjacency-list graph representation.

SparseGraph owns every node record in a single list (the arena). A node's
outgoing edges are stored as indices into that list, so nodes never hold
references to one another. Neighbor iteration is O(degree) and memory is
O(N + E).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set

from ..logging import get_logger
from .base import LabelGraph
from .exceptions import NodeNameExistsError

logger = get_logger(__name__)


@dataclass
class _Node:
    """Arena entry: a label and the indices of its successors, in insertion order."""

    label: str
    successors: List[int] = field(default_factory=list)


class SparseGraph(LabelGraph):
    """
    Directed graph backed by per-node successor lists.

    Attributes:
        name: Descriptive graph name.

    Complexity:
        - add_node: O(1) amortized
        - add_directed_edge: O(deg(src)) for the duplicate check
        - get_neighbors: O(deg(v))
        - count_self_edges: O(N + E)
        - reaches_all_others: O(N + deg(v))

    Example:
        >>> g = SparseGraph("labs")
        >>> g.add_directed_edge("lab 1", "lab 2")
        >>> g.get_neighbors("lab 2")
        set()
    """

    def __init__(self, name: str = "") -> None:
        super().__init__(name)
        self._nodes: List[_Node] = []
        self._index: Dict[str, int] = {}

    def _register(self, label: str) -> int:
        index = len(self._nodes)
        self._nodes.append(_Node(label))
        self._index[label] = index
        logger.debug("graph %r: registered node %r at index %d", self.name, label, index)
        return index

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
        successors = self._nodes[i].successors
        if j not in successors:
            successors.append(j)

    def has_node(self, label: str) -> bool:
        return label in self._index

    def get_all_nodes(self) -> List[str]:
        return [node.label for node in self._nodes]

    def get_neighbors(self, label: str) -> Set[str]:
        index = self._index.get(label)
        if index is None:
            return set()
        return {self._nodes[j].label for j in self._nodes[index].successors}

    def count_self_edges(self) -> int:
        return sum(1 for i, node in enumerate(self._nodes) if i in node.successors)

    def reaches_all_others(self, label: str) -> bool:
        index = self._index.get(label)
        if index is None:
            return False
        targets = set(self._nodes[index].successors)
        targets.add(index)
        return len(targets) == len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)
