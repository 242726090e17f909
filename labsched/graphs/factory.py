"""Factory for creating graphs from configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple, Type, Union

from .base import LabelGraph
from .dense import DenseGraph
from .sparse import SparseGraph

REPRESENTATIONS: Dict[str, Type[LabelGraph]] = {
    "dense": DenseGraph,
    "sparse": SparseGraph,
}


@dataclass(frozen=True)
class GraphConfig:
    """
    Configuration for creating a graph.

    Args:
        representation: Storage backend name. Supported values: "dense"
            (adjacency matrix) and "sparse" (adjacency lists). Case-insensitive.
            Defaults to "sparse".
        name: Descriptive graph name. Defaults to "".
    """

    representation: str = "sparse"
    name: str = ""


def _resolve(representation: str) -> Type[LabelGraph]:
    key = representation.lower()
    if key not in REPRESENTATIONS:
        supported = ", ".join(sorted(REPRESENTATIONS))
        raise ValueError(
            f"Unsupported graph representation: {representation!r}. "
            f"Supported representations: {supported}."
        )
    return REPRESENTATIONS[key]


def create_graph(
    config: Union[GraphConfig, str, None] = None, *, name: Optional[str] = None
) -> LabelGraph:
    """
    Create an empty graph.

    Args:
        config: A GraphConfig, a representation name, or None for the
            default configuration.
        name: Overrides the configured graph name when given.

    Returns:
        A new, empty LabelGraph of the requested representation.

    Raises:
        ValueError: If the representation name is not supported.

    Example:
        >>> g = create_graph("dense", name="labs")
        >>> type(g).__name__
        'DenseGraph'
    """
    if config is None:
        config = GraphConfig()
    elif isinstance(config, str):
        config = GraphConfig(representation=config)

    cls = _resolve(config.representation)
    return cls(name=config.name if name is None else name)


def graph_from_edges(
    edges: Iterable[Tuple[str, str]],
    *,
    nodes: Iterable[str] = (),
    directed: bool = False,
    representation: str = "sparse",
    name: str = "",
) -> LabelGraph:
    """
    Build a graph from ``(src, dst)`` pairs.

    Args:
        edges: Edge endpoints. Endpoints are registered as they appear.
        nodes: Labels registered before any edge, so isolated nodes can be
            included and node order controlled. Repeats are ignored.
        directed: If False (default), each pair becomes an undirected edge.
        representation: "dense" or "sparse".
        name: Descriptive graph name.

    Returns:
        The populated graph.

    Raises:
        ValueError: If the representation name is not supported.
    """
    graph = create_graph(GraphConfig(representation=representation, name=name))
    for label in nodes:
        graph.ensure_node(label)
    for src, dst in edges:
        if directed:
            graph.add_directed_edge(src, dst)
        else:
            graph.add_undirected_edge(src, dst)
    return graph
