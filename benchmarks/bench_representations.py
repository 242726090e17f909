"""Benchmark dense vs sparse graph representations."""

import time
from typing import Dict

import numpy as np

import labsched as ls


def benchmark_representation(
    representation: str,
    n_nodes: int,
    avg_degree: float = 4.0,
    seed: int = 0,
) -> Dict[str, float]:
    """Benchmark one representation on a random undirected graph.

    Args:
        representation: "dense" or "sparse".
        n_nodes: Number of nodes.
        avg_degree: Expected number of neighbors per node.
        seed: RNG seed, so both representations see the same edges.

    Returns:
        Dictionary with timing results.
    """
    rng = np.random.default_rng(seed)
    n_edges = int(n_nodes * avg_degree / 2)
    endpoints = rng.integers(0, n_nodes, size=(n_edges, 2))
    labels = [f"n{i}" for i in range(n_nodes)]

    start = time.perf_counter()
    graph = ls.graph_from_edges(
        [(labels[a], labels[b]) for a, b in endpoints if a != b],
        nodes=labels,
        representation=representation,
    )
    build_time = time.perf_counter() - start

    start = time.perf_counter()
    for target in labels[:: max(1, n_nodes // 20)]:
        ls.has_route(graph, labels[0], target)
    route_time = time.perf_counter() - start

    start = time.perf_counter()
    try:
        ls.find_schedule(graph)
    except ls.NoScheduleError:
        pass
    schedule_time = time.perf_counter() - start

    return {
        "n_nodes": n_nodes,
        "n_edges": n_edges,
        "build_time_sec": build_time,
        "route_time_sec": route_time,
        "schedule_time_sec": schedule_time,
    }


if __name__ == "__main__":
    print("Benchmarking graph representations...")
    for n_nodes in [100, 500, 1000]:
        for representation in ["dense", "sparse"]:
            result = benchmark_representation(representation, n_nodes)
            print(
                f"{representation:>6} n={n_nodes:5d}: "
                f"build {result['build_time_sec'] * 1e3:8.2f} ms, "
                f"routes {result['route_time_sec'] * 1e3:8.2f} ms, "
                f"schedule {result['schedule_time_sec'] * 1e3:8.2f} ms"
            )
