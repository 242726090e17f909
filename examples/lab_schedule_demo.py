"""Example: Splitting lab sections between two teaching assistants.

Builds the same clash graph with both representations, finds routes between
sections, and computes a two-way schedule.
"""

import labsched as ls
from labsched import NoRouteError, NoScheduleError


CLASHES = [
    ("Mon 9am", "Mon 10am"),
    ("Mon 10am", "Mon 11am"),
    ("Mon 11am", "Wed 9am"),
    ("Wed 9am", "Wed 10am"),
    ("Thu 2pm", "Thu 3pm"),
]


def build(representation: str) -> ls.LabelGraph:
    graph = ls.create_graph(representation, name=f"labs ({representation})")
    graph.add_node("Fri 4pm")  # no clashes
    for a, b in CLASHES:
        graph.add_undirected_edge(a, b)
    return graph


def example_routes(graph: ls.LabelGraph) -> None:
    """Example: shortest chains of clashes between sections."""
    print("=" * 60)
    print(f"Routes in {graph!r}")
    print("=" * 60)

    route = ls.get_route(graph, "Mon 9am", "Wed 10am")
    print(f"Mon 9am -> Wed 10am: {' -> '.join(route)}")

    try:
        ls.get_route(graph, "Mon 9am", "Thu 3pm")
    except NoRouteError as exc:
        print(f"As expected: {exc}")


def example_schedule(graph: ls.LabelGraph) -> None:
    """Example: two-way schedule and validation."""
    first, second = ls.find_schedule(graph)
    print(f"Assistant 1: {sorted(first)}")
    print(f"Assistant 2: {sorted(second)}")
    print(f"Valid: {ls.check_validity(graph, [first, second])}")

    graph.add_undirected_edge("Mon 9am", "Mon 11am")  # closes an odd cycle
    try:
        ls.find_schedule(graph)
    except NoScheduleError as exc:
        print(f"After adding an odd cycle: {exc}")


if __name__ == "__main__":
    for representation in sorted(ls.REPRESENTATIONS):
        graph = build(representation)
        example_routes(graph)
        example_schedule(graph)
        print()
    print("Lab scheduling demo complete")
