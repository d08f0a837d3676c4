from collections import deque
from typing import Iterable, List, Tuple

import pytest

from graph_query.config import SearchSettings
from graph_query.graph_model import GraphEdge, GraphStore


def build_store(nodes: Iterable[str], edges: Iterable[Tuple[str, str]], seal: bool = True) -> GraphStore:
    store = GraphStore()
    for node in nodes:
        store.add_node(node)
    for source, target in edges:
        store.add_edge(source, target)
    if seal:
        store.seal()
    return store


def is_valid_path(store: GraphStore, path: List[str], start: str, end: str) -> bool:
    if not path or path[0] != start or path[-1] != end:
        return False
    edges = set(store.edges())
    return all(GraphEdge(a, b) in edges for a, b in zip(path, path[1:]))


def shortest_distance(store: GraphStore, start: str, end: str) -> int | None:
    """Edge count of the shortest start -> end route, by breadth-first search."""
    distances = {start: 0}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        if node == end:
            return distances[node]
        for neighbor in store.neighbors(node):
            if neighbor not in distances:
                distances[neighbor] = distances[node] + 1
                queue.append(neighbor)
    return None


@pytest.fixture
def chain_store() -> GraphStore:
    """N0..N4 with N0 -> N1 -> N2 -> N3; N4 isolated."""
    return build_store(
        [f"N{i}" for i in range(5)],
        [("N0", "N1"), ("N1", "N2"), ("N2", "N3")],
    )


@pytest.fixture
def branching_store() -> GraphStore:
    """Diamond with a cycle and a dead-end branch."""
    return build_store(
        ["A", "B", "C", "D", "E", "F", "G"],
        [
            ("A", "B"),
            ("A", "C"),
            ("B", "D"),
            ("C", "D"),
            ("D", "A"),
            ("D", "E"),
            ("C", "F"),
            ("F", "C"),
        ],
    )


@pytest.fixture
def empty_store() -> GraphStore:
    return build_store([], [])


@pytest.fixture
def fast_settings() -> SearchSettings:
    return SearchSettings(num_workers=4, poll_timeout=5.0, max_poll_timeouts=1)
