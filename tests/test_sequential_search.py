import random

import pytest

from graph_query.search import SequentialSearch

from conftest import build_store, is_valid_path, shortest_distance


def test_node_exists(chain_store):
    search = SequentialSearch(chain_store)
    assert search.node_exists("N4")
    assert not search.node_exists("N5")


def test_edge_direction_is_respected(chain_store):
    search = SequentialSearch(chain_store)
    assert search.edge_exists("N0", "N1")
    assert not search.edge_exists("N1", "N0")


def test_chain_path(chain_store):
    assert SequentialSearch(chain_store).find_path("N0", "N3") == ["N0", "N1", "N2", "N3"]


def test_no_reverse_path(chain_store):
    assert SequentialSearch(chain_store).find_path("N3", "N0") == []


def test_self_path_and_absent_endpoints(chain_store):
    search = SequentialSearch(chain_store)
    assert search.find_path("N2", "N2") == ["N2"]
    assert search.find_path("N0", "missing") == []
    assert search.find_path("missing", "missing") == []


def test_first_path_follows_neighbor_order():
    store = build_store(
        ["S", "A", "B", "T"],
        [("S", "A"), ("S", "B"), ("A", "B"), ("B", "T")],
    )
    assert SequentialSearch(store).find_path("S", "T") == ["S", "A", "B", "T"]


def test_backtracks_out_of_dead_ends(branching_store):
    path = SequentialSearch(branching_store).find_path("A", "E")
    assert path == ["A", "B", "D", "E"]
    assert SequentialSearch(branching_store).find_path("E", "A") == []
    assert SequentialSearch(branching_store).find_path("F", "E") == ["F", "C", "D", "E"]


def test_long_chain_does_not_recurse():
    size = 5000
    nodes = [f"N{i}" for i in range(size)]
    store = build_store(nodes, list(zip(nodes, nodes[1:])))
    path = SequentialSearch(store).find_path("N0", f"N{size - 1}")
    assert len(path) == size
    assert is_valid_path(store, path, "N0", f"N{size - 1}")


def test_max_depth_limits_search(chain_store):
    assert SequentialSearch(chain_store, max_depth=2).find_path("N0", "N3") == []
    assert SequentialSearch(chain_store, max_depth=3).find_path("N0", "N3") == ["N0", "N1", "N2", "N3"]


@pytest.fixture
def reconverging_store():
    """A reaches C directly and through B; D hangs off C."""
    return build_store(["A", "B", "C", "D"], [("A", "B"), ("B", "C"), ("C", "D"), ("A", "C")])


def test_max_depth_finds_shorter_route_to_a_node_seen_deeper(reconverging_store):
    search = SequentialSearch(reconverging_store, max_depth=2)
    assert search.find_path("A", "D") == ["A", "C", "D"]
    assert SequentialSearch(reconverging_store, max_depth=1).find_path("A", "D") == []
    assert SequentialSearch(reconverging_store, max_depth=0).find_path("A", "D") == []


def test_bounded_search_agrees_with_shortest_distance_on_random_graphs():
    rng = random.Random(11)
    for _ in range(10):
        nodes = [f"N{i}" for i in range(25)]
        edges = [(rng.choice(nodes), rng.choice(nodes)) for _ in range(45)]
        store = build_store(nodes, edges)
        for bound in (1, 2, 3):
            search = SequentialSearch(store, max_depth=bound)
            for _ in range(15):
                start, end = rng.choice(nodes), rng.choice(nodes)
                distance = shortest_distance(store, start, end)
                path = search.find_path(start, end)
                assert bool(path) == (distance is not None and distance <= bound)
                if path:
                    assert is_valid_path(store, path, start, end)
                    assert len(path) - 1 <= bound


def test_empty_store(empty_store):
    search = SequentialSearch(empty_store)
    assert not search.node_exists("N0")
    assert not search.edge_exists("N0", "N1")
    assert search.find_path("N0", "N1") == []
