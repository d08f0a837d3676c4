import pytest

from graph_query.cli import generate_main, load_graph
from graph_query.generator import generate_graph_file


def test_generated_file_loads_with_expected_counts(tmp_path):
    path = generate_graph_file(tmp_path / "graph.txt", num_nodes=50, num_edges=120, seed=3)
    store, report = load_graph(str(path))
    assert store.node_count() == 50
    assert store.edge_count() == 120
    assert report.malformed_lines == []
    assert report.dropped_edges == []


def test_edges_are_unique_and_normalized(tmp_path):
    path = generate_graph_file(tmp_path / "graph.txt", num_nodes=10, num_edges=45, seed=1)
    edge_lines = [line for line in path.read_text(encoding="utf-8").splitlines() if line.startswith("-")]
    pairs = [tuple(int(token[1:]) for token in line[1:].split()) for line in edge_lines]
    assert len(pairs) == len(set(pairs)) == 45
    assert all(a < b for a, b in pairs)


def test_seed_makes_output_reproducible(tmp_path):
    first = generate_graph_file(tmp_path / "a.txt", num_nodes=20, num_edges=30, seed=42)
    second = generate_graph_file(tmp_path / "b.txt", num_nodes=20, num_edges=30, seed=42)
    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_too_many_edges_is_rejected(tmp_path):
    with pytest.raises(ValueError):
        generate_graph_file(tmp_path / "graph.txt", num_nodes=4, num_edges=7)


def test_generate_main(tmp_path, capsys):
    target = tmp_path / "out" / "graph.txt"
    code = generate_main(["--output-path", str(target), "--nodes", "5", "--edges", "4", "--seed", "9"])
    assert code == 0
    assert target.exists()
    assert "Graph file generated successfully" in capsys.readouterr().out
    assert generate_main(["--output-path", str(target), "--nodes", "2", "--edges", "5"]) == 2
