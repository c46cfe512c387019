import pytest

from mtds.cli import main


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("0 1\n1 2\n2 0\n2 3\n", encoding="utf-8")
    return path


def test_prints_maximal_subgraph(graph_file, capsys):
    assert main([str(graph_file), "--theta", "0.5", "0", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[-2] == "Maximal Subgraph"
    assert lines[-1] == "0 1 2"


def test_prints_adjacency_first(graph_file, capsys):
    assert main([str(graph_file), "--theta", "0.5", "0", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0].startswith("0:")
    assert len(lines) == 4 + 2


def test_missing_file_returns_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt"), "0"]) == 1
    assert "Failed to open file" in capsys.readouterr().err


def test_seed_outside_graph_exits(graph_file):
    with pytest.raises(SystemExit) as excinfo:
        main([str(graph_file), "0", "9"])
    assert excinfo.value.code == 2


def test_default_seed_outside_small_graph_exits(graph_file):
    with pytest.raises(SystemExit) as excinfo:
        main([str(graph_file)])
    assert excinfo.value.code == 2