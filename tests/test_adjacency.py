import pytest

from mtds.adjacency import (
    build_adjacency_list,
    format_adjacency_list,
    parse_adjacency_list,
)


def test_parse_simple_path():
    assert parse_adjacency_list(["0 1", "1 2"]) == [[1], [0, 2], [1]]


def test_parse_empty_input_has_single_vertex():
    assert parse_adjacency_list([]) == [[]]


def test_malformed_lines_are_skipped():
    assert parse_adjacency_list(["0 1", "junk", "", "3"]) == parse_adjacency_list(["0 1"])


def test_extra_fields_are_ignored():
    assert parse_adjacency_list(["0 1 5"]) == parse_adjacency_list(["0 1"])


def test_adjacency_is_symmetric():
    adjacency = parse_adjacency_list(["0 1", "1 2", "2 0", "2 5", "4 3"])
    for u, neighbours in enumerate(adjacency):
        for v in neighbours:
            assert u in adjacency[v]


def test_size_follows_largest_vertex():
    adjacency = parse_adjacency_list(["3 7", "1 2"])
    assert len(adjacency) == 8
    assert adjacency[5] == []


def test_negative_vertex_rejected():
    with pytest.raises(ValueError):
        parse_adjacency_list(["-1 2"])


def test_build_from_file_matches_parse(tmp_path):
    lines = ["0 1", "1 2", "2 0", "2 3"]
    path = tmp_path / "graph.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert build_adjacency_list(path) == parse_adjacency_list(lines)


def test_build_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_adjacency_list(tmp_path / "missing.txt")


def test_format_adjacency_list():
    assert format_adjacency_list([[1], [0]]) == "0: 1\n1: 0"


def test_format_has_one_line_per_vertex():
    adjacency = parse_adjacency_list(["0 1", "1 2", "4 2"])
    lines = format_adjacency_list(adjacency).splitlines()
    assert len(lines) == len(adjacency)
    assert all(line.startswith(f"{i}:") for i, line in enumerate(lines))