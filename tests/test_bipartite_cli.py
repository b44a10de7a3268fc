import io

import pytest

from grafo.bipartite_cli import main, read_graph, run

TRIANGLE = "3 3\n0 1 A\n1 2 A\n0 2 A\n"
PATH = "3 2\n0 1 A\n1 2 A\n"


def test_read_graph_keeps_only_a_relations():
    graph = read_graph("3 3\n0 1 A\n1 2 B\n0 2 A\n")
    assert graph.vertex_count() == 3
    assert graph.edge_count() == 2
    assert graph.has_edge((0, 1))
    assert not graph.has_edge((1, 2))


def test_read_graph_ignores_repeated_relations():
    graph = read_graph("2 2\n0 1 A\n1 0 A\n")
    assert graph.edge_count() == 1


def test_read_graph_accepts_kind_next_to_number():
    graph = read_graph("2 1 0 1A")
    assert graph.has_edge((0, 1))


def test_triangle_is_not_bipartite():
    assert run(TRIANGLE) == "NAO\nNAO\n"


def test_path_is_bipartite():
    assert run(PATH) == "SIM\nSIM\n"


def test_dropping_a_relation_breaks_the_odd_cycle():
    assert run("3 3\n0 1 A\n1 2 A\n0 2 X\n") == run(PATH)


def test_truncated_input_is_rejected():
    with pytest.raises(ValueError):
        read_graph("3 2\n0 1 A\n1")


def test_vertex_out_of_range_is_rejected():
    with pytest.raises(IndexError):
        read_graph("2 1\n0 5 A\n")


def test_main_prints_answers(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(TRIANGLE))
    assert main() == 0
    assert capsys.readouterr().out == "NAO\nNAO\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("x"))
    assert main() == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "error" in captured.err