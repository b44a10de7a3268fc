import pytest

from grafo.coloring import degree_ordered_coloring, format_coloring, greedy_coloring
from grafo.graph import Edge, Graph


def complete_graph(n):
    graph = Graph(n)
    for a in range(n):
        for b in range(a + 1, n):
            graph.add_edge(Edge(a, b))
    return graph


def star_centered_last(leaves):
    graph = Graph(leaves + 1)
    for leaf in range(leaves):
        graph.add_edge(Edge(leaf, leaves))
    return graph


def is_proper(graph, colors):
    return all(
        colors[v] != colors[u]
        for v in range(graph.vertex_count())
        for u in graph.neighbours(v)
    )


@pytest.mark.parametrize("coloring", [greedy_coloring, degree_ordered_coloring])
def test_edgeless_graph_uses_one_colour(coloring):
    colors = coloring(Graph(5))
    assert colors == [1] * 5


@pytest.mark.parametrize("coloring", [greedy_coloring, degree_ordered_coloring])
@pytest.mark.parametrize("n", [1, 2, 3, 4, 6])
def test_complete_graph_needs_all_colours(coloring, n):
    graph = complete_graph(n)
    colors = coloring(graph)
    assert sorted(colors) == list(range(1, n + 1))
    assert is_proper(graph, colors)


@pytest.mark.parametrize("coloring", [greedy_coloring, degree_ordered_coloring])
def test_one_colour_per_vertex(coloring):
    graph = star_centered_last(4)
    assert len(coloring(graph)) == graph.vertex_count()


@pytest.mark.parametrize("coloring", [greedy_coloring, degree_ordered_coloring])
def test_star_is_two_coloured(coloring):
    graph = star_centered_last(3)
    colors = coloring(graph)
    assert len(set(colors[:3])) == 1
    assert colors[3] not in colors[:3]
    assert is_proper(graph, colors)


def test_greedy_colours_leaves_before_centre():
    colors = greedy_coloring(star_centered_last(3))
    assert colors[0] == 1
    assert colors[3] > colors[0]


def test_degree_order_colours_centre_first():
    colors = degree_ordered_coloring(star_centered_last(3))
    assert colors[3] == 1
    assert colors[0] > colors[3]


def test_empty_graph_has_no_colours():
    assert greedy_coloring(Graph(0)) == []
    assert degree_ordered_coloring(Graph(0)) == []


def test_format_coloring_lists_vertices_by_colour():
    assert format_coloring([1, 2, 1]) == "Numero de cores: 2\nCor 1: 0 2 \nCor 2: 1 \n"


def test_format_coloring_of_nothing():
    assert format_coloring([]) == "Numero de cores: -1\n"


def test_format_coloring_line_count_matches_highest_colour():
    graph = complete_graph(4)
    text = format_coloring(greedy_coloring(graph))
    lines = text.splitlines()
    assert lines[0] == "Numero de cores: 4"
    assert len(lines) == 1 + 4
    assert all(line.startswith(f"Cor {i}: ") for i, line in enumerate(lines[1:], start=1))