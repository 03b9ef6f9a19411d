import pytest

from dsbasics.graph import Graph, main


@pytest.fixture
def graph():
    pair = Graph()
    for name in ("Kiro", "Dodo"):
        pair.add_vertex(name)
    return pair


def test_add_vertex_once():
    fresh = Graph()
    assert [fresh.add_vertex("Kiro") for _ in range(2)] == [True, False]
    assert fresh.vertices() == ["Kiro"]


def test_add_edge_is_symmetric(graph):
    assert graph.add_edge("Kiro", "Dodo") is True
    assert (graph.neighbours("Kiro"), graph.neighbours("Dodo")) == ({"Dodo"}, {"Kiro"})


@pytest.mark.parametrize("ends", [("Kiro", "Nobody"), ("Nobody", "Kiro"), ("a", "b")])
def test_add_edge_missing_vertex_raises(graph, ends):
    with pytest.raises(KeyError):
        graph.add_edge(*ends)
    assert graph.neighbours("Kiro") == frozenset()


@pytest.mark.parametrize(
    ("ends", "removed"), [(("Kiro", "Dodo"), True), (("Kiro", "Nobody"), False)]
)
def test_remove_edge(graph, ends, removed):
    graph.add_edge("Kiro", "Dodo")
    assert graph.remove_edge(*ends) is removed
    expected = frozenset() if removed else {"Dodo"}
    assert graph.neighbours("Kiro") == expected


def test_remove_vertex_drops_edges(graph):
    graph.add_vertex("Mama")
    graph.add_edge("Kiro", "Dodo")
    graph.add_edge("Mama", "Dodo")
    graph.remove_vertex("Dodo")
    assert "Dodo" not in graph
    assert {name: graph.neighbours(name) for name in ("Kiro", "Mama")} == {
        "Kiro": frozenset(),
        "Mama": frozenset(),
    }
    assert len(graph) == 2


def test_remove_absent_vertex_keeps_graph(graph):
    graph.remove_vertex("Nobody")
    assert graph.vertices() == ["Kiro", "Dodo"]


def test_render_numbers_vertices(graph):
    assert graph.render() == "1: Kiro\n2: Dodo"


def test_render_empty():
    assert Graph().render() == ""


def test_neighbours_of_missing_vertex():
    with pytest.raises(KeyError):
        Graph().neighbours("x")


def test_main(capsys):
    status = main([])
    printed = capsys.readouterr().out.splitlines()
    assert status == 0
    assert (printed[0], printed[-1]) == ("Kiro<-->Dodo", "1: Kiro")