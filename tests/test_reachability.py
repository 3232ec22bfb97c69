import itertools

import pytest

from causalid import (
    CausalGraph,
    UnknownVariableError,
    ancestors,
    ancestral_subgraph,
    descendants,
    has_directed_path,
    markov_blanket,
)
from environments import load_graph


def test_ancestors_and_descendants(diamond):
    assert ancestors(diamond, "D") == {"A", "B", "C"}
    assert ancestors(diamond, "A") == set()
    assert descendants(diamond, "B") == {"D", "E"}
    assert descendants(diamond, "E") == set()


def test_unknown_variable(diamond):
    with pytest.raises(UnknownVariableError):
        ancestors(diamond, "Z")
    with pytest.raises(UnknownVariableError):
        markov_blanket(diamond, "Z")


@pytest.mark.parametrize("name", ["deployment", "clinical", "confounded", "frontdoor", "m_bias"])
def test_no_self_ancestry(name):
    g = load_graph(name)
    for v in g.variables:
        assert v not in ancestors(g, v)
        assert v not in descendants(g, v)


def test_added_edge_implies_ancestry():
    g = CausalGraph(["a", "b", "c", "d"])
    for source, target in [("a", "b"), ("b", "c"), ("a", "d"), ("d", "c")]:
        g = g.add_edge(source, target)
        assert source in ancestors(g, target)
        assert target in descendants(g, source)


@pytest.mark.parametrize("name", ["deployment", "clinical", "confounded"])
def test_reverse_graph_swaps_roles(name):
    g = load_graph(name)
    rev = g.reversed()
    for v in g.variables:
        assert ancestors(rev, v) == descendants(g, v)
        assert descendants(rev, v) == ancestors(g, v)


def test_dense_reconvergent_graph_terminates():
    # Every earlier layer node points at every later one: exponentially many paths.
    names = [f"v{i}" for i in range(60)]
    edges = list(itertools.combinations(names, 2))
    g = CausalGraph.from_edges(names, edges)
    assert descendants(g, "v0") == set(names[1:])
    assert ancestors(g, "v59") == set(names[:-1])


def test_markov_blanket():
    # A -> X <- B, X -> C <- D, C -> E
    g = CausalGraph.from_edges(
        ["A", "B", "X", "C", "D", "E"],
        [("A", "X"), ("B", "X"), ("X", "C"), ("D", "C"), ("C", "E")],
    )
    assert markov_blanket(g, "X") == {"A", "B", "C", "D"}
    assert markov_blanket(g, "E") == {"C"}


def test_ancestral_subgraph(diamond):
    sub = ancestral_subgraph(diamond, ["B"])
    assert sub.variables == ("A", "B")
    assert sub.edges() == [("A", "B")]

    sub = ancestral_subgraph(diamond, ["B", "C"])
    assert sub.variables == ("A", "B", "C")
    assert "D" not in sub


def test_has_directed_path(diamond):
    assert has_directed_path(diamond, "A", "E")
    assert not has_directed_path(diamond, "E", "A")
    assert has_directed_path(diamond, "A", "D", avoiding=["B"])
    assert not has_directed_path(diamond, "A", "D", avoiding=["B", "C"])
    assert has_directed_path(diamond, "A", "B", avoiding=["B"])
    assert has_directed_path(diamond, "C", "C")
