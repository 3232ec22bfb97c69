import pytest

from causalid import CausalGraph
from environments import textbook_dags


@pytest.fixture
def collider():
    return textbook_dags.collider()


@pytest.fixture
def confounded():
    return textbook_dags.confounded()


@pytest.fixture
def mediated():
    return textbook_dags.mediated()


@pytest.fixture
def frontdoor():
    return textbook_dags.frontdoor()


@pytest.fixture
def diamond():
    """A -> B, A -> C, B -> D, C -> D, D -> E."""
    return CausalGraph.from_edges(
        ["A", "B", "C", "D", "E"],
        [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D"), ("D", "E")],
    )
