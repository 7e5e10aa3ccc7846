import pytest

from dddplayer.intimacy import IntimacyGraph


@pytest.fixture
def social_graph():
    graph = IntimacyGraph()
    graph.intimacy_plus_one("Alice", "Bob")
    graph.intimacy_plus_one("Alice", "Charlie")
    graph.intimacy_plus_one("Bob", "David")
    graph.intimacy_plus_one("Charlie", "David")
    graph.intimacy_plus_one("Charlie", "Susan")
    return graph


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("Alice", "Bob", 1),
        ("Alice", "Charlie", 1),
        ("Alice", "David", 1),
        ("Alice", "Susan", 0.5),
        ("Bob", "Charlie", 2.0 / 3),
        ("Charlie", "David", 1),
    ],
)
def test_intimacy(social_graph, first, second, expected):
    assert social_graph.intimacy(first, second) == expected


def test_unknown_names_score_zero(social_graph):
    assert social_graph.intimacy("Alice", "Nobody") == 0.0
    assert social_graph.intimacy("Nobody", "Alice") == 0.0


def test_empty_graph_scores_zero():
    assert IntimacyGraph().intimacy("A", "B") == 0.0


def test_plus_one_links_pair():
    graph = IntimacyGraph()
    graph.intimacy_plus_one("A", "B")
    assert graph.intimacy("A", "B") == 1.0
    graph.intimacy_plus_one("B", "C")
    assert graph.intimacy("B", "C") == 1.0
    assert graph.intimacy("A", "C") == 1.0


def test_plus_one_increments_existing_link_in_either_direction():
    graph = IntimacyGraph()
    graph.intimacy_plus_one("A", "B")
    graph.intimacy_plus_one("A", "B")
    assert graph.intimacy("A", "B") == 2.0
    graph.intimacy_plus_one("B", "A")
    assert graph.intimacy("A", "B") == 3.0
    assert graph.intimacy("B", "A") == 3.0