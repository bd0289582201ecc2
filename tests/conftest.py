import pytest

from graphs.graph import UndirectedGraph


@pytest.fixture
def known_graph():
    g = UndirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("B", "C", 2)
    g.add_edge("C", "D", 1)
    g.add_edge("A", "D", 4)
    g.add_edge("B", "D", 3)
    return g


@pytest.fixture
def bridge_graph():
    # two triangles joined by the single edge a3 -- b1
    g = UndirectedGraph()
    for left, right in [("a1", "a2"), ("a2", "a3"), ("a1", "a3"),
                        ("b1", "b2"), ("b2", "b3"), ("b1", "b3"),
                        ("a3", "b1")]:
        g.add_edge(left, right)
    return g


@pytest.fixture
def disconnected_graph():
    g = UndirectedGraph()
    g.add_edge("A", "B", 1)
    g.add_edge("C", "D", 1)
    return g
