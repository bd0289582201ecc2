"""Tests for Karger's random contraction minimum cut."""

import networkx as nx
import pytest

from algorithms.karger import minimum_cut, minimum_cut_value, trial_count
from graph_generators.erdos_renyi import generate_er
from graphs.adjacency import from_adjacency_matrix, to_networkx
from graphs.exceptions import CloneUnsupportedError
from graphs.graph import UndirectedGraph


class Uncopyable:

    def __init__(self, name):
        self.name = name

    def __hash__(self):
        return hash(self.name)

    def __eq__(self, other):
        return isinstance(other, Uncopyable) and self.name == other.name

    def __deepcopy__(self, memo):
        raise TypeError("cannot copy")


def test_trial_count():
    assert trial_count(0) == 0
    assert trial_count(1) == 0
    assert trial_count(2) == 3
    assert trial_count(6) == 65
    assert trial_count(10) == 231


def test_bridge_graph(bridge_graph):
    results = [minimum_cut(bridge_graph, seed=s) for s in range(5)]
    best = min(results, key=lambda r: r.value)
    assert best.value == 1
    assert best.trials == 65
    sides = {frozenset(side) for side in best.partition}
    assert sides == {frozenset({"a1", "a2", "a3"}), frozenset({"b1", "b2", "b3"})}


def test_candidate_never_below_true_cut(bridge_graph):
    for s in range(3):
        assert minimum_cut_value(bridge_graph, seed=s) >= 1


def test_original_graph_untouched(bridge_graph):
    values = bridge_graph.values()
    edges = [(e.initial, e.terminal, e.weight) for e in bridge_graph.edges]
    bridge_graph.minimum_cut_value(seed=0)
    assert bridge_graph.values() == values
    assert [(e.initial, e.terminal, e.weight) for e in bridge_graph.edges] == edges


def test_seed_is_reproducible(bridge_graph):
    assert minimum_cut(bridge_graph, seed=123) == minimum_cut(bridge_graph, seed=123)


def test_parallel_run_matches_serial(bridge_graph):
    serial = minimum_cut(bridge_graph, seed=9)
    parallel = minimum_cut(bridge_graph, seed=9, workers=2)
    assert parallel == serial


def test_cut_counts_edges_not_weight():
    g = UndirectedGraph(allow_parallel_edges=True)
    g.add_edge("A", "B", 10)
    g.add_edge("A", "B", 20)
    g.add_edge("B", "A", 30)
    result = minimum_cut(g, seed=0)
    assert result.value == 3
    assert result.trials == 3


def test_parallel_edges_count_towards_cut(bridge_graph):
    g = UndirectedGraph(allow_parallel_edges=True)
    for e in bridge_graph.edges:
        g.add_edge(bridge_graph.vertices[e.initial].value,
                   bridge_graph.vertices[e.terminal].value)
    g.add_edge("a3", "b1")
    assert min(minimum_cut_value(g, seed=s) for s in range(5)) == 2


def test_disconnected_graph_has_zero_cut():
    g = UndirectedGraph()
    for u, v in [("a", "b"), ("b", "c"), ("a", "c"), ("x", "y"), ("y", "z"), ("x", "z")]:
        g.add_edge(u, v)
    assert minimum_cut_value(g, seed=1) == 0


def test_trivial_graphs():
    assert minimum_cut_value(UndirectedGraph()) == 0
    g = UndirectedGraph()
    g.add_vertex("only")
    result = minimum_cut(g)
    assert result.value == 0
    assert result.trials == 0


def test_clone_failure_propagates():
    g = UndirectedGraph()
    g.add_edge(Uncopyable("a"), Uncopyable("b"))
    with pytest.raises(CloneUnsupportedError):
        minimum_cut(g, seed=0)


@pytest.mark.parametrize("seed", [3, 8])
def test_matches_stoer_wagner(seed):
    graph = from_adjacency_matrix(generate_er(8, 0.6, seed=seed))
    G = to_networkx(graph)
    if not nx.is_connected(G):
        pytest.skip("random graph is disconnected")
    expected, _ = nx.stoer_wagner(G, weight='multiplicity')
    assert min(minimum_cut_value(graph, seed=s) for s in range(3)) == expected
