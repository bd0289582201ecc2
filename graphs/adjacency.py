import logging
from typing import Iterable, Optional, Sequence

import networkx as nx
import numpy as np

from graphs.graph import UndirectedGraph

logger = logging.getLogger(__name__)


def parse_adjacency(lines: Iterable[str], allow_parallel_edges: bool = False,
                    weight: int = 1) -> UndirectedGraph:
    """
    Build a graph from adjacency lines: a source token followed by the tokens
    of its neighbors. Blank lines are skipped.

    Adjacency files usually list every edge from both ends, so with parallel
    edges disallowed `a b` and `b a` collapse into one edge.
    """
    graph = UndirectedGraph(allow_parallel_edges)
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        source = tokens[0]
        graph.add_vertex(source)
        for neighbor in tokens[1:]:
            graph.add_edge(source, neighbor, weight)

    logger.debug("parsed %d vertices, %d edges", graph.count_vertices(), graph.count_edges())
    return graph


def read_adjacency_file(path, allow_parallel_edges: bool = False,
                        weight: int = 1) -> UndirectedGraph:
    with open(path, encoding="utf-8") as fh:
        return parse_adjacency(fh, allow_parallel_edges=allow_parallel_edges, weight=weight)


def from_adjacency_matrix(matrix: np.ndarray, labels: Optional[Sequence] = None,
                          allow_parallel_edges: bool = False) -> UndirectedGraph:
    """
    graph_matrix is an (n x n) symmetric adjacency matrix; non-zero entries of
    the upper triangle become edges carrying the entry as integer weight.
    """
    n = matrix.shape[0]
    if labels is None:
        labels = range(n)
    elif len(labels) != n:
        raise ValueError(f"expected {n} labels, got {len(labels)}")

    graph = UndirectedGraph(allow_parallel_edges)
    for label in labels:
        graph.add_vertex(label)

    rows, cols = np.nonzero(np.triu(matrix, k=1))
    for i, j in zip(rows, cols):
        graph.add_edge(labels[i], labels[j], int(matrix[i, j]))
    return graph


def to_networkx(graph) -> nx.Graph:
    """
    Collapse `graph` into a simple networkx graph. Parallel edges merge into
    one with the smallest `weight` and a `multiplicity` count, which is what
    spanning tree and edge-count cut references need.
    """
    G = nx.Graph()
    G.add_nodes_from(graph.values())
    for edge in graph.edges:
        u = graph.vertices[edge.initial].value
        v = graph.vertices[edge.terminal].value
        if G.has_edge(u, v):
            data = G[u][v]
            data['weight'] = min(data['weight'], edge.weight)
            data['multiplicity'] += 1
        else:
            G.add_edge(u, v, weight=edge.weight, multiplicity=1)
    return G
