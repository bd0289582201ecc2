import logging
from operator import attrgetter
from typing import NamedTuple, Tuple

from algorithms.heap import PriorityQueue

logger = logging.getLogger(__name__)


class SpanningTree(NamedTuple):
    weight: int
    edges: Tuple


def minimum_spanning_tree(graph) -> SpanningTree:
    """
    Prim's algorithm grown from the first vertex of `graph`.

    Weights may be negative, zero or positive. Parallel edges and edges made
    stale by later tree growth are discarded when they surface from the heap.
    If the heap runs dry before every vertex is reached (disconnected graph)
    the tree of the start vertex's component is returned as is.
    """
    n = graph.count_vertices()
    if n == 0:
        return SpanningTree(0, ())

    start = 0
    inside = {start}
    heap = PriorityQueue(key=attrgetter('weight'), items=graph.incident_edges(start))

    tree = []
    total = 0

    while len(inside) != n:
        crossing = None
        while not heap.is_empty():
            edge = heap.extract_min()
            if (edge.initial in inside) != (edge.terminal in inside):
                crossing = edge
                break

        if crossing is None:
            logger.debug("heap exhausted after reaching %d of %d vertices", len(inside), n)
            break

        tree.append(crossing)
        y = crossing.terminal if crossing.initial in inside else crossing.initial
        inside.add(y)

        for edge in graph.incident_edges(y):
            if edge.other(y) not in inside:
                heap.insert(edge)

        total += crossing.weight

    return SpanningTree(total, tuple(tree))


def minimum_spanning_tree_weight(graph) -> int:
    return minimum_spanning_tree(graph).weight
