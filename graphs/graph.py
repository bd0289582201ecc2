import copy
import logging
from typing import Dict, Hashable, Iterator, List, Optional

from algorithms.karger import CutResult, minimum_cut
from algorithms.prim import minimum_spanning_tree, SpanningTree
from algorithms.union_find import DisjointSet
from graphs.exceptions import CloneUnsupportedError, DuplicateEdgeRejected

logger = logging.getLogger(__name__)


class Vertex:
    """A graph vertex: a value plus the indices of its incident edges."""

    __slots__ = ("value", "edges")

    def __init__(self, value: Hashable, edges: Optional[List[int]] = None):
        self.value = value
        self.edges = [] if edges is None else edges

    def __eq__(self, other):
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return f"Vertex({self.value!r})"


class Edge:
    """
    Undirected weighted edge between two vertex indices of the same graph.

    Endpoint order carries no meaning: `connects` and equality are symmetric.
    """

    __slots__ = ("initial", "terminal", "weight")

    def __init__(self, initial: int, terminal: int, weight: int = 1):
        self.initial = initial
        self.terminal = terminal
        self.weight = weight

    def connects(self, u: int, v: int) -> bool:
        return ((self.initial == u and self.terminal == v)
                or (self.initial == v and self.terminal == u))

    def other(self, u: int) -> int:
        return self.terminal if self.initial == u else self.initial

    def is_self_loop(self) -> bool:
        return self.initial == self.terminal

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return self.weight == other.weight and self.connects(other.initial, other.terminal)

    def __hash__(self):
        return hash((frozenset((self.initial, self.terminal)), self.weight))

    def __repr__(self):
        return f"Edge({self.initial}, {self.terminal}, weight={self.weight})"


class Graph:
    """
    Vertices and edges stored in two arenas that reference each other by index.

    Vertex values are unique; `add_edge` takes values and resolves them to
    indices. Cloning copies both arenas, so a clone never aliases its source.
    """

    def __init__(self, allow_parallel_edges: bool = False):
        self.allow_parallel_edges = allow_parallel_edges
        self.vertices: List[Vertex] = []
        self.edges: List[Edge] = []
        self._positions: Dict[Hashable, int] = {}

    def count_vertices(self) -> int:
        return len(self.vertices)

    def count_edges(self) -> int:
        return len(self.edges)

    def __len__(self) -> int:
        return len(self.vertices)

    def __contains__(self, value) -> bool:
        return value in self._positions

    def values(self) -> List[Hashable]:
        return [v.value for v in self.vertices]

    def index_of(self, value) -> int:
        return self._positions.get(value, -1)

    def incident_edges(self, index: int) -> Iterator[Edge]:
        for k in self.vertices[index].edges:
            yield self.edges[k]

    def find_edge(self, u: int, v: int) -> Optional[Edge]:
        for edge in self.incident_edges(u):
            if edge.connects(u, v):
                return edge
        return None

    def create_edge(self, u: int, v: int, weight: int) -> Edge:
        return Edge(u, v, weight)

    def add_vertex(self, value) -> int:
        index = self._positions.get(value)
        if index is None:
            index = len(self.vertices)
            self.vertices.append(Vertex(value))
            self._positions[value] = index
        return index

    def add_edge(self, u, v, weight: int = 1, strict: bool = False) -> Optional[Edge]:
        """
        Connect the vertices holding values `u` and `v`, adding them if needed.

        Returns the new edge, or None when the edge was rejected: self-loops are
        always rejected, and so is a second u-v edge unless parallel edges are
        allowed. With `strict=True` the duplicate case raises
        DuplicateEdgeRejected instead.
        """
        iu = self.add_vertex(u)
        iv = self.add_vertex(v)

        if iu == iv:
            logger.debug("ignoring self-loop on %r", u)
            return None

        if not self.allow_parallel_edges and self.find_edge(iu, iv) is not None:
            if strict:
                raise DuplicateEdgeRejected(u, v)
            logger.debug("ignoring parallel edge %r -- %r", u, v)
            return None

        edge = self.create_edge(iu, iv, weight)
        self._link(self.vertices, self.edges, edge)
        return edge

    @staticmethod
    def _link(vertices: List[Vertex], edges: List[Edge], edge: Edge) -> None:
        k = len(edges)
        edges.append(edge)
        vertices[edge.initial].edges.append(k)
        vertices[edge.terminal].edges.append(k)

    def clone(self) -> "Graph":
        """Deep, structurally identical copy of this graph."""
        other = type(self)(self.allow_parallel_edges)
        try:
            other.vertices = [Vertex(copy.deepcopy(v.value), list(v.edges))
                              for v in self.vertices]
        except (TypeError, copy.Error) as exc:
            raise CloneUnsupportedError(f"cannot clone vertex values: {exc}") from exc
        other.edges = [self.create_edge(e.initial, e.terminal, e.weight) for e in self.edges]
        other._positions = {v.value: i for i, v in enumerate(other.vertices)}
        return other

    def contract(self, edge_index: int) -> None:
        """
        Merge the terminal of edge `edge_index` into its initial vertex.

        The contracted edge and any edge that would become a self-loop are
        discarded; every other edge, parallel ones included, is redirected and
        kept. Both arenas are rebuilt rather than edited while being scanned.
        """
        contracted = self.edges[edge_index]
        keep, drop = contracted.initial, contracted.terminal

        mapping = [0] * len(self.vertices)
        vertices: List[Vertex] = []
        for i, vertex in enumerate(self.vertices):
            if i == drop:
                continue
            mapping[i] = len(vertices)
            vertices.append(Vertex(vertex.value))
        mapping[drop] = mapping[keep]

        merged = vertices[mapping[keep]]
        merged.value = f"{self.vertices[keep].value},{self.vertices[drop].value}"

        edges: List[Edge] = []
        for k, edge in enumerate(self.edges):
            if k == edge_index:
                continue
            a, b = mapping[edge.initial], mapping[edge.terminal]
            if a == b:
                continue
            self._link(vertices, edges, self.create_edge(a, b, edge.weight))

        self.vertices = vertices
        self.edges = edges
        self._positions = {v.value: i for i, v in enumerate(vertices)}

    def count_components(self) -> int:
        groups = DisjointSet(max(1, len(self.vertices)))
        for edge in self.edges:
            groups.union(edge.initial, edge.terminal)
        return groups.count_groups() if self.vertices else 0

    def is_connected(self) -> bool:
        return self.count_components() <= 1

    def __str__(self):
        lines = [f"Vertices ({len(self.vertices)}): "
                 + ", ".join(str(v.value) for v in self.vertices),
                 f"Edges ({len(self.edges)}):"]
        for edge in self.edges:
            lines.append(f"  {self.vertices[edge.initial].value} -- "
                         f"{self.vertices[edge.terminal].value} ({edge.weight})")
        return "\n".join(lines)


class UndirectedGraph(Graph):
    """Graph with the spanning tree and minimum cut algorithms attached."""

    def minimum_spanning_tree(self) -> SpanningTree:
        return minimum_spanning_tree(self)

    def minimum_spanning_tree_weight(self) -> int:
        return minimum_spanning_tree(self).weight

    def minimum_cut(self, seed: Optional[int] = None, workers: int = 1,
                    progress: bool = False) -> CutResult:
        return minimum_cut(self, seed=seed, workers=workers, progress=progress)

    def minimum_cut_value(self, seed: Optional[int] = None, workers: int = 1) -> int:
        return minimum_cut(self, seed=seed, workers=workers).value
