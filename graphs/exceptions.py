class GraphError(ValueError):
    """Base class for graph construction and cloning failures."""


class DuplicateEdgeRejected(GraphError):
    """Raised by a strict add_edge when parallel edges are disallowed."""

    def __init__(self, u, v):
        super().__init__(f"edge {u!r} -- {v!r} already exists and parallel edges are disabled")
        self.u = u
        self.v = v


class CloneUnsupportedError(GraphError):
    """A vertex value could not be duplicated while cloning a graph."""
