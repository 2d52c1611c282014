# faces/graph.py
from collections import defaultdict

import numpy as np


def check_edge_indices(vertex_count, edges):
    """IndexError on the first edge that points outside [0, vertex_count)."""
    for k, (u, v) in enumerate(edges):
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise IndexError(
                f"edge #{k} ({u}, {v}) references a vertex outside [0, {vertex_count})"
            )


def as_index(value):
    """Vertex index from an int or an integral float; ValueError otherwise."""
    if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
        return int(value)
    if isinstance(value, (float, np.floating)) and float(value).is_integer():
        return int(value)
    raise ValueError(f"vertex index must be an integer, got {value!r}")


class Graph:
    """Planar straight-line graph as read from input: vertices + edge list."""

    def __init__(self, vertices, edges):
        self.vertices = [(float(x), float(y)) for x, y in vertices]  # id -> (x,y)
        self.edges = [(as_index(u), as_index(v)) for u, v in edges]   # list[(u,v)]
        check_edge_indices(len(self.vertices), self.edges)
        self.adj = defaultdict(list)                                   # id -> [edge_id]
        for eid, (u, v) in enumerate(self.edges):
            if u == v:
                continue
            self.adj[u].append(eid)
            self.adj[v].append(eid)

    def degree(self, nid):
        return len(self.adj.get(nid, []))

    def edge_nodes(self, eid):
        return self.edges[eid]

    def coords(self, indices):
        return [self.vertices[i] for i in indices]

    def to_dict(self):
        return {
            "vertices": [list(p) for p in self.vertices],
            "edges": [list(e) for e in self.edges],
        }


class AdjacencyMatrix:
    """
    Square boolean incidence matrix; m[i, j] is the directed half-edge i->j.

    Symmetric right after build(). The face tracer owns it for one extraction
    run and only ever clears entries through consume().
    """

    def __init__(self, matrix):
        self._m = matrix

    @classmethod
    def build(cls, vertex_count, edges):
        check_edge_indices(vertex_count, edges)
        m = np.zeros((vertex_count, vertex_count), dtype=bool)
        for u, v in edges:
            if u == v:
                continue  # self-loop bounds nothing
            m[u, v] = True
            m[v, u] = True
        return cls(m)

    @property
    def size(self):
        return self._m.shape[0]

    def consume(self, i, j):
        self._m[i, j] = False

    def is_available(self, i, j):
        return bool(self._m[i, j])

    def neighbors_of(self, v, excluding=None):
        """Vertices w with v->w still available, ascending, w != excluding. O(V)."""
        if v < 0 or v >= self.size:
            return []
        return [int(w) for w in np.flatnonzero(self._m[v]) if w != excluding]

    def first_available(self):
        """Row-major first available half-edge (i, j), or None."""
        if self._m.size == 0:
            return None
        k = int(self._m.argmax())
        if not self._m.flat[k]:
            return None
        return divmod(k, self.size)

    def remaining(self):
        return int(self._m.sum())

    def is_symmetric(self):
        return bool((self._m == self._m.T).all())

    def __repr__(self):
        return f"AdjacencyMatrix(n={self.size}, available={self.remaining()})"
