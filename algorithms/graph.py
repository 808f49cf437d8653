from functools import cached_property

import networkx as nx
import numpy as np

from algorithms.errors import InvalidEdge
from algorithms.union_find import DisjointSet


class Graph:
    """
    Immutable undirected multigraph stored as an (m, 2) edge array.

    Parallel edges are kept as separate rows. Self-loops are allowed in the
    array but can never cross a cut.
    """

    def __init__(self, vertex_count: int, edge_list):
        """
        Args:
            vertex_count (int): number of vertices, ids are 0..vertex_count-1
            edge_list: iterable of (u, v) pairs or an (m, 2) array

        Raises:
            InvalidEdge: if an endpoint is outside [0, vertex_count)
        """
        if vertex_count < 0:
            raise InvalidEdge(f"vertex_count must be >= 0, got {vertex_count}")

        # always a private copy, the caller's array stays writeable
        edges = np.array(edge_list, dtype=np.int64)
        if edges.size == 0:
            edges = np.empty((0, 2), dtype=np.int64)
        elif edges.ndim != 2 or edges.shape[1] != 2:
            raise InvalidEdge(f"expected (u, v) pairs, got shape {edges.shape}")

        bad = (edges < 0) | (edges >= vertex_count)
        if bad.any():
            row = int(np.flatnonzero(bad.any(axis=1))[0])
            u, v = edges[row]
            raise InvalidEdge(
                f"edge #{row} ({u}, {v}) has an endpoint outside [0, {vertex_count})")

        self._vertex_count = int(vertex_count)
        self._edges = edges
        self._edges.flags.writeable = False

    @classmethod
    def build(cls, vertex_count: int, edge_list) -> "Graph":
        return cls(vertex_count, edge_list)

    @classmethod
    def from_networkx(cls, G) -> "Graph":
        """Relabel nodes to 0..n-1 in sorted order and keep every (multi)edge."""
        H = nx.convert_node_labels_to_integers(G, ordering="sorted")
        return cls.build(H.number_of_nodes(), [(u, v) for u, v in H.edges()])

    def to_networkx(self) -> nx.Graph:
        """Simple graph with edge multiplicity stored as 'weight'; self-loops dropped."""
        G = nx.Graph()
        G.add_nodes_from(range(self._vertex_count))
        for u, v in self._edges.tolist():
            if u == v:
                continue
            if G.has_edge(u, v):
                G[u][v]['weight'] += 1
            else:
                G.add_edge(u, v, weight=1)
        return G

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edges.shape[0]

    @property
    def edges(self) -> np.ndarray:
        return self._edges

    @cached_property
    def component_count(self) -> int:
        # isolated vertices count as components of their own
        uf = DisjointSet(self._vertex_count)
        for u, v in self._edges.tolist():
            uf.union(u, v)
        return uf.group_count

    def __repr__(self):
        return f"Graph(n={self._vertex_count}, m={self.edge_count})"
