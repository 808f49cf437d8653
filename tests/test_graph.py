"""Tests for the immutable graph model."""

import networkx as nx
import numpy as np
import pytest

from algorithms.errors import InvalidEdge
from algorithms.graph import Graph


class TestBuild:
    def test_basic(self):
        g = Graph.build(3, [(0, 1), (1, 2), (2, 0)])
        assert g.vertex_count == 3
        assert g.edge_count == 3
        assert g.edges.tolist() == [[0, 1], [1, 2], [2, 0]]

    def test_multigraph_and_self_loops_kept(self):
        g = Graph.build(2, [(0, 1), (0, 1), (1, 1)])
        assert g.edge_count == 3

    def test_empty(self):
        g = Graph.build(0, [])
        assert g.vertex_count == 0
        assert g.edges.shape == (0, 2)
        assert g.component_count == 0

    def test_isolated_vertices(self):
        g = Graph.build(5, [])
        assert g.edges.shape == (0, 2)
        assert g.component_count == 5

    @pytest.mark.parametrize("edges", [[(0, 3)], [(-1, 0)], [(0, 1), (2, 5)]])
    def test_out_of_range(self, edges):
        with pytest.raises(InvalidEdge):
            Graph.build(3, edges)

    def test_bad_shape(self):
        with pytest.raises(InvalidEdge):
            Graph.build(3, [(0, 1, 2)])

    def test_negative_vertex_count(self):
        with pytest.raises(InvalidEdge):
            Graph.build(-1, [])

    def test_immutable(self):
        g = Graph.build(2, [(0, 1)])
        with pytest.raises(ValueError):
            g.edges[0, 0] = 1

    def test_input_not_aliased(self):
        raw = np.array([[0, 1]])
        g = Graph.build(2, raw)
        raw[0, 0] = 1
        assert g.edges.tolist() == [[0, 1]]
        assert raw.flags.writeable

    def test_constructor_validates(self):
        raw = np.array([[0, 1]])
        g = Graph(2, raw)
        assert raw.flags.writeable
        assert not g.edges.flags.writeable
        with pytest.raises(InvalidEdge):
            Graph(1, raw)


class TestComponents:
    def test_connected(self):
        assert Graph.build(3, [(0, 1), (1, 2)]).component_count == 1

    def test_two_components(self):
        assert Graph.build(4, [(0, 1), (2, 3)]).component_count == 2


class TestNetworkx:
    def test_from_networkx_relabels(self):
        G = nx.Graph()
        G.add_edges_from([("b", "c"), ("a", "b")])
        g = Graph.from_networkx(G)
        assert g.vertex_count == 3
        assert sorted(map(sorted, g.edges.tolist())) == [[0, 1], [1, 2]]

    def test_from_multigraph_keeps_parallel_edges(self):
        G = nx.MultiGraph([(0, 1), (0, 1), (1, 2)])
        assert Graph.from_networkx(G).edge_count == 3

    def test_to_networkx_weights(self):
        g = Graph.build(3, [(0, 1), (1, 0), (1, 2), (2, 2)])
        G = g.to_networkx()
        assert G.number_of_nodes() == 3
        assert G[0][1]['weight'] == 2
        assert G[1][2]['weight'] == 1
        assert not G.has_edge(2, 2)
