# test_graph.py
import os
import sys
import unittest

import numpy as np
import scipy.sparse as sp

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from swgraphs.core._Edge import WeightedEdge
from swgraphs.core._helpers import ConstructionError, VertexIndexError
from swgraphs.core._WeightMatrix import WeightMatrix
from swgraphs.core.graph import WDiGraph, WeightedDiGraph, WeightedGraph, WGraph


class TestDirectedBasics(unittest.TestCase):
    def setUp(self):
        self.g = WeightedDiGraph([(1, 2, 5), (2, 3, 1)])

    def test_counts_and_vertices(self):
        self.assertTrue(self.g.is_directed())
        self.assertTrue(self.g.directed)
        self.assertEqual(self.g.nv(), 3)
        self.assertEqual(self.g.ne(), 2)
        self.assertEqual(self.g.number_of_vertices(), 3)
        self.assertEqual(self.g.number_of_edges(), 2)
        self.assertEqual(list(self.g.vertices()), [1, 2, 3])

    def test_edges_in_storage_order(self):
        self.assertEqual(
            list(self.g.edges()), [WeightedEdge(1, 2, 5.0), WeightedEdge(2, 3, 1.0)]
        )
        self.assertEqual(self.g.edge_list(), [(1, 2, 5.0), (2, 3, 1.0)])

    def test_weights_are_directional(self):
        self.assertEqual(self.g.get_weight(1, 2), 5.0)
        self.assertEqual(self.g.get_weight(2, 1), 0.0)
        self.assertEqual(self.g.weight_of(2, 3), 1.0)
        self.assertTrue(self.g.has_edge(1, 2))
        self.assertFalse(self.g.has_edge(2, 1))
        self.assertTrue(self.g.has_edge((2, 3)))

    def test_add_edge_new_and_update(self):
        self.assertTrue(self.g.add_edge(3, 1, 2.5))
        self.assertEqual(self.g.ne(), 3)
        self.assertFalse(self.g.add_edge(3, 1, 4.0))
        self.assertEqual(self.g.ne(), 3)
        self.assertEqual(self.g.get_weight(3, 1), 4.0)

    def test_add_edge_forms(self):
        self.assertTrue(self.g.add_edge(WeightedEdge(1, 3, 2)))
        self.assertTrue(self.g.add_edge((3, 2)))
        self.assertEqual(self.g.get_weight(1, 3), 2.0)
        self.assertEqual(self.g.get_weight(3, 2), 1.0)
        self.assertTrue(self.g.add_edge(2, 1))
        self.assertEqual(self.g.get_weight(2, 1), 1.0)

    def test_zero_weight_is_noop(self):
        self.assertFalse(self.g.add_edge(3, 1, 0))
        self.assertFalse(self.g.has_edge(3, 1))
        self.assertEqual(self.g.ne(), 2)

    def test_remove_edge(self):
        self.assertTrue(self.g.remove_edge(1, 2))
        self.assertFalse(self.g.has_edge(1, 2))
        self.assertFalse(self.g.remove_edge(1, 2))
        self.assertEqual(self.g.ne(), 1)
        self.assertTrue(self.g.remove_edge(WeightedEdge(2, 3, 99)))
        self.assertEqual(self.g.ne(), 0)

    def test_vertex_errors(self):
        with self.assertRaises(VertexIndexError):
            self.g.add_edge(1, 4)
        with self.assertRaises(VertexIndexError):
            self.g.has_edge(0, 1)
        with self.assertRaises(VertexIndexError):
            self.g.get_weight(1, 10)
        with self.assertRaises(IndexError):
            self.g.remove_edge(-1, 2)
        with self.assertRaises(TypeError):
            self.g.add_edge("a", 2)
        self.assertEqual(self.g.ne(), 2)
        self.assertTrue(self.g.has_vertex(3))
        self.assertFalse(self.g.has_vertex(4))
        self.assertFalse(self.g.has_vertex(0))
        self.assertFalse(self.g.has_vertex("1"))

    def test_non_numeric_weight(self):
        with self.assertRaises(TypeError):
            self.g.add_edge(1, 3, "heavy")
        self.assertFalse(self.g.has_edge(1, 3))

    def test_add_vertices(self):
        self.assertTrue(self.g.add_vertex())
        self.assertEqual(self.g.nv(), 4)
        self.assertEqual(self.g.add_vertices(3), 3)
        self.assertEqual(self.g.nv(), 7)
        self.assertEqual(self.g.ne(), 2)
        self.assertTrue(self.g.add_edge(7, 1, 1.5))
        self.assertEqual(self.g.get_weight(1, 2), 5.0)
        with self.assertRaises(ValueError):
            self.g.add_vertices(-1)

    def test_remove_vertex_unsupported(self):
        with self.assertRaises(NotImplementedError):
            self.g.remove_vertex(1)

    def test_self_loops(self):
        self.assertFalse(self.g.has_self_loops())
        self.g.add_edge(2, 2, 3.0)
        self.assertTrue(self.g.has_self_loops())
        self.assertEqual(self.g.num_self_loops(), 1)
        self.assertEqual(self.g.ne(), 3)

    def test_repr(self):
        self.assertEqual(
            repr(self.g), "{3, 2} directed simple int64 graph with float64 weights"
        )

    def test_weights_matrix(self):
        W = self.g.weights()
        self.assertTrue(sp.issparse(W))
        np.testing.assert_array_equal(W.toarray(), [[0, 5, 0], [0, 0, 1], [0, 0, 0]])


class TestUndirectedBasics(unittest.TestCase):
    def setUp(self):
        self.g = WeightedGraph([(3, 1, 2), (1, 2, 5)])

    def test_edges_once_smaller_endpoint_first(self):
        self.assertFalse(self.g.is_directed())
        self.assertEqual(self.g.ne(), 2)
        self.assertEqual(self.g.edge_list(), [(1, 2, 5.0), (1, 3, 2.0)])

    def test_symmetric_queries(self):
        self.assertEqual(self.g.get_weight(2, 1), 5.0)
        self.assertEqual(self.g.get_weight(1, 2), 5.0)
        self.assertTrue(self.g.has_edge(3, 1))
        self.assertTrue(self.g.matrix.is_symmetric())

    def test_update_either_direction(self):
        self.assertFalse(self.g.add_edge(2, 1, 6.0))
        self.assertEqual(self.g.get_weight(1, 2), 6.0)
        self.assertEqual(self.g.ne(), 2)
        self.assertTrue(self.g.matrix.is_symmetric())

    def test_remove_both_directions(self):
        self.assertTrue(self.g.remove_edge(2, 1))
        self.assertFalse(self.g.has_edge(1, 2))
        self.assertFalse(self.g.remove_edge(1, 2))
        self.assertEqual(self.g.ne(), 1)
        self.assertEqual(self.g.matrix.nnz, 2)

    def test_self_loop_single_entry(self):
        self.assertTrue(self.g.add_edge(2, 2, 4.0))
        self.assertEqual(self.g.ne(), 3)
        self.assertEqual(self.g.matrix.nnz, 5)
        self.assertEqual(self.g.num_self_loops(), 1)
        self.assertIn((2, 2, 4.0), self.g.edge_list())
        self.assertTrue(self.g.remove_edge(2, 2))
        self.assertEqual(self.g.ne(), 2)

    def test_self_loop_in_edge_list_not_doubled(self):
        g = WeightedGraph([(2, 2, 4)])
        self.assertEqual(g.get_weight(2, 2), 4.0)
        self.assertEqual(g.ne(), 1)

    def test_opposite_pairs_are_summed(self):
        g = WeightedGraph([(1, 2, 5), (2, 1, 3)])
        self.assertEqual(g.ne(), 1)
        self.assertEqual(g.get_weight(1, 2), 8.0)

    def test_repr(self):
        self.assertEqual(
            repr(self.g), "{3, 2} undirected simple int64 graph with float64 weights"
        )

    def test_aliases(self):
        self.assertIs(WGraph, WeightedGraph)
        self.assertIs(WDiGraph, WeightedDiGraph)


class TestConstruction(unittest.TestCase):
    def test_empty(self):
        for cls in (WeightedGraph, WeightedDiGraph):
            g = cls()
            self.assertEqual(g.nv(), 0)
            self.assertEqual(g.ne(), 0)
            self.assertEqual(list(g.edges()), [])
            self.assertEqual(g, cls(0))
            self.assertEqual(g, cls([]))

    def test_isolated_vertices(self):
        g = WeightedDiGraph(4)
        self.assertEqual(g.nv(), 4)
        self.assertEqual(g.ne(), 0)
        self.assertEqual(g.outdegree(), [0, 0, 0, 0])

    def test_bad_inputs(self):
        with self.assertRaises(ConstructionError):
            WeightedDiGraph(-1)
        with self.assertRaises(ConstructionError):
            WeightedDiGraph([(0, 1)])
        with self.assertRaises(ConstructionError):
            WeightedGraph([(1, 2, 3, 4)])
        with self.assertRaises(ConstructionError):
            WeightedDiGraph.from_edges([1, 2], [2])
        with self.assertRaises(ConstructionError):
            WeightedDiGraph.from_edges([1], [5], n=3)
        with self.assertRaises(ConstructionError):
            WeightedDiGraph(sp.csc_matrix((2, 3)))

    def test_from_edges(self):
        g = WeightedDiGraph.from_edges([1, 1, 3], [2, 3, 1], [1.5, 2.0, 3.0], n=5)
        self.assertEqual(g.nv(), 5)
        self.assertEqual(g.edge_list(), [(1, 2, 1.5), (1, 3, 2.0), (3, 1, 3.0)])
        g = WeightedGraph.from_edges(np.array([1, 2]), np.array([2, 3]))
        self.assertEqual(g.edge_list(), [(1, 2, 1.0), (2, 3, 1.0)])

    def test_duplicate_edges_combine(self):
        edges = [(1, 2, 5), (1, 2, 3)]
        self.assertEqual(WeightedDiGraph(edges).get_weight(1, 2), 8.0)
        last = WeightedDiGraph.from_edge_list(edges, combine="last")
        self.assertEqual(last.get_weight(1, 2), 3.0)
        self.assertEqual(last.ne(), 1)
        first = WeightedDiGraph(edges, combine="first")
        self.assertEqual(first.get_weight(1, 2), 5.0)

    def test_from_edge_list_explicit_n(self):
        g = WeightedGraph.from_edge_list([(1, 2)], n=4)
        self.assertEqual(g.nv(), 4)
        self.assertEqual(list(g.vertices()), [1, 2, 3, 4])

    def test_from_dense_matrix(self):
        a = np.array([[0, 2.0], [0, 0]])
        g = WeightedDiGraph(a)
        self.assertEqual(g.get_weight(1, 2), 2.0)
        self.assertEqual(g.get_weight(2, 1), 0.0)
        # adopt as stored: column = source
        g = WeightedDiGraph(a, permute=False)
        self.assertEqual(g.get_weight(2, 1), 2.0)
        self.assertEqual(g.get_weight(1, 2), 0.0)

    def test_from_sparse_and_store(self):
        a = sp.csr_matrix(np.array([[0, 1.0, 0], [0, 0, 2.0], [3.0, 0, 0]]))
        g = WeightedDiGraph.from_matrix(a)
        self.assertEqual(g.edge_list(), [(1, 2, 1.0), (2, 3, 2.0), (3, 1, 3.0)])
        np.testing.assert_array_equal(g.weights().toarray(), a.toarray())
        m = WeightMatrix.from_triples([1], [0], [2.0], n=2)
        h = WeightedDiGraph(m, permute=False)
        self.assertEqual(h.get_weight(1, 2), 2.0)
        self.assertIsNot(h.matrix, m)

    def test_undirected_from_asymmetric_matrix_warns(self):
        a = np.array([[0, 2.0], [0, 0]])
        with self.assertWarns(UserWarning):
            g = WeightedGraph(a)
        self.assertEqual(g.get_weight(1, 2), 2.0)
        self.assertEqual(g.get_weight(2, 1), 2.0)
        self.assertEqual(g.ne(), 1)

    def test_copy_constructor(self):
        d = WeightedDiGraph([(1, 2, 3), (2, 1, 4)])
        self.assertEqual(WeightedDiGraph(d), d)
        u = WeightedGraph(d)
        self.assertEqual(u.ne(), 1)
        self.assertEqual(u.get_weight(1, 2), 7.0)

    def test_dtypes(self):
        g = WeightedDiGraph(3, dtype=np.int32, index_dtype=np.int32)
        self.assertEqual(g.weighttype, np.int32)
        self.assertEqual(g.eltype, np.int32)
        g.add_edge(1, 2, 5)
        self.assertEqual(g.get_weight(1, 2), 5)
        self.assertIsInstance(g.get_weight(1, 2), int)
        self.assertEqual(repr(g), "{3, 1} directed simple int32 graph with int32 weights")
        h = WeightedDiGraph([(1, 2, 1.5)])
        self.assertEqual(h.weighttype, np.float64)
        self.assertEqual(h.eltype, np.int64)


class TestWholeGraph(unittest.TestCase):
    def setUp(self):
        self.g = WeightedDiGraph([(1, 2, 1), (1, 3, 1), (2, 3, 1)])

    def test_copy_is_independent(self):
        h = self.g.copy()
        self.assertEqual(h, self.g)
        h.add_edge(3, 1)
        self.assertNotEqual(h, self.g)
        self.assertFalse(self.g.has_edge(3, 1))

    def test_equality_needs_same_variant(self):
        u = WeightedGraph(3)
        d = WeightedDiGraph(3)
        self.assertNotEqual(u, d)
        self.assertEqual(WeightedGraph(3), u)

    def test_issubset(self):
        h = self.g.copy()
        h.add_vertex()
        h.add_edge(4, 1, 2.0)
        self.assertTrue(self.g.issubset(h))
        self.assertFalse(h.issubset(self.g))
        h.add_edge(1, 2, 9.0)
        self.assertFalse(self.g.issubset(h))
        self.assertFalse(self.g.issubset(WeightedGraph(self.g)))

    def test_induced_subgraph(self):
        sub, vmap = self.g.induced_subgraph([3, 1])
        self.assertEqual(vmap, [3, 1])
        self.assertEqual(sub.nv(), 2)
        self.assertEqual(sub.ne(), 1)
        self.assertEqual(sub.get_weight(2, 1), 1.0)
        self.assertIsInstance(sub, WeightedDiGraph)
        with self.assertRaises(ValueError):
            self.g.induced_subgraph([1, 1])
        with self.assertRaises(VertexIndexError):
            self.g.induced_subgraph([1, 4])

    def test_edge_iterator_reflects_mutation(self):
        it = self.g.edges()
        self.assertEqual(len(it), 3)
        self.g.add_edge(3, 1)
        self.assertEqual(len(list(it)), 4)
        self.assertEqual(len(list(it)), 4)

    def test_edge_iterator_contains(self):
        es = self.g.edges()
        self.assertIn((1, 2), es)
        self.assertNotIn((2, 1), es)
        self.assertIn((1, 2, 1.0), es)
        self.assertNotIn((1, 2, 2.0), es)
        self.assertIn(WeightedEdge(2, 3, 1), es)
        self.assertNotIn((1, 9), es)
        self.assertEqual(es, self.g.copy().edges())

    def test_undirected_contains_both_orientations(self):
        u = WeightedGraph([(1, 2, 0.5)])
        self.assertIn((2, 1), u.edges())
        self.assertIn((2, 1, 0.5), u.edges())


if __name__ == "__main__":
    unittest.main()
