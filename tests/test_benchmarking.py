"""Tests for the benchmark harness."""

import networkx as nx
import pandas as pd

from algorithms.graph import Graph
from benchmarking import BenchmarkRunner, GRAPH_GENERATORS, MODEL_PARAMS, exact_min_cut


class TestExactMinCut:
    def test_cycle(self):
        assert exact_min_cut(Graph.from_networkx(nx.cycle_graph(6))) == 2

    def test_parallel_edges_weigh_in(self):
        g = Graph.build(3, [(0, 1), (0, 1), (1, 2), (1, 2), (1, 2)])
        assert exact_min_cut(g) == 2

    def test_disconnected_and_trivial(self):
        assert exact_min_cut(Graph.build(4, [(0, 1), (2, 3)])) == 0
        assert exact_min_cut(Graph.build(1, [])) == 0


class TestBenchmarkRunner:
    def test_run_produces_dataframe(self):
        runner = BenchmarkRunner(GRAPH_GENERATORS, seed=42)
        df = runner.run(models=['ER', 'PLANTED'], n_values=[8, 12], samples=2,
                        iterations=20, model_params=MODEL_PARAMS)
        assert isinstance(df, pd.DataFrame)
        assert len(df) == 2 * 2 * 2
        assert (df['min_found_cut'] >= df['true_min_cut']).all()
        assert df['success_rate'].between(0, 1).all()

    def test_reproducible(self):
        kwargs = dict(models=['BA'], n_values=[10], samples=2,
                      iterations=10, model_params=MODEL_PARAMS)
        a = BenchmarkRunner(GRAPH_GENERATORS, seed=7).run(**kwargs)
        b = BenchmarkRunner(GRAPH_GENERATORS, seed=7).run(**kwargs)
        cols = ['m', 'true_min_cut', 'min_found_cut', 'mean_cut', 'avg_runs']
        pd.testing.assert_frame_equal(a[cols], b[cols])

    def test_unknown_model_skipped(self):
        runner = BenchmarkRunner(GRAPH_GENERATORS, seed=1)
        df = runner.run(models=['NOPE'], n_values=[5], samples=1,
                        iterations=5, model_params={})
        assert df.empty
