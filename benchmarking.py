import argparse
import logging
import os
import time
from typing import Any, Callable, Dict, List, Optional

import networkx as nx
import numpy as np
import pandas as pd
from tqdm import tqdm

from algorithms.graph import Graph
from algorithms.karger import run_trials, summarize
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from graph_generators.planted_cut import generate_planted_cut

logger = logging.getLogger(__name__)

RNG_SEED = 42
OUTPUT_DIR = "benchmark_results"
CSV_FILENAME = "raw_results.csv"

N_VALUES = [10, 20, 40, 60]
SAMPLES_PER_SIZE = 5
ITERATIONS_PER_GRAPH = 100

GRAPH_GENERATORS = {
    'ER': generate_er,
    'BA': generate_ba,
    'PLANTED': generate_planted_cut,
}

MODEL_PARAMS = {
    'ER': {'p': 0.3},
    'BA': {'m': 3},
    'PLANTED': {'p_in': 0.6, 'bridges': 2},
}


def exact_min_cut(graph: Graph) -> int:
    """
    Reference value from networkx's Stoer-Wagner. Only used to grade the
    estimator; disconnected graphs (and graphs under two vertices) have cut 0.
    """
    if graph.vertex_count < 2 or graph.component_count > 1:
        return 0
    cut_value, _ = nx.stoer_wagner(graph.to_networkx(), weight='weight')
    return int(cut_value)


class BenchmarkRunner:
    """
    Runs the contraction estimator over generated graph families and grades
    it against the exact min cut.
    """

    def __init__(self,
                 generators: Dict[str, Callable[..., Graph]],
                 seed: Optional[int] = None):
        """
        Args:
            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, rng and **kwargs and return a Graph.

            seed (Optional[int]):
                Base seed for graph generation and trials.
                If None, every run draws fresh entropy.
        """
        self.generators = generators
        self.base_seed = seed

    def run(self,
            models: List[str],
            n_values: List[int],
            samples: int,
            iterations: int,
            model_params: Dict[str, Dict[str, Any]],
            workers: int = 1) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            samples (int): Number of graphs generated per (model, n) pair.
            iterations (int): Contraction trials per graph.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.1}, 'BA': {'m': 3}}
            workers (int): Worker processes for the trials of one graph.

        Returns:
            pd.DataFrame: One row per generated graph.
        """
        seeds = np.random.SeedSequence(self.base_seed)
        rows = []

        tasks = [(model_name, n, i)
                 for model_name in models
                 for n in n_values
                 for i in range(samples)]

        for model_name, n, i in tqdm(tasks, desc="Benchmarking"):
            if model_name not in self.generators:
                logger.warning("Generator '%s' not found. Skipping.", model_name)
                continue
            gen_seed, trial_seed = seeds.spawn(2)

            graph = self.generators[model_name](
                n=n, rng=np.random.default_rng(gen_seed), **model_params.get(model_name, {}))
            true_val = exact_min_cut(graph)

            start_time = time.perf_counter()
            cuts = run_trials(graph, iterations, seed=trial_seed, workers=workers)
            elapsed = time.perf_counter() - start_time

            summary = summarize(cuts)
            if summary.min_cut < true_val:
                # contraction can only overestimate
                logger.error("%s n=%d sample=%d: found %d below exact %d",
                             model_name, n, i, summary.min_cut, true_val)

            rows.append({
                'model': model_name,
                'n': graph.vertex_count,
                'm': graph.edge_count,
                'sample': i,
                'true_min_cut': true_val,
                'min_found_cut': summary.min_cut,
                'mean_cut': float(np.mean(cuts)),
                'success_rate': float(np.mean(cuts == true_val)),
                'avg_runs': summary.avg_runs,
                'time_s': elapsed,
            })

        return pd.DataFrame(rows)


def main():
    parser = argparse.ArgumentParser(description="Karger min cut benchmark")
    parser.add_argument("--iters", type=int, default=ITERATIONS_PER_GRAPH,
                        help="Contraction trials per graph")
    parser.add_argument("--samples", type=int, default=SAMPLES_PER_SIZE,
                        help="Graphs per (model, n) pair")
    parser.add_argument("--n-values", type=int, nargs="+", default=N_VALUES)
    parser.add_argument("--models", nargs="+", default=list(GRAPH_GENERATORS),
                        choices=list(GRAPH_GENERATORS))
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--seed", type=int, default=RNG_SEED)
    parser.add_argument("--output-dir", default=OUTPUT_DIR)
    args = parser.parse_args()

    if args.iters <= 0 or args.samples <= 0 or args.workers <= 0:
        parser.error("--iters, --samples and --workers must be positive")

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    runner = BenchmarkRunner(GRAPH_GENERATORS, seed=args.seed)
    results_df = runner.run(
        models=args.models,
        n_values=args.n_values,
        samples=args.samples,
        iterations=args.iters,
        model_params=MODEL_PARAMS,
        workers=args.workers,
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df.groupby(['model', 'n'])[
        ['true_min_cut', 'min_found_cut', 'success_rate', 'avg_runs', 'time_s']].mean())

    os.makedirs(args.output_dir, exist_ok=True)
    csv_path = os.path.join(args.output_dir, CSV_FILENAME)
    results_df.to_csv(csv_path, index=False)
    print(f"\nRaw data saved to {csv_path}")


if __name__ == "__main__":
    main()
