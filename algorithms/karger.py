import concurrent.futures
import logging
import multiprocessing
from itertools import repeat
from typing import List, NamedTuple, Optional

import numpy as np

from algorithms.errors import InvalidConfiguration
from algorithms.graph import Graph
from algorithms.union_find import DisjointSet

logger = logging.getLogger(__name__)

# minimum number of edge indices drawn from the generator at once
DEFAULT_BATCH = 100
# chunks handed to each worker process
CHUNKS_PER_WORKER = 4


class TrialSummary(NamedTuple):
    cut_sizes: np.ndarray
    min_cut: int
    # mean number of sequential trials between two hits of min_cut
    avg_runs: float


def contract_trial(graph: Graph, rng: np.random.Generator,
                   batch_size: Optional[int] = None) -> int:
    """
    One run of Karger's contraction, returns the size of the cut it ends on.

    Edges are drawn uniformly from the full edge list and endpoints merged
    with union-find. A draw whose endpoints already share a group (an inert
    edge or a self-loop) is rejected and redrawn, which keeps every step
    uniform over the edges that still cross two groups.

    Contraction stops at two groups, or at the number of connected
    components if that is larger: a disconnected graph has no crossing
    edge left to draw once its components are merged, and its cut is 0.
    """
    n = graph.vertex_count
    if n < 2:
        return 0

    edges = graph.edges
    m = edges.shape[0]
    target = max(2, graph.component_count)

    uf = DisjointSet(n)
    batch = batch_size or max(DEFAULT_BATCH, (n - target) * 2)

    while uf.group_count > target:
        draws = rng.integers(0, m, size=batch)
        for u, v in edges[draws].tolist():
            if uf.union(u, v) and uf.group_count <= target:
                break

    roots = uf.roots()
    return int(np.count_nonzero(roots[edges[:, 0]] != roots[edges[:, 1]]))


def _run_chunk(graph: Graph, seeds: List[np.random.SeedSequence]) -> List[int]:
    return [contract_trial(graph, np.random.default_rng(s)) for s in seeds]


def default_workers() -> int:
    # leave one core for the OS
    return max(1, multiprocessing.cpu_count() - 1)


def _check_config(iterations, workers):
    if isinstance(iterations, bool) or not isinstance(iterations, (int, np.integer)):
        raise InvalidConfiguration(f"iterations must be an integer, got {iterations!r}")
    if iterations <= 0:
        raise InvalidConfiguration(f"iterations must be >= 1, got {iterations}")
    if workers is not None and workers <= 0:
        raise InvalidConfiguration(f"workers must be >= 1, got {workers}")


def run_trials(graph: Graph, iterations: int, seed=None,
               workers: Optional[int] = 1) -> np.ndarray:
    """
    Runs `iterations` independent contraction trials.

    Args:
        graph (Graph): graph to cut, never modified
        iterations (int): number of trials, >= 1
        seed: int, SeedSequence or None for fresh entropy
        workers (Optional[int]): worker processes, None picks one per spare core

    Returns:
        np.ndarray: cut size of every trial, in trial order. Trial i always
        draws from the i-th spawned seed, so a fixed seed gives the same
        array whatever the worker count, and a longer run extends a shorter one.
    """
    _check_config(iterations, workers)
    if workers is None:
        workers = default_workers()

    if isinstance(seed, np.random.SeedSequence):
        root = seed
    else:
        root = np.random.SeedSequence(seed)
    seeds = root.spawn(iterations)
    logger.debug("%d trials on %r, entropy=%s, workers=%d",
                 iterations, graph, root.entropy, workers)

    if workers == 1 or iterations == 1:
        return np.array(_run_chunk(graph, seeds), dtype=np.int64)

    n_chunks = min(iterations, workers * CHUNKS_PER_WORKER)
    chunks = [seeds[i::n_chunks] for i in range(n_chunks)]

    cuts = np.empty(iterations, dtype=np.int64)
    with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
        for i, chunk_cuts in enumerate(executor.map(_run_chunk, repeat(graph), chunks)):
            cuts[i::n_chunks] = chunk_cuts
    return cuts


def estimate_min_cut(graph: Graph, iterations: int, seed=None,
                     workers: Optional[int] = 1) -> int:
    """Smallest cut seen over `iterations` trials."""
    return int(run_trials(graph, iterations, seed=seed, workers=workers).min())


def summarize(cut_sizes) -> TrialSummary:
    cut_sizes = np.asarray(cut_sizes, dtype=np.int64)
    if cut_sizes.size == 0:
        raise InvalidConfiguration("no trials to summarize")

    min_cut = int(cut_sizes.min())
    hits = np.flatnonzero(cut_sizes == min_cut) + 1
    gaps = np.diff(hits, prepend=0)
    return TrialSummary(cut_sizes, min_cut, float(gaps.mean()))
