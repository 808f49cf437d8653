import numpy as np

from algorithms.graph import Graph


def generate_er(n: int, p: float, rng: np.random.Generator) -> Graph:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    Returns:
        Graph: simple graph, each of the n(n-1)/2 pairs present with probability p.
    """
    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)

    keep = rng.random(rows.size) < p
    return Graph.build(n, np.stack([rows[keep], cols[keep]], axis=1))
