import numpy as np

from algorithms.graph import Graph


def generate_ba(n: int, m: int, rng: np.random.Generator) -> Graph:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The first m nodes start out as a clique.
        rng (np.random.Generator): source of randomness.

    Returns:
        Graph: simple connected graph (for m >= 1).
    """
    if n < m:
        raise ValueError("n must be >= m")

    rows, cols = np.triu_indices(m, k=1)
    edges = list(zip(rows.tolist(), cols.tolist()))

    degrees = np.zeros(n, dtype=int)
    degrees[:m] = m - 1

    for i in range(m, n):
        current_degrees = degrees[:i]
        total_degree = current_degrees.sum()

        if total_degree == 0:
            # no edges yet, attach uniformly
            targets = rng.choice(i, size=m, replace=False)
        else:
            targets = rng.choice(i, size=m, replace=False,
                                 p=current_degrees / total_degree)

        edges.extend((int(t), i) for t in targets)
        degrees[i] = m
        degrees[targets] += 1

    return Graph.build(n, edges)
