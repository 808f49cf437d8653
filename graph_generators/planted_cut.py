import numpy as np

from algorithms.graph import Graph


def generate_planted_cut(n: int, p_in: float, bridges: int,
                         rng: np.random.Generator) -> Graph:
    """
    Two G(n/2, p_in) halves joined by `bridges` random cross edges.

    The bridges form a cut, so the true minimum is at most `bridges`. With a
    dense enough p_in it is exactly `bridges`, which makes the family useful
    for checking how often contraction finds a known cut.
    """
    if n < 2:
        raise ValueError("n must be >= 2")

    half = n // 2
    side = np.zeros(n, dtype=bool)
    side[half:] = True

    rows, cols = np.triu_indices(n, k=1)
    same_side = side[rows] == side[cols]
    keep = same_side & (rng.random(rows.size) < p_in)
    inner = np.stack([rows[keep], cols[keep]], axis=1)

    left = rng.integers(0, half, size=bridges)
    right = rng.integers(half, n, size=bridges)
    cross = np.stack([left, right], axis=1)

    return Graph.build(n, np.concatenate([inner, cross]))
