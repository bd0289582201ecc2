from typing import Optional, Tuple

import numpy as np


def generate_er(n: int, p: float, weights: Optional[Tuple[int, int]] = None,
                seed: Optional[int] = None) -> np.ndarray:
    """
    Generates an Erdős-Rényi (G(n, p)) random graph.

    Args:
        n (int): Number of nodes.
        p (float): Probability of each possible edge.
        weights (Optional[Tuple[int, int]]): Draw integer weights in
            [low, high). Unit weights when None.
        seed (Optional[int]): Seed for the random generator.

    Returns:
        np.ndarray: An (n, n) symmetric integer adjacency matrix.
    """
    if not 0.0 <= p <= 1.0:
        raise ValueError("p must be in [0, 1]")

    rng = np.random.default_rng(seed)
    matrix = np.zeros((n, n), dtype=int)

    # indices for the upper triangle (k=1 excludes the diagonal)
    rows, cols = np.triu_indices(n, k=1)
    edges = rng.random(rows.size) < p

    if weights is None:
        values = np.ones(edges.sum(), dtype=int)
    else:
        values = rng.integers(weights[0], weights[1], size=edges.sum())

    matrix[rows[edges], cols[edges]] = values
    matrix[cols[edges], rows[edges]] = values

    return matrix
