from typing import Optional, Tuple

import numpy as np


def generate_ba(n: int, m: int, weights: Optional[Tuple[int, int]] = None,
                seed: Optional[int] = None) -> np.ndarray:
    """
    Generates a Barabási-Albert (BA) random graph using preferential attachment.

    Args:
        n (int): Total number of nodes.
        m (int): Number of edges to attach from a new node to existing nodes.
                 The first m nodes form a clique.
        weights (Optional[Tuple[int, int]]): Draw integer weights in
            [low, high). Unit weights when None.
        seed (Optional[int]): Seed for the random generator.

    Returns:
        np.ndarray: An (n, n) symmetric integer adjacency matrix.
    """
    if m < 1:
        raise ValueError("m must be >= 1")
    if n < m:
        raise ValueError("n must be >= m")

    rng = np.random.default_rng(seed)
    adjacency = np.zeros((n, n), dtype=bool)

    rows, cols = np.triu_indices(m, k=1)
    adjacency[rows, cols] = True
    adjacency[cols, rows] = True

    degrees = adjacency.sum(axis=1)

    for i in range(m, n):
        current = degrees[:i]
        total = current.sum()

        if total == 0:
            # no degree yet (m == 1), attach uniformly
            targets = rng.choice(i, size=m, replace=False)
        else:
            targets = rng.choice(i, size=m, replace=False, p=current / total)

        adjacency[i, targets] = True
        adjacency[targets, i] = True

        degrees[i] = m
        degrees[targets] += 1

    matrix = adjacency.astype(int)
    if weights is not None:
        rows, cols = np.nonzero(np.triu(adjacency, k=1))
        values = rng.integers(weights[0], weights[1], size=rows.size)
        matrix[rows, cols] = values
        matrix[cols, rows] = values

    return matrix
