import concurrent.futures
import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from tqdm import tqdm

from algorithms.union_find import DisjointSet

logger = logging.getLogger(__name__)


class CutResult(NamedTuple):
    value: int
    partition: Tuple[tuple, tuple]
    trials: int


def trial_count(n: int) -> int:
    """ceil(n^2 ln n) contraction trials give failure probability <= 1/n."""
    if n < 2:
        return 0
    return int(math.ceil(n * n * math.log(n)))


def _contraction_trial(graph, seed) -> Tuple[int, Tuple[tuple, tuple]]:
    """
    One random-contraction run on a private clone of `graph`.

    Returns the number of edges left between the last two super-vertices and
    the original vertex values on each side.
    """
    rng = np.random.default_rng(seed)
    g = graph.clone()

    groups = DisjointSet(max(1, g.count_vertices()))
    # origin[i] is an original vertex index absorbed by the clone's vertex i
    origin = list(range(g.count_vertices()))

    while g.count_vertices() > 2:
        if not g.edges:
            # disconnected: the remaining super-vertices share no edge
            break
        k = int(rng.integers(len(g.edges)))
        edge = g.edges[k]
        keep, drop = edge.initial, edge.terminal
        groups.union(origin[keep], origin[drop])
        g.contract(k)
        del origin[drop]

    value = g.count_edges() if g.count_vertices() <= 2 else 0

    root = groups.find(origin[0])
    left = tuple(v.value for i, v in enumerate(graph.vertices) if groups.find(i) == root)
    right = tuple(v.value for i, v in enumerate(graph.vertices) if groups.find(i) != root)
    return value, (left, right)


def _run_trials(graph, seeds: Sequence) -> List[Tuple[int, Tuple[tuple, tuple]]]:
    return [_contraction_trial(graph, s) for s in seeds]


def minimum_cut(graph, seed: Optional[int] = None, workers: int = 1,
                progress: bool = False) -> CutResult:
    """
    Karger's global minimum cut, measured in edges crossing the cut.

    Runs trial_count(n) independent contraction trials and keeps the smallest
    candidate; on ties the earliest trial wins. Every trial draws from its own
    generator spawned from `seed`, so serial and parallel runs (`workers` > 1)
    return the same result.
    """
    n = graph.count_vertices()
    total = trial_count(n)
    if total == 0:
        return CutResult(0, (tuple(graph.values()), ()), 0)

    seeds = np.random.SeedSequence(seed).spawn(total)
    logger.debug("running %d contraction trials on %d vertices", total, n)

    best = None
    if workers > 1:
        chunk = max(1, total // (workers * 4))
        chunks = [seeds[i:i + chunk] for i in range(0, total, chunk)]
        with concurrent.futures.ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_run_trials, graph, c) for c in chunks]
            with tqdm(total=total, desc="Karger trials", disable=not progress) as pbar:
                for future in futures:
                    for value, partition in future.result():
                        if best is None or value < best[0]:
                            best = (value, partition)
                        pbar.update(1)
    else:
        for s in tqdm(seeds, desc="Karger trials", disable=not progress):
            value, partition = _contraction_trial(graph, s)
            if best is None or value < best[0]:
                best = (value, partition)

    logger.debug("minimum cut %d after %d trials", best[0], total)
    return CutResult(best[0], best[1], total)


def minimum_cut_value(graph, seed: Optional[int] = None, workers: int = 1) -> int:
    return minimum_cut(graph, seed=seed, workers=workers).value
