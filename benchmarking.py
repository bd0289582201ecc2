import logging
import time
from typing import Any, Callable, Dict, List, Optional

import networkx as nx
import numpy as np
import pandas as pd
from tqdm import tqdm

from algorithms.karger import minimum_cut_value
from algorithms.prim import minimum_spanning_tree_weight
from graphs.adjacency import from_adjacency_matrix, to_networkx

logger = logging.getLogger(__name__)


def _reference_mst(G: nx.Graph) -> float:
    return nx.minimum_spanning_tree(G, weight='weight').size(weight='weight')


def _reference_cut(G: nx.Graph) -> float:
    if G.number_of_nodes() < 2:
        return 0
    value, _ = nx.stoer_wagner(G, weight='multiplicity')
    return value


class BenchmarkRunner:
    """
    Times Prim and Karger on random graphs and checks them against networkx.
    """

    def __init__(self,
                 generators: Dict[str, Callable[..., np.ndarray]],
                 seed: Optional[int] = None,
                 karger_workers: int = 1):
        """
        Args:
            generators (Dict[str, Callable]):
                Dict of {'model_name': generator_function}
                Each function must accept n, seed and **kwargs and return an
                (n, n) adjacency matrix.

            seed (Optional[int]):
                Base seed for reproducibility. If None, randomness is uncontrolled.

            karger_workers (int):
                Process count handed to the minimum cut trials.
        """
        self.generators = generators
        self.base_seed = seed
        self.karger_workers = karger_workers

        self.algorithms: Dict[str, Callable] = {
            'prim': lambda g, seed: minimum_spanning_tree_weight(g),
            'karger': lambda g, seed: minimum_cut_value(g, seed=seed, workers=self.karger_workers),
        }
        self.references: Dict[str, Callable[[nx.Graph], float]] = {
            'prim': _reference_mst,
            'karger': _reference_cut,
        }

    def _trial_seed(self, model_name: str, n: int, i: int) -> Optional[int]:
        if self.base_seed is None:
            return None
        return self.base_seed + sum(map(ord, model_name)) * 100003 + n * 1009 + i

    def _build(self, gen_func: Callable, n: int, params: Dict[str, Any], seed: Optional[int]):
        matrix = gen_func(n=n, seed=seed, **params)

        # random models do not guarantee a connected graph, keep the largest component
        G = nx.from_numpy_array(matrix)
        largest = max(nx.connected_components(G), key=len)
        H = nx.convert_node_labels_to_integers(G.subgraph(largest), ordering="sorted")
        return from_adjacency_matrix(nx.to_numpy_array(H, weight='weight', dtype=int))

    def run(self,
            models: List[str],
            n_values: List[int],
            trials: int,
            model_params: Dict[str, Dict[str, Any]]) -> pd.DataFrame:
        """
        Runs the full benchmark.

        Args:
            models (List[str]): List of model names (e.g., ['ER', 'BA']).
            n_values (List[int]): List of graph sizes (n).
            trials (int): Number of graphs for each (model, n) pair.
            model_params (Dict): Parameters for each model generator.
                                 e.g., {'ER': {'p': 0.3}, 'BA': {'m': 3}}

        Returns:
            pd.DataFrame: One row per (model, n, algorithm).
        """
        all_results = []

        for model_name in models:
            if model_name not in self.generators:
                logger.warning("generator %r not found, skipping", model_name)
                continue
            gen_func = self.generators[model_name]
            params = model_params.get(model_name, {})

            for n in n_values:
                trial_results = {name: {'times': [], 'hits': [], 'values': []}
                                 for name in self.algorithms}

                for i in tqdm(range(trials), desc=f"{model_name} n={n}"):
                    seed = self._trial_seed(model_name, n, i)
                    graph = self._build(gen_func, n, params, seed)
                    G = to_networkx(graph)

                    for algo_name, algo_func in self.algorithms.items():
                        expected = self.references[algo_name](G)

                        start_time = time.perf_counter()
                        value = algo_func(graph, seed)
                        end_time = time.perf_counter()

                        data = trial_results[algo_name]
                        data['times'].append(end_time - start_time)
                        data['values'].append(value)
                        data['hits'].append(abs(value - expected) < 1e-9)

                for algo_name, data in trial_results.items():
                    all_results.append({
                        'model': model_name,
                        'n': n,
                        'algorithm': algo_name,
                        'trials': trials,
                        'mean_time_s': np.mean(data['times']),
                        'std_time_s': np.std(data['times']),
                        'mean_value': np.mean(data['values']),
                        'match_rate': np.mean(data['hits']),
                    })

        logger.info("benchmark complete: %d rows", len(all_results))
        return pd.DataFrame(all_results)
