import argparse
import logging
import sys

import pandas as pd

from benchmarking import BenchmarkRunner
from graph_generators.barabasi_albert import generate_ba
from graph_generators.erdos_renyi import generate_er
from graphs.adjacency import read_adjacency_file
from graphs.exceptions import GraphError

RNG_SEED = 42
DEFAULT_GRAPH_FILE = "graph.txt"

# Karger runs ceil(n^2 ln n) trials, keep the benchmark sizes small
N_VALUES = [10, 15, 20, 25]
R_TRIALS = 10

MODEL_PARAMS = {
    'ER': {'p': 0.3, 'weights': (1, 10)},
    'BA': {'m': 3, 'weights': (1, 10)},
}


def solve(args) -> int:
    try:
        graph = read_adjacency_file(args.graph, allow_parallel_edges=args.parallel)
    except OSError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.show_graph:
        print("Graph:")
        print(graph)
        print()

    if not graph.is_connected():
        logging.warning("graph has %d components, spanning tree covers the first one only",
                        graph.count_components())

    try:
        if args.algorithm in ("prim", "both"):
            print(f"MST weight (Prim): {graph.minimum_spanning_tree_weight()}")
        if args.algorithm in ("karger", "both"):
            cut = graph.minimum_cut(seed=args.seed, workers=args.workers, progress=args.progress)
            print(f"Minimum cut (Karger): {cut.value} after {cut.trials} trials")
            print(f"  side A: {', '.join(map(str, cut.partition[0]))}")
            print(f"  side B: {', '.join(map(str, cut.partition[1]))}")
    except GraphError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


def benchmark(args) -> int:
    runner = BenchmarkRunner({'ER': generate_er, 'BA': generate_ba},
                             seed=args.seed, karger_workers=args.workers)
    results_df = runner.run(
        models=list(MODEL_PARAMS),
        n_values=N_VALUES,
        trials=args.trials,
        model_params=MODEL_PARAMS,
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(results_df)

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Prim MST and Karger minimum cut")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    parser.add_argument("--seed", type=int, default=RNG_SEED,
                        help="Seed for the random contractions")
    parser.add_argument("--workers", type=int, default=1,
                        help="Processes used for the Karger trials")
    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", help="Run the algorithms on an adjacency file")
    p_solve.add_argument("graph", nargs="?", default=DEFAULT_GRAPH_FILE,
                         help="Adjacency file: a vertex followed by its neighbors, one per line")
    p_solve.add_argument("--algorithm", choices=["prim", "karger", "both"], default="both")
    p_solve.add_argument("--parallel", action="store_true",
                         help="Keep parallel edges instead of merging repeated pairs")
    p_solve.add_argument("--show-graph", action="store_true",
                         help="Print the vertex and edge lists")
    p_solve.add_argument("--progress", action="store_true",
                         help="Show a progress bar for the contraction trials")
    p_solve.set_defaults(func=solve)

    p_bench = sub.add_parser("benchmark", help="Compare against networkx on random graphs")
    p_bench.add_argument("--trials", type=int, default=R_TRIALS,
                         help="Graphs per (model, n) pair")
    p_bench.add_argument("--output", default="benchmark_results.csv")
    p_bench.set_defaults(func=benchmark)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
