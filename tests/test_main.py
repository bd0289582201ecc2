"""Tests for the command-line driver and the benchmark runner."""

from graph_generators.erdos_renyi import generate_er
from benchmarking import BenchmarkRunner
from main import main

BRIDGE = """a1 a2 a3
a2 a1 a3
a3 a1 a2 b1
b1 a3 b2 b3
b2 b1 b3
b3 b1 b2
"""


def test_solve(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text(BRIDGE, encoding="utf-8")

    assert main(["--seed", "1", "solve", str(path), "--show-graph"]) == 0

    out = capsys.readouterr().out
    assert "Vertices (6): a1, a2, a3, b1, b2, b3" in out
    assert "MST weight (Prim): 5" in out
    assert "Minimum cut (Karger): " in out
    assert "after 65 trials" in out


def test_solve_prim_only(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("A B\nC D\n", encoding="utf-8")

    assert main(["solve", str(path), "--algorithm", "prim"]) == 0

    out = capsys.readouterr().out
    assert "MST weight (Prim): 1" in out
    assert "Karger" not in out


def test_solve_missing_file(tmp_path, capsys):
    assert main(["solve", str(tmp_path / "nope.txt")]) == 1
    assert "Error" in capsys.readouterr().err


def test_benchmark_runner():
    runner = BenchmarkRunner({'ER': generate_er}, seed=42)
    df = runner.run(models=['ER', 'missing'], n_values=[8], trials=2,
                    model_params={'ER': {'p': 0.5, 'weights': (1, 5)}})

    assert list(df['algorithm']) == ['prim', 'karger']
    assert (df['n'] == 8).all()
    prim = df[df['algorithm'] == 'prim'].iloc[0]
    assert prim['match_rate'] == 1.0
    assert (df['mean_time_s'] >= 0).all()
