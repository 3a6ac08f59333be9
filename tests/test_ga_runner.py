"""End-to-end behaviour of the evolutionary loop."""

import logging
import random

import pytest

from colorga.graph_io import Graph
from colorga.fitness import count_conflicts
from colorga.ga_runner import GAConfig, run_ga
from colorga.population import Coloring
from colorga.solution import Solution


TRIANGLE_BOTH = Graph(adjacency=[[1, 2], [0, 2], [0, 1]])


@pytest.mark.parametrize("k_colors,pop_size", [(1, 1), (2, 5), (9, 30)])
def test_edgeless_graph_stops_on_first_generation(k_colors, pop_size):
    g = Graph(adjacency=[[] for _ in range(12)])
    res = run_ga(g, GAConfig(k_colors=k_colors, pop_size=pop_size, generations=1000), rng=random.Random(1))

    assert res.generations_run == 1
    assert res.stopped_early
    assert res.best_conflicts_history == [0]
    assert res.solution.score == 0
    assert len(res.solution.coloring) == 12


def test_triangle_with_two_colors_uses_full_budget():
    res = run_ga(TRIANGLE_BOTH, GAConfig(k_colors=2, pop_size=10, generations=60), rng=random.Random(2))

    assert res.generations_run == 60
    assert not res.stopped_early
    assert len(res.best_conflicts_history) == 60
    assert res.solution.score > 0


def test_triangle_with_three_colors_finds_proper_coloring():
    res = run_ga(TRIANGLE_BOTH, GAConfig(k_colors=3, pop_size=20, generations=500), rng=random.Random(3))

    assert res.solution.score == 0
    assert res.stopped_early
    assert res.generations_run < 500
    assert sorted(res.solution.coloring) == [0, 1, 2]


def test_result_is_valid_and_score_recomputed():
    rng = random.Random(4)
    adjacency = [[j for j in range(30) if j != i and (i * j) % 7 == 1] for i in range(30)]
    g = Graph(adjacency=adjacency)
    res = run_ga(g, GAConfig(k_colors=3, pop_size=8, generations=25), rng=rng)

    assert res.solution.coloring.is_valid(30, 3)
    assert res.solution.score == count_conflicts(g, res.solution.coloring)
    assert res.best_conflicts_history[-1] == res.solution.score


def test_same_seed_is_reproducible():
    cfg = GAConfig(k_colors=2, pop_size=6, generations=15, seed=11)
    a = run_ga(TRIANGLE_BOTH, cfg)
    b = run_ga(TRIANGLE_BOTH, cfg)
    assert a.solution == b.solution
    assert a.best_conflicts_history == b.best_conflicts_history


def test_zero_generations_returns_initial_best():
    res = run_ga(TRIANGLE_BOTH, GAConfig(k_colors=2, pop_size=3, generations=0), rng=random.Random(5))
    assert res.generations_run == 0
    assert res.best_conflicts_history == []
    assert res.solution.score == count_conflicts(TRIANGLE_BOTH, res.solution.coloring)


def test_progress_reported_every_log_every_generations(caplog):
    seen = []
    cfg = GAConfig(k_colors=2, pop_size=4, generations=25, log_every=10)
    with caplog.at_level(logging.INFO, logger="colorga.ga_runner"):
        run_ga(TRIANGLE_BOTH, cfg, rng=random.Random(6), on_progress=lambda it, s: seen.append((it, s)))

    assert [it for it, _ in seen] == [0, 10, 20]
    assert all(s > 0 for _, s in seen)
    assert "Iteration 0: Score" in caplog.text


def test_should_stop_cancels_between_generations():
    calls = []

    def stop():
        calls.append(1)
        return len(calls) > 3

    res = run_ga(TRIANGLE_BOTH, GAConfig(k_colors=2, pop_size=4, generations=100), rng=random.Random(7), should_stop=stop)
    assert res.generations_run == 3
    assert res.stopped_early


@pytest.mark.parametrize("cfg", [
    GAConfig(k_colors=0),
    GAConfig(pop_size=0),
    GAConfig(generations=-1),
])
def test_invalid_config(cfg):
    with pytest.raises(ValueError):
        run_ga(TRIANGLE_BOTH, cfg, rng=random.Random(0))


def test_solution_round_trip(tmp_path):
    path = str(tmp_path / "result.json")
    sol = Solution(coloring=Coloring([2, 0, 1, 1]), score=3)
    sol.save(path)

    assert Solution.load(path) == sol
    assert '"Coloring": [2, 0, 1, 1]' in (tmp_path / "result.json").read_text(encoding="utf-8")


def test_loaded_solution_carries_coloring_type(tmp_path):
    path = str(tmp_path / "result.json")
    Solution(coloring=Coloring([0, 2, 1]), score=0).save(path)

    loaded = Solution.load(path)
    assert isinstance(loaded.coloring, Coloring)
    assert loaded.coloring.validate(3, 3) == [0, 2, 1]
    with pytest.raises(ValueError):
        loaded.coloring.validate(3, 2)


def test_run_result_coloring_is_validated():
    res = run_ga(TRIANGLE_BOTH, GAConfig(k_colors=3, pop_size=5, generations=3), rng=random.Random(8))
    assert isinstance(res.solution.coloring, Coloring)
    assert res.solution.coloring.validate(3, 3) is res.solution.coloring
