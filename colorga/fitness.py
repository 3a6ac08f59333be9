from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence
from .graph_io import Graph


@dataclass(frozen=True)
class FitnessResult:
    conflicts: int
    n_colors_used: int


def count_conflicts(graph: Graph, chrom: Sequence[int]) -> int:
    """
    Count i -> j adjacency entries whose endpoints share a color, halved.

    The halving assumes every edge is listed in both directions. DIMACS
    files loaded with read_col list each edge once, so on those graphs
    this reports half the number of monochromatic edges (rounded down).
    Lower is better; 0 means a proper coloring.
    """
    matches = 0
    for i in range(graph.n_vertices):
        ci = chrom[i]
        for j in graph.adjacency[i]:
            if ci == chrom[j]:
                matches += 1
    return matches // 2


def evaluate(graph: Graph, chrom: Sequence[int]) -> FitnessResult:
    """
    conflicts: the search score, see count_conflicts
    n_colors_used: number of distinct colors used in the chromosome
    """
    if len(chrom) != graph.n_vertices:
        raise ValueError(
            f"Chromosome length {len(chrom)} does not match number of vertices {graph.n_vertices}"
        )

    return FitnessResult(conflicts=count_conflicts(graph, chrom), n_colors_used=len(set(chrom)))
