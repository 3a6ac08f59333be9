from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional

from .graph_io import Graph
from .fitness import count_conflicts
from .population import Coloring, Population, random_population
from .selection import select_parents
from .crossover import block_crossover
from .mutation import mutate_per_gene
from .solution import Solution

logger = logging.getLogger(__name__)


@dataclass
class GAConfig:
    # Problem setup
    k_colors: int = 7

    # GA parameters
    pop_size: int = 200
    generations: int = 100_000

    # Reporting / reproducibility
    log_every: int = 100
    seed: Optional[int] = None


@dataclass(frozen=True)
class ScoredChromosome:
    chrom: Coloring
    score: int


@dataclass
class GARunResult:
    solution: Solution
    best_conflicts_history: List[int]
    stopped_early: bool
    generations_run: int


def _make_offspring(graph: Graph, pop: Population, cfg: GAConfig, rng: random.Random) -> ScoredChromosome:
    parents = select_parents(pop, rng)
    child = block_crossover(parents, rng)
    child = mutate_per_gene(child, cfg.k_colors, rng)
    return ScoredChromosome(child, count_conflicts(graph, child))


def run_ga(
    graph: Graph,
    cfg: GAConfig,
    rng: Optional[random.Random] = None,
    on_progress: Optional[Callable[[int, int], None]] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> GARunResult:
    """
    Generational (mu, lambda) search with lambda = 2 * mu.

    Each generation breeds 2 * pop_size children and keeps the best pop_size
    of them. Parents never survive, so the best coloring seen so far can be
    lost between generations. Stops at the first generation whose best child
    has zero conflicts.
    """
    if rng is None:
        rng = random.Random(cfg.seed)

    if cfg.k_colors <= 0:
        raise ValueError("k_colors must be > 0")
    if cfg.pop_size < 1:
        raise ValueError("pop_size must be >= 1")
    if cfg.generations < 0:
        raise ValueError("generations must be >= 0")

    pop = random_population(graph.n_vertices, cfg.pop_size, cfg.k_colors, rng)
    n_children = 2 * cfg.pop_size

    best_conf_hist: List[int] = []
    stopped_early = False
    generations_run = 0

    for gen in range(cfg.generations):
        if should_stop is not None and should_stop():
            logger.info("Stop requested before iteration %d", gen)
            stopped_early = True
            break

        generations_run = gen + 1

        children = [_make_offspring(graph, pop, cfg, rng) for _ in range(n_children)]
        children.sort(key=lambda sc: sc.score)

        pop = [sc.chrom for sc in children[:cfg.pop_size]]
        best_score = children[0].score
        best_conf_hist.append(best_score)

        if cfg.log_every > 0 and gen % cfg.log_every == 0:
            logger.info("Iteration %d: Score %d", gen, best_score)
            if on_progress is not None:
                on_progress(gen, best_score)

        if best_score == 0:
            stopped_early = True
            break

    best = pop[0].validate(graph.n_vertices, cfg.k_colors)
    return GARunResult(
        solution=Solution(coloring=best, score=count_conflicts(graph, best)),
        best_conflicts_history=best_conf_hist,
        stopped_early=stopped_early,
        generations_run=generations_run,
    )
