from __future__ import annotations
import random
from typing import List, Set

from .population import Coloring, Population


def select_parents(pop: Population, rng: random.Random, n_parents: int = 2, max_attempts: int = 10) -> List[Coloring]:
    """
    Uniform random selection (fitness-blind):
    - for each parent slot draw an index up to max_attempts times,
      looking for one not yet picked in this call
    - if every draw collides, keep the last one (duplicates are allowed)
    """
    if not pop:
        raise ValueError("pop must not be empty")

    n = len(pop)
    used: Set[int] = set()
    parents: List[Coloring] = []

    for _ in range(n_parents):
        idx = 0
        for _ in range(max_attempts):
            idx = rng.randrange(n)
            if idx not in used:
                used.add(idx)
                break
        parents.append(pop[idx])

    return parents
