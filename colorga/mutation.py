from __future__ import annotations
import random
from typing import Optional

from .population import Coloring


def mutate_per_gene(chrom: Coloring, k_colors: int, rng: random.Random, p: Optional[float] = None) -> Coloring:
    """
    Each gene mutates independently with probability p (default 1/len(chrom),
    i.e. one mutation per call on average). Mutates in place.
    """
    if k_colors <= 0:
        raise ValueError("k_colors must be > 0")

    if not chrom:
        return chrom

    if p is None:
        p = 1.0 / len(chrom)

    for i in range(len(chrom)):
        if rng.random() < p:
            chrom[i] = rng.randrange(k_colors)
    return chrom
