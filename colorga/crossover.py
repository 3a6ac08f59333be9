from __future__ import annotations
import random
from typing import Sequence

from .population import Coloring


def block_crossover(parents: Sequence[Sequence[int]], rng: random.Random) -> Coloring:
    """
    Block-wise crossover over any number of parents:
    - cut the genome into contiguous blocks of ceil(n / n_parents) genes
    - for each block pick a parent uniformly at random and copy its block
    The same parent may supply every block.
    """
    if not parents:
        raise ValueError("Need at least one parent")

    n = len(parents[0])
    if any(len(p) != n for p in parents):
        raise ValueError("Parents must have same length")

    child = Coloring()
    if n == 0:
        return child

    block = -(-n // len(parents))
    for start in range(0, n, block):
        src = parents[rng.randrange(len(parents))]
        child.extend(src[start:start + block])
    return child
