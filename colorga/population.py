from __future__ import annotations

import random
from typing import List


class Coloring(list):
    """
    chrom[i] = color assigned to vertex i, an integer in [0, k_colors).

    A plain list underneath, so slicing, JSON encoding and in-place
    mutation behave as usual.
    """

    def is_valid(self, n_vertices: int, k_colors: int) -> bool:
        return len(self) == n_vertices and all(0 <= c < k_colors for c in self)

    def validate(self, n_vertices: int, k_colors: int) -> Coloring:
        if len(self) != n_vertices:
            raise ValueError(
                f"Chromosome length {len(self)} does not match number of vertices {n_vertices}"
            )
        for i, c in enumerate(self):
            if not 0 <= c < k_colors:
                raise ValueError(f"Color {c} of vertex {i} is outside [0, {k_colors})")
        return self


Population = List[Coloring]


def random_population(n_vertices: int, pop_size: int, k_colors: int, rng: random.Random) -> Population:
    if k_colors <= 0:
        raise ValueError("k_colors must be > 0")
    return [Coloring(rng.randrange(k_colors) for _ in range(n_vertices)) for _ in range(pop_size)]
