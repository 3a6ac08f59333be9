from __future__ import annotations

import json
import logging
import random
from dataclasses import dataclass, field, replace
from typing import List, Sequence, Tuple

logger = logging.getLogger(__name__)


class GraphLoadError(ValueError):
    """Raised when a graph file cannot be read or parsed."""


@dataclass(frozen=True)
class Graph:
    """
    Graph stored in 0-based indexing.
    adjacency: adjacency[u] lists the neighbours recorded for u
    colors: one color per vertex (only written back after solving)
    """
    adjacency: List[List[int]]
    colors: List[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.colors:
            object.__setattr__(self, "colors", [0] * len(self.adjacency))
        if len(self.colors) != len(self.adjacency):
            raise ValueError(
                f"Colors length {len(self.colors)} does not match number of vertices {len(self.adjacency)}"
            )
        n = len(self.adjacency)
        for u, nbs in enumerate(self.adjacency):
            for v in nbs:
                if not 0 <= v < n:
                    raise ValueError(f"Neighbour {v} of vertex {u} is outside [0, {n})")

    @property
    def n_vertices(self) -> int:
        return len(self.adjacency)

    @property
    def edges(self) -> List[Tuple[int, int]]:
        return [(u, v) for u, nbs in enumerate(self.adjacency) for v in nbs]

    def with_colors(self, coloring: Sequence[int]) -> Graph:
        return replace(self, colors=list(coloring))


def read_col(path: str) -> Graph:
    """
    Read a DIMACS .col graph coloring instance.

    Typical format:
      c comment lines
      p edge <n_vertices> <n_edges>
      e u v     (1-based vertex ids)

    Each edge is stored once, as u-1 -> v-1, exactly as listed in the file.
    """
    try:
        with open(path, "r", encoding="utf-8", errors="ignore") as f:
            lines = f.readlines()
    except OSError as exc:
        raise GraphLoadError(f"Could not read graph file {path}: {exc}") from exc

    adjacency: List[List[int]] | None = None

    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("c"):
            continue

        parts = line.split()
        try:
            if parts[0] == "p":
                # p edge n m
                n_vertices = int(parts[2])
                if n_vertices < 0:
                    raise ValueError(f"negative vertex count {n_vertices}")
                adjacency = [[] for _ in range(n_vertices)]
            elif parts[0] == "e":
                if adjacency is None:
                    raise ValueError("edge declared before the 'p' line")
                u = int(parts[1]) - 1
                v = int(parts[2]) - 1
                if not (0 <= u < len(adjacency) and 0 <= v < len(adjacency)):
                    raise ValueError(f"vertex out of range in edge {parts[1]} {parts[2]}")
                adjacency[u].append(v)
        except (ValueError, IndexError) as exc:
            raise GraphLoadError(f"{path}:{lineno}: malformed line {line!r}: {exc}") from exc

    if adjacency is None:
        raise GraphLoadError(f"Could not parse 'p edge n m' line in file: {path}")

    graph = Graph(adjacency=adjacency)
    logger.debug("Loaded %s: %d vertices, %d edges", path, graph.n_vertices, len(graph.edges))
    return graph


def random_graph(n_vertices: int, edge_prob: float, rng: random.Random) -> Graph:
    """Erdos-Renyi style graph; each pair i < j is stored as i -> j."""
    adjacency: List[List[int]] = [[] for _ in range(n_vertices)]
    for i in range(n_vertices):
        for j in range(i + 1, n_vertices):
            if rng.random() < edge_prob:
                adjacency[i].append(j)
    return Graph(adjacency=adjacency)


def save_graph_json(graph: Graph, path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump({"AdjecencyList": graph.adjacency, "Colors": graph.colors}, f)


def load_graph_json(path: str) -> Graph:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        adjacency = [[int(v) for v in (nbs or [])] for nbs in data["AdjecencyList"]]
        colors = [int(c) for c in data["Colors"]]
        return Graph(adjacency=adjacency, colors=colors)
    except OSError as exc:
        raise GraphLoadError(f"Could not read graph file {path}: {exc}") from exc
    except (ValueError, KeyError, TypeError) as exc:
        # json.JSONDecodeError is a ValueError
        raise GraphLoadError(f"Malformed graph document {path}: {exc}") from exc


def write_dot(graph: Graph, path: str) -> None:
    """
    Graphviz output: one edge statement per stored adjacency entry, and one
    filled node per vertex using color + 1 as an index into accent8.
    """
    with open(path, "w", encoding="utf-8") as f:
        f.write("graph {\n\tnode [colorscheme=accent8]\n")
        for u, v in graph.edges:
            f.write(f"\t{u} -- {v}\n")
        for i, color in enumerate(graph.colors):
            f.write(f"\t{i} [style=filled, color={color + 1}]\n")
        f.write("}\n")
