from __future__ import annotations

import argparse
import csv
import logging
import os
import random
import sys
from typing import Dict, Any, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from colorga.graph_io import Graph, GraphLoadError, random_graph, read_col, save_graph_json, write_dot
from colorga.fitness import evaluate
from colorga.ga_runner import GAConfig, run_ga

logger = logging.getLogger("run_experiments")


def ensure_dirs(out_dir: str):
    os.makedirs(out_dir, exist_ok=True)


def save_csv(path: str, rows: List[Dict[str, Any]]):
    with open(path, "w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        w.writeheader()
        w.writerows(rows)


def plot_history(path: str, y: List[int], xlabel: str, ylabel: str, title: str):
    plt.figure()
    plt.plot(y)
    plt.xlabel(xlabel)
    plt.ylabel(ylabel)
    plt.title(title)
    plt.savefig(path, dpi=200)
    plt.close()


def load_or_generate(args: argparse.Namespace, rng: random.Random) -> Graph:
    if args.graph:
        return read_col(args.graph)
    return random_graph(args.random_nodes, args.edge_prob, rng)


def run_ga_block(graph: Graph, tag: str, cfg: GAConfig, rng: random.Random, out_dir: str):
    res = run_ga(graph, cfg, rng=rng)
    sol = res.solution
    ev = evaluate(graph, sol.coloring)

    out_json = os.path.join(out_dir, "result.json")
    sol.save(out_json)

    out_dot = os.path.join(out_dir, "solution-viz.dot")
    write_dot(graph.with_colors(sol.coloring), out_dot)

    rows = [{
        "method": "GA",
        "dataset": tag,
        "vertices": graph.n_vertices,
        "edges": len(graph.edges),
        "k_colors": cfg.k_colors,
        "pop_size": cfg.pop_size,
        "seed": cfg.seed,
        "generations_target": cfg.generations,
        "generations_run": res.generations_run,
        "stopped_early": res.stopped_early,
        "best_conflicts": sol.score,
        "best_colors_used": ev.n_colors_used,
    }]
    out_csv = os.path.join(out_dir, f"{tag}_ga_k{cfg.k_colors}_results.csv")
    save_csv(out_csv, rows)

    out_png = os.path.join(out_dir, f"{tag}_ga_k{cfg.k_colors}_conflicts.png")
    plot_history(
        out_png,
        res.best_conflicts_history,
        xlabel="Generation",
        ylabel="Best conflicts in generation",
        title=f"{tag} GA conflicts (k={cfg.k_colors}) | final={sol.score}, colors={ev.n_colors_used}"
    )

    print(f"[{tag}] GA: conflicts={sol.score} colors={ev.n_colors_used} gens={res.generations_run}")
    print(f"Saved: {out_json}")
    print(f"Saved: {out_dot}")
    print(f"Saved: {out_csv}")
    print(f"Saved: {out_png}")


def main():
    parser = argparse.ArgumentParser()
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--graph", help="Path to .col file")
    src.add_argument("--random_nodes", type=int, help="Generate a random graph with this many vertices")
    parser.add_argument("--edge_prob", type=float, default=None, help="Edge probability for --random_nodes (default 3/n)")
    parser.add_argument("--k_colors", type=int, default=7, help="Number of colors (k)")
    parser.add_argument("--generations", type=int, default=100_000, help="GA generations")
    parser.add_argument("--pop_size", type=int, default=200)
    parser.add_argument("--seed", type=int, default=None, help="RNG seed (default: nondeterministic)")
    parser.add_argument("--log_every", type=int, default=100)
    parser.add_argument("--out_dir", default="results")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if args.random_nodes is not None and args.edge_prob is None:
        args.edge_prob = 3.0 / max(args.random_nodes, 1)

    ensure_dirs(args.out_dir)
    rng = random.Random(args.seed)

    try:
        graph = load_or_generate(args, rng)
    except GraphLoadError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if args.graph:
        tag = os.path.splitext(os.path.basename(args.graph))[0]
    else:
        tag = f"random{args.random_nodes}"
        out_graph = os.path.join(args.out_dir, "graph.json")
        save_graph_json(graph, out_graph)
        print(f"Saved: {out_graph}")

    cfg = GAConfig(
        k_colors=args.k_colors,
        pop_size=args.pop_size,
        generations=args.generations,
        log_every=args.log_every,
        seed=args.seed,
    )
    try:
        run_ga_block(graph, tag, cfg, rng, args.out_dir)
    except (OSError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)


if __name__ == "__main__":
    main()
