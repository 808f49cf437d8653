import argparse
import logging
import os
import sys
from typing import NamedTuple

import numpy as np
from tqdm import tqdm

from algorithms.errors import ParseError
from algorithms.karger import run_trials, summarize, TrialSummary
from graph_loaders.edge_list import parse

logger = logging.getLogger(__name__)

HEADER = ("|            name |          (n, m) |       opt | avg. runs |\n"
          "|-----------------|-----------------|-----------|-----------|")


class FileResult(NamedTuple):
    name: str
    vertex_count: int
    edge_count: int
    summary: TrialSummary

    def row(self) -> str:
        return "|{:>16} | {:>15} |{:10} |{:10.2f} |".format(
            self.name,
            f"({self.vertex_count},{self.edge_count})",
            self.summary.min_cut,
            self.summary.avg_runs,
        )


def run_file(path, iterations: int, seed=None, workers: int = 1) -> FileResult:
    """Loads one edge-list file and runs `iterations` contraction trials on it."""
    graph = parse(path)
    logger.info("%s: %d vertices, %d edges, %d trials",
                path, graph.vertex_count, graph.edge_count, iterations)
    cuts = run_trials(graph, iterations, seed=seed, workers=workers)
    return FileResult(os.path.basename(path), graph.vertex_count,
                      graph.edge_count, summarize(cuts))


def split_paths(values):
    # --files accepts both "a b" and "a,b"
    return [p for value in values for p in value.split(",") if p]


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description="Estimate the minimum cut of edge-list graphs with Karger's algorithm")
    parser.add_argument("-f", "--files", nargs="+", action="extend", required=True,
                        help="Edge-list files, space or comma separated")
    parser.add_argument("-i", "--iters", type=int, required=True,
                        help="Contraction trials per file")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for reproducible runs")
    parser.add_argument("--workers", type=int, default=1,
                        help="Worker processes for the trials of one file")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.iters <= 0:
        parser.error(f"--iters must be >= 1, got {args.iters}")
    if args.workers <= 0:
        parser.error(f"--workers must be >= 1, got {args.workers}")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format="%(levelname)s %(name)s: %(message)s")

    files = split_paths(args.files)
    file_seeds = np.random.SeedSequence(args.seed).spawn(len(files))
    failed = 0

    print(HEADER)
    for path, file_seed in zip(tqdm(files, desc="Files", disable=len(files) < 2), file_seeds):
        try:
            result = run_file(path, args.iters, seed=file_seed, workers=args.workers)
        except (ParseError, OSError, MemoryError) as exc:
            logger.warning("Skipping %s: %s", path, exc)
            failed += 1
            continue
        tqdm.write(result.row())

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
