import logging
import os
from typing import Iterable

import numpy as np

from algorithms.errors import ParseError
from algorithms.graph import Graph

logger = logging.getLogger(__name__)

# ids are stored as int64 and the vertex count is 1 + the largest id
MAX_VERTEX_ID = int(np.iinfo(np.int64).max) - 1


def parse_lines(lines: Iterable[str], source="<lines>") -> Graph:
    """
    Builds a graph from edge-list lines, one "u v" pair of 0-indexed vertex ids
    per line. Blank lines are skipped. The vertex count is 1 + the largest id.
    """
    edge_list = []
    max_idx = -1

    for lineno, line in enumerate(lines, start=1):
        parts = line.split()
        if not parts:
            continue
        if len(parts) != 2:
            raise ParseError(source, lineno, f"expected 2 numbers, got {len(parts)}")

        pair = []
        for token in parts:
            try:
                value = int(token)
            except ValueError:
                raise ParseError(source, lineno, f"not an integer: {token!r}") from None
            if value < 0:
                raise ParseError(source, lineno, f"negative vertex id: {value}")
            if value > MAX_VERTEX_ID:
                raise ParseError(source, lineno, f"vertex id out of range: {value}")
            pair.append(value)

        edge_list.append(tuple(pair))
        max_idx = max(max_idx, *pair)

    return Graph.build(max_idx + 1, edge_list)


def _decoded_lines(f, source):
    for lineno, raw in enumerate(f, start=1):
        try:
            yield raw.decode("utf-8")
        except UnicodeDecodeError:
            raise ParseError(source, lineno, "not valid UTF-8 text") from None


def parse(file_path) -> Graph:
    source = os.fspath(file_path)
    with open(file_path, "rb") as f:
        graph = parse_lines(_decoded_lines(f, source), source=source)
    logger.debug("Loaded %s: %d nodes, %d edges",
                 file_path, graph.vertex_count, graph.edge_count)
    return graph
