"""Random graph file generator for benchmarking the search strategies."""

import logging
import random
from pathlib import Path
from typing import Set, Tuple

logger = logging.getLogger(__name__)

DEFAULT_NUM_NODES = 100_000
DEFAULT_NUM_EDGES = 200_000


def generate_graph_file(
    output_path: str | Path,
    num_nodes: int = DEFAULT_NUM_NODES,
    num_edges: int = DEFAULT_NUM_EDGES,
    seed: int | None = None,
) -> Path:
    """Write ``* N<i>`` node lines followed by unique ``- N<a> N<b>`` edge lines.

    Edges never loop back to their source and are normalized so that
    ``a < b``, so each unordered pair appears at most once.
    """
    if num_nodes < 0 or num_edges < 0:
        raise ValueError("num_nodes and num_edges must be non-negative")
    max_edges = num_nodes * (num_nodes - 1) // 2
    if num_edges > max_edges:
        raise ValueError(f"Cannot place {num_edges} unique edges among {num_nodes} nodes (max {max_edges})")

    rng = random.Random(seed)
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    seen: Set[Tuple[int, int]] = set()

    with path.open("w", encoding="utf-8") as handle:
        for index in range(num_nodes):
            handle.write(f"* N{index}\n")
        while len(seen) < num_edges:
            a = rng.randrange(num_nodes)
            b = rng.randrange(num_nodes)
            if a == b:
                continue
            pair = (a, b) if a < b else (b, a)
            if pair in seen:
                continue
            seen.add(pair)
            handle.write(f"- N{pair[0]} N{pair[1]}\n")

    logger.info(f"Generated graph file {path} with {num_nodes} nodes and {num_edges} edges")
    return path
