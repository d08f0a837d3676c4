"""Existence checks split into contiguous shards across a worker pool."""

import logging
from typing import Any, Callable, Dict, List, Sequence, Tuple

from ..config import DEFAULT_NUM_WORKERS
from ..errors import SearchError
from ..graph_model import GraphEdge, GraphStore
from .worker_pool import BoundedWorkerPool

logger = logging.getLogger(__name__)


def shard_bounds(size: int, num_shards: int) -> List[Tuple[int, int]]:
    """Half-open ``(start, end)`` ranges; the last shard absorbs the remainder."""
    if num_shards < 1:
        raise ValueError(f"num_shards must be >= 1, got {num_shards}")
    chunk_size = size // num_shards
    bounds: List[Tuple[int, int]] = []
    for index in range(num_shards):
        start = index * chunk_size
        end = size if index == num_shards - 1 else start + chunk_size
        bounds.append((start, end))
    return bounds


def scan_shard(items: Sequence[Any], start: int, end: int, predicate: Callable[[Any], bool]) -> bool:
    for position in range(start, end):
        if predicate(items[position]):
            return True
    return False


class PartitionedSearch:
    def __init__(self, store: GraphStore, num_workers: int = DEFAULT_NUM_WORKERS) -> None:
        self.store = store
        self.num_workers = num_workers

    def node_exists(self, node_id: str) -> bool:
        return self._search(self.store.nodes(), lambda candidate: candidate == node_id, "node")

    def edge_exists(self, source: str, target: str) -> bool:
        wanted = GraphEdge(source=source, target=target)
        return self._search(self.store.edges(), lambda candidate: candidate == wanted, "edge")

    def _search(self, items: Sequence[Any], predicate: Callable[[Any], bool], label: str) -> bool:
        if not items:
            return False

        failed_shards: List[Tuple[int, int]] = []
        with BoundedWorkerPool(self.num_workers, name=f"{label}-search") as pool:
            shard_of: Dict[Any, Tuple[int, int]] = {}
            for start, end in shard_bounds(len(items), self.num_workers):
                shard_of[pool.submit(scan_shard, items, start, end, predicate)] = (start, end)

            while pool.outstanding:
                completion = pool.await_any()
                if completion is None:
                    continue
                if not completion.ok:
                    start, end = shard_of[completion.future]
                    failed_shards.append((start, end))
                    logger.error(f"{label} shard [{start}, {end}) scan failed: {completion.error!r}")
                    continue
                if completion.value:
                    return True

        if failed_shards:
            ranges = ", ".join(f"[{start}, {end})" for start, end in sorted(failed_shards))
            raise SearchError(
                f"{len(failed_shards)} {label} shard(s) failed ({ranges}); result is incomplete."
            )
        return False
