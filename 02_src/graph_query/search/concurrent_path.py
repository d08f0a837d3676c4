"""Parallel depth-first reachability search with dynamic task spawning."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from ..config import DEFAULT_MAX_POLL_TIMEOUTS, DEFAULT_NUM_WORKERS, DEFAULT_POLL_TIMEOUT
from ..errors import PoolClosedError
from ..graph_model import GraphStore
from .shared_state import ClaimSet, FoundFlag
from .worker_pool import BoundedWorkerPool, ShutdownMode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchTask:
    node: str
    path: Tuple[str, ...]


@dataclass
class PathSearchResult:
    path: List[str] = field(default_factory=list)
    timed_out: bool = False
    tasks_spawned: int = 0

    @property
    def found(self) -> bool:
        return bool(self.path)


class ConcurrentPathSearch:
    """Spawns one task per newly claimed neighbor and drains completions.

    All tasks share one ``ClaimSet`` and one ``FoundFlag``. The path returned
    is some valid directed path, not necessarily the one a sequential
    traversal would report. Without ``max_depth`` every node is expanded at
    most once; with it, a node is expanded again when a task reaches it at a
    smaller depth.
    """

    def __init__(
        self,
        store: GraphStore,
        num_workers: int = DEFAULT_NUM_WORKERS,
        poll_timeout: float = DEFAULT_POLL_TIMEOUT,
        max_poll_timeouts: int = DEFAULT_MAX_POLL_TIMEOUTS,
        max_depth: int | None = None,
        expansion_hook: Callable[[str], None] | None = None,
    ) -> None:
        self.store = store
        self.num_workers = num_workers
        self.poll_timeout = poll_timeout
        self.max_poll_timeouts = max_poll_timeouts
        self.max_depth = max_depth
        self.expansion_hook = expansion_hook

    def find_path(self, start: str, end: str) -> List[str]:
        return self.search(start, end).path

    def search(self, start: str, end: str) -> PathSearchResult:
        if not self.store.has_node(start) or not self.store.has_node(end):
            return PathSearchResult()

        visited = ClaimSet([start])
        found = FoundFlag()
        pool = BoundedWorkerPool(self.num_workers, name="path-search")
        result = PathSearchResult()
        empty_polls = 0

        try:
            pool.submit(self._run_task, SearchTask(node=start, path=(start,)), end, visited, found, pool)
            while pool.outstanding:
                completion = pool.await_any(timeout=self.poll_timeout)
                if completion is None:
                    empty_polls += 1
                    logger.warning(
                        f"No path-search task completed within {self.poll_timeout}s "
                        f"({empty_polls}/{self.max_poll_timeouts}), outstanding={pool.outstanding}"
                    )
                    if empty_polls >= self.max_poll_timeouts:
                        result.timed_out = True
                        break
                    continue
                empty_polls = 0
                if not completion.ok:
                    logger.error(f"Path-search task failed: {completion.error!r}")
                    continue
                if completion.value:
                    result.path = list(completion.value)
                    found.raise_flag()
                    break
        finally:
            pool.shutdown(ShutdownMode.IMMEDIATE)

        result.tasks_spawned = pool.submitted
        if result.timed_out:
            logger.warning(f"Path search {start} -> {end} exceeded its time budget")
        return result

    def _run_task(
        self,
        task: SearchTask,
        target: str,
        visited: ClaimSet,
        found: FoundFlag,
        pool: BoundedWorkerPool,
    ) -> Tuple[str, ...] | None:
        if found.is_set() or pool.cancelled:
            return None
        if task.node == target:
            return task.path
        depth = len(task.path) - 1
        if self.max_depth is not None:
            if depth >= self.max_depth:
                return None
            # Superseded by a task that reached this node by a shorter route.
            if (visited.depth_of(task.node) or 0) < depth:
                return None

        if self.expansion_hook is not None:
            self.expansion_hook(task.node)

        for neighbor in self.store.neighbors(task.node):
            if found.is_set() or pool.cancelled:
                return None
            if self.max_depth is None:
                claimed = visited.claim(neighbor, depth + 1)
            else:
                claimed = visited.claim_shallower(neighbor, depth + 1)
            if not claimed:
                continue
            child = SearchTask(node=neighbor, path=task.path + (neighbor,))
            try:
                pool.submit(self._run_task, child, target, visited, found, pool)
            except PoolClosedError:
                # Driver stopped collecting; nothing left to spawn into.
                return None
        return None
