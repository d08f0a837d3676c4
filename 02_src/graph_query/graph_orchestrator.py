"""Runs the sequential and parallel strategies side by side and times them."""

import time
from dataclasses import dataclass
from typing import Any, Callable

from .config import SearchSettings
from .graph_model import GraphStore
from .search import ConcurrentPathSearch, PartitionedSearch, SequentialSearch


@dataclass(frozen=True)
class StrategyRun:
    strategy: str
    value: Any
    elapsed_ns: int
    timed_out: bool = False

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_ns / 1_000_000


@dataclass(frozen=True)
class QueryComparison:
    sequential: StrategyRun
    parallel: StrategyRun

    @property
    def agree(self) -> bool:
        return bool(self.sequential.value) == bool(self.parallel.value)


class QueryOrchestrator:
    """Owns strategy construction for queries against one sealed store."""

    def __init__(self, store: GraphStore, settings: SearchSettings | None = None) -> None:
        self.store = store
        self.settings = settings or SearchSettings()

    def sequential(self) -> SequentialSearch:
        return SequentialSearch(self.store, max_depth=self.settings.max_depth)

    def partitioned(self) -> PartitionedSearch:
        return PartitionedSearch(self.store, num_workers=self.settings.num_workers)

    def concurrent_path(self) -> ConcurrentPathSearch:
        return ConcurrentPathSearch(
            self.store,
            num_workers=self.settings.num_workers,
            poll_timeout=self.settings.poll_timeout,
            max_poll_timeouts=self.settings.max_poll_timeouts,
            max_depth=self.settings.max_depth,
        )

    def check_node(self, node_id: str) -> QueryComparison:
        return QueryComparison(
            sequential=self._timed("sequential", self.sequential().node_exists, node_id),
            parallel=self._timed("parallel", self.partitioned().node_exists, node_id),
        )

    def check_edge(self, source: str, target: str) -> QueryComparison:
        return QueryComparison(
            sequential=self._timed("sequential", self.sequential().edge_exists, source, target),
            parallel=self._timed("parallel", self.partitioned().edge_exists, source, target),
        )

    def check_path(self, start: str, end: str) -> QueryComparison:
        sequential = self._timed("sequential", self.sequential().find_path, start, end)
        started = time.perf_counter_ns()
        outcome = self.concurrent_path().search(start, end)
        parallel = StrategyRun(
            strategy="parallel",
            value=outcome.path,
            elapsed_ns=time.perf_counter_ns() - started,
            timed_out=outcome.timed_out,
        )
        return QueryComparison(sequential=sequential, parallel=parallel)

    @staticmethod
    def _timed(strategy: str, call: Callable[..., Any], *args: Any) -> StrategyRun:
        started = time.perf_counter_ns()
        value = call(*args)
        return StrategyRun(strategy=strategy, value=value, elapsed_ns=time.perf_counter_ns() - started)
