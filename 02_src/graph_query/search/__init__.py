"""Sequential and parallel search strategies over a GraphStore."""

from .concurrent_path import ConcurrentPathSearch, PathSearchResult, SearchTask
from .partitioned import PartitionedSearch, shard_bounds
from .sequential import SequentialSearch
from .shared_state import ClaimSet, FoundFlag
from .worker_pool import BoundedWorkerPool, Completion, ShutdownMode

__all__ = [
    "SequentialSearch",
    "PartitionedSearch",
    "ConcurrentPathSearch",
    "PathSearchResult",
    "SearchTask",
    "BoundedWorkerPool",
    "Completion",
    "ShutdownMode",
    "ClaimSet",
    "FoundFlag",
    "shard_bounds",
]
