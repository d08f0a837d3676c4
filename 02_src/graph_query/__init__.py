"""Core package for comparing sequential and parallel graph queries."""

from .config import SearchSettings
from .graph_model import GraphEdge, GraphStore, LoadReport
from .graph_orchestrator import QueryComparison, QueryOrchestrator, StrategyRun
from .pipeline import PipelinePhase, PipelineRunner
from .search import (
    BoundedWorkerPool,
    ConcurrentPathSearch,
    PartitionedSearch,
    PathSearchResult,
    SequentialSearch,
    ShutdownMode,
)

__all__ = [
    "GraphEdge",
    "GraphStore",
    "LoadReport",
    "SearchSettings",
    "QueryOrchestrator",
    "QueryComparison",
    "StrategyRun",
    "PipelinePhase",
    "PipelineRunner",
    "SequentialSearch",
    "PartitionedSearch",
    "ConcurrentPathSearch",
    "PathSearchResult",
    "BoundedWorkerPool",
    "ShutdownMode",
]
