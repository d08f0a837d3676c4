"""In-memory directed graph store used by every search strategy."""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from .errors import GraphSealedError


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}"


@dataclass
class LoadReport:
    node_count: int = 0
    edge_count: int = 0
    malformed_lines: List[str] = field(default_factory=list)
    dropped_edges: List[GraphEdge] = field(default_factory=list)
    read_error: str | None = None
    phase_timings_ms: Dict[str, float] = field(default_factory=dict)

    @property
    def elapsed_ms(self) -> float:
        return sum(self.phase_timings_ms.values())


class GraphStore:
    """Owns the node set and the ordered edge list.

    Mutation is only allowed until ``seal()`` is called; after that the store
    is safe for unsynchronized concurrent reads.
    """

    def __init__(self) -> None:
        self._nodes: Dict[str, None] = {}
        self._edges: List[GraphEdge] = []
        self._adjacency: Dict[str, List[str]] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def add_node(self, node_id: str) -> bool:
        self._ensure_mutable()
        if not node_id:
            raise ValueError("Node identifier must be a non-empty string.")
        if node_id in self._nodes:
            return False
        self._nodes[node_id] = None
        return True

    def add_edge(self, source: str, target: str) -> bool:
        self._ensure_mutable()
        if source not in self._nodes or target not in self._nodes:
            return False
        self._edges.append(GraphEdge(source=source, target=target))
        # Index keeps the targets in insertion order, same as a full edge scan.
        self._adjacency.setdefault(source, []).append(target)
        return True

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def neighbors(self, node_id: str) -> Tuple[str, ...]:
        return tuple(self._adjacency.get(node_id, ()))

    def nodes(self) -> Tuple[str, ...]:
        return tuple(self._nodes)

    def edges(self) -> Tuple[GraphEdge, ...]:
        return tuple(self._edges)

    def iter_edges(self) -> Iterator[GraphEdge]:
        return iter(self._edges)

    def node_count(self) -> int:
        return len(self._nodes)

    def edge_count(self) -> int:
        return len(self._edges)

    def _ensure_mutable(self) -> None:
        if self._sealed:
            raise GraphSealedError("Graph store is sealed; load phase is over.")
