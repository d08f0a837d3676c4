"""Mutable state shared between concurrent path-search tasks."""

import threading
from typing import Dict, Iterable


class ClaimSet:
    """Visited set whose writes are atomic check-and-insert operations.

    ``claim`` is insert-if-absent. ``claim_shallower`` also succeeds when the
    node was claimed before at a greater depth, which depth-bounded searches
    need to re-expand a node reached by a shorter route.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._lock = threading.Lock()
        self._depths: Dict[str, int] = {node_id: 0 for node_id in initial}

    def claim(self, node_id: str, depth: int = 0) -> bool:
        with self._lock:
            if node_id in self._depths:
                return False
            self._depths[node_id] = depth
            return True

    def claim_shallower(self, node_id: str, depth: int) -> bool:
        with self._lock:
            if self._depths.get(node_id, depth + 1) <= depth:
                return False
            self._depths[node_id] = depth
            return True

    def depth_of(self, node_id: str) -> int | None:
        with self._lock:
            return self._depths.get(node_id)

    def __contains__(self, node_id: object) -> bool:
        with self._lock:
            return node_id in self._depths

    def __len__(self) -> int:
        with self._lock:
            return len(self._depths)


class FoundFlag:
    """One-way flag: once raised it stays raised."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def raise_flag(self) -> None:
        self._event.set()

    def is_set(self) -> bool:
        return self._event.is_set()
