"""Single-threaded baseline searches."""

from typing import Dict, Iterator, List, Set

from ..graph_model import GraphStore

_EXHAUSTED = object()


class SequentialSearch:
    def __init__(self, store: GraphStore, max_depth: int | None = None) -> None:
        self.store = store
        self.max_depth = max_depth

    def node_exists(self, node_id: str) -> bool:
        return self.store.has_node(node_id)

    def edge_exists(self, source: str, target: str) -> bool:
        for edge in self.store.iter_edges():
            if edge.source == source and edge.target == target:
                return True
        return False

    def find_path(self, start: str, end: str) -> List[str]:
        """Depth-first search returning the first path in ``neighbors()`` order.

        Iterative with an explicit stack of neighbor iterators, so the visiting
        order matches the recursive formulation without growing the call stack.
        With ``max_depth`` set, a path is found iff one of at most that many
        edges exists.
        """
        if not self.store.has_node(start) or not self.store.has_node(end):
            return []
        if start == end:
            return [start]
        if self.max_depth is not None:
            return self._find_bounded_path(start, end, self.max_depth)

        visited: Set[str] = {start}
        path: List[str] = [start]
        stack: List[Iterator[str]] = [iter(self.store.neighbors(start))]

        while stack:
            neighbor = next(stack[-1], _EXHAUSTED)
            if neighbor is _EXHAUSTED:
                stack.pop()
                path.pop()
                continue
            if neighbor in visited:
                continue
            visited.add(neighbor)
            path.append(neighbor)
            if neighbor == end:
                return list(path)
            stack.append(iter(self.store.neighbors(neighbor)))

        return []

    def _find_bounded_path(self, start: str, end: str, max_depth: int) -> List[str]:
        # A node is expanded again whenever it is reached at a smaller depth,
        # so a first visit near the bound cannot hide a shorter route.
        if max_depth == 0:
            return []
        best_depth: Dict[str, int] = {start: 0}
        path: List[str] = [start]
        stack: List[Iterator[str]] = [iter(self.store.neighbors(start))]

        while stack:
            neighbor = next(stack[-1], _EXHAUSTED)
            if neighbor is _EXHAUSTED:
                stack.pop()
                path.pop()
                continue
            depth = len(path)
            if best_depth.get(neighbor, depth + 1) <= depth:
                continue
            best_depth[neighbor] = depth
            path.append(neighbor)
            if neighbor == end:
                return list(path)
            if depth >= max_depth:
                path.pop()
                continue
            stack.append(iter(self.store.neighbors(neighbor)))

        return []
