"""Line parsing phase powered by a LangGraph workflow."""

import logging
from typing import Any, Dict, List

from langgraph.graph import END, START, StateGraph
from typing_extensions import TypedDict

from ..graph_model import GraphEdge, GraphStore
from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)

NODE_MARKER = "*"
EDGE_MARKER = "-"


class ParsingState(TypedDict):
    lines: List[str]
    records: List[Dict[str, Any]]
    malformed_lines: List[str]
    dropped_edges: List[GraphEdge]
    store: Any


class GraphParsingPhase(PipelinePhase):
    """Turns ``* node`` / ``- source target`` lines into store mutations.

    Records are applied strictly in file order, so an edge declared before
    one of its endpoints is dropped.
    """

    phase_name = "parsing"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        store: GraphStore = context.get("store") or GraphStore()
        workflow = self._build_workflow()
        result_state = workflow.invoke(
            {
                "lines": list(context.get("lines", [])),
                "records": [],
                "malformed_lines": [],
                "dropped_edges": [],
                "store": store,
            }
        )
        return {
            "store": store,
            "malformed_lines": result_state.get("malformed_lines", []),
            "dropped_edges": result_state.get("dropped_edges", []),
        }

    def _build_workflow(self):
        graph = StateGraph(ParsingState)
        graph.add_node("classify_lines", self._classify_lines)
        graph.add_node("apply_records", self._apply_records)
        graph.add_edge(START, "classify_lines")
        graph.add_edge("classify_lines", "apply_records")
        graph.add_edge("apply_records", END)
        return graph.compile()

    def _classify_lines(self, state: ParsingState) -> Dict[str, Any]:
        records: List[Dict[str, Any]] = []
        malformed: List[str] = []

        for raw_line in state.get("lines", []):
            line = raw_line.strip()
            if not line:
                continue
            if not line.startswith((NODE_MARKER, EDGE_MARKER)):
                logger.debug(f"Unrecognized line ignored: {line}")
                continue
            record = self.parse_line(line)
            if record is None:
                logger.warning(f"Malformed line skipped: {line}")
                malformed.append(line)
                continue
            records.append(record)

        return {"records": records, "malformed_lines": malformed}

    def _apply_records(self, state: ParsingState) -> Dict[str, Any]:
        store: GraphStore = state["store"]
        dropped: List[GraphEdge] = []

        for record in state.get("records", []):
            if record["kind"] == "node":
                store.add_node(record["id"])
                continue
            if not store.add_edge(record["source"], record["target"]):
                logger.debug(f"Edge with unknown endpoint dropped: {record['source']} -> {record['target']}")
                dropped.append(GraphEdge(source=record["source"], target=record["target"]))

        if dropped:
            logger.warning(f"Dropped {len(dropped)} edge(s) referencing unknown nodes")
        return {"dropped_edges": dropped}

    @staticmethod
    def parse_line(line: str) -> Dict[str, Any] | None:
        """Parse one stripped marker line; ``None`` marks it malformed."""
        if line.startswith(NODE_MARKER):
            node_id = line[len(NODE_MARKER):].strip()
            if not node_id:
                return None
            return {"kind": "node", "id": node_id}
        if line.startswith(EDGE_MARKER):
            parts = line[len(EDGE_MARKER):].split()
            if len(parts) != 2:
                return None
            return {"kind": "edge", "source": parts[0], "target": parts[1]}
        return None
