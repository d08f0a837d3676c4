"""Load validation phase: summarizes the load and seals the store."""

from typing import Any, Dict

from ..graph_model import GraphStore, LoadReport
from ..pipeline import PipelinePhase


class LoadValidationPhase(PipelinePhase):
    phase_name = "validation"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        store: GraphStore = context["store"]
        store.seal()
        load_report = LoadReport(
            node_count=store.node_count(),
            edge_count=store.edge_count(),
            malformed_lines=list(context.get("malformed_lines", [])),
            dropped_edges=list(context.get("dropped_edges", [])),
            read_error=context.get("read_error"),
        )
        return {"load_report": load_report}
