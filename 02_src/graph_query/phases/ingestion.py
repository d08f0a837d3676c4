"""Graph file ingestion phase: reads raw lines from disk."""

import logging
from pathlib import Path
from typing import Any, Dict, List

from ..pipeline import PipelinePhase

logger = logging.getLogger(__name__)


class GraphFileIngestionPhase(PipelinePhase):
    phase_name = "ingestion"

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        input_path = context.get("input_path")
        if "lines" in context:
            return {"lines": [str(line) for line in context["lines"]], "read_error": None}

        if not input_path:
            logger.error("No graph file path given; continuing with an empty graph.")
            return {"lines": [], "read_error": "no input path"}

        lines, read_error = self._read_lines(Path(str(input_path)))
        return {"lines": lines, "read_error": read_error}

    @staticmethod
    def _read_lines(input_path: Path) -> tuple[List[str], str | None]:
        try:
            with input_path.open("r", encoding="utf-8") as handle:
                return handle.read().splitlines(), None
        except (OSError, UnicodeDecodeError) as error:
            logger.error(f"Error reading file {input_path}: {error}")
            return [], str(error)
