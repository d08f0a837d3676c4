"""Load-pipeline abstractions and a timed sequential runner."""

import logging
import time
from abc import ABC, abstractmethod
from typing import Any, Dict, Iterable, List

logger = logging.getLogger(__name__)

PHASE_TIMINGS_KEY = "phase_timings_ms"


class PipelinePhase(ABC):
    phase_name: str

    @abstractmethod
    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError


class PipelineRunner:
    """Runs phases in order, merging each returned dict into the context.

    Wall-clock cost of every phase is recorded under ``phase_timings_ms``.
    """

    def __init__(self, phases: Iterable[PipelinePhase]) -> None:
        self.phases: List[PipelinePhase] = list(phases)
        names = [phase.phase_name for phase in self.phases]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate phase names in pipeline: {names}")

    def run(self, context: Dict[str, Any]) -> Dict[str, Any]:
        current = dict(context)
        timings: Dict[str, float] = {}
        for phase in self.phases:
            started = time.perf_counter()
            phase_result = phase.run(current)
            timings[phase.phase_name] = (time.perf_counter() - started) * 1000
            if not isinstance(phase_result, dict):
                raise TypeError(f"Load phase '{phase.phase_name}' must return a dict context.")
            logger.debug(f"Load phase '{phase.phase_name}' took {timings[phase.phase_name]:.1f} ms")
            current.update(phase_result)
        current[PHASE_TIMINGS_KEY] = timings
        return current
