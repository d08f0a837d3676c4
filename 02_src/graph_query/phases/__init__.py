"""Pipeline phases for loading a graph file into a GraphStore."""

from .ingestion import GraphFileIngestionPhase
from .parsing import GraphParsingPhase
from .validation import LoadValidationPhase

__all__ = [
    "GraphFileIngestionPhase",
    "GraphParsingPhase",
    "LoadValidationPhase",
]
