"""CLI entrypoint helpers for graph loading, querying and generation."""

import argparse
import logging
import sys
from typing import Any, Dict, Iterable, List, TextIO, Tuple

from .commands import CommandDispatcher, run_session
from .config import SearchSettings, resolve_log_level
from .errors import ConfigError
from .generator import DEFAULT_NUM_EDGES, DEFAULT_NUM_NODES, generate_graph_file
from .graph_model import GraphStore, LoadReport
from .graph_orchestrator import QueryOrchestrator
from .phases import GraphFileIngestionPhase, GraphParsingPhase, LoadValidationPhase
from .pipeline import PHASE_TIMINGS_KEY, PipelinePhase, PipelineRunner


def build_default_phases() -> List[PipelinePhase]:
    return [
        GraphFileIngestionPhase(),
        GraphParsingPhase(),
        LoadValidationPhase(),
    ]


def load_graph(input_path: str = "") -> Tuple[GraphStore, LoadReport]:
    return _run_load({"input_path": input_path})


def parse_graph_lines(lines: Iterable[str]) -> Tuple[GraphStore, LoadReport]:
    return _run_load({"lines": list(lines)})


def _run_load(initial_context: Dict[str, Any]) -> Tuple[GraphStore, LoadReport]:
    initial_context = {**initial_context, "store": GraphStore()}
    runner = PipelineRunner(phases=build_default_phases())
    final_context = runner.run(initial_context)
    report: LoadReport = final_context["load_report"]
    report.phase_timings_ms = dict(final_context[PHASE_TIMINGS_KEY])
    return final_context["store"], report


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Load a graph file and compare sequential vs parallel queries.")
    parser.add_argument(
        "--input-path",
        default="",
        help="Graph file to load. Prompted for interactively when omitted.",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker threads per parallel query.")
    parser.add_argument(
        "--poll-timeout",
        type=float,
        default=None,
        help="Seconds the parallel path search waits for any task to complete.",
    )
    parser.add_argument("--max-depth", type=int, default=None, help="Optional depth bound for path searches.")
    parser.add_argument("--log-level", default=None, help="Logging level (default from GRAPH_QUERY_LOG_LEVEL).")
    return parser.parse_args(argv)


def print_load_summary(report: LoadReport, output: TextIO = sys.stdout) -> None:
    if report.read_error:
        print(f"Could not read graph file: {report.read_error}", file=output)
    print(f"Total unique nodes: {report.node_count}", file=output)
    print(f"Total edges: {report.edge_count}", file=output)
    if report.malformed_lines:
        print(f"Malformed lines skipped: {len(report.malformed_lines)}", file=output)
    if report.dropped_edges:
        print(f"Edges dropped (unknown endpoints): {len(report.dropped_edges)}", file=output)
    print(f"Graph parsed in {report.elapsed_ms:.0f} ms", file=output)


def main(argv: List[str] | None = None, input_stream: TextIO = sys.stdin, output: TextIO = sys.stdout) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level or resolve_log_level())
    try:
        settings = SearchSettings.from_env().with_overrides(
            num_workers=args.workers,
            poll_timeout=args.poll_timeout,
            max_depth=args.max_depth,
        )
    except ConfigError as error:
        print(f"Configuration error: {error}", file=sys.stderr)
        return 2

    input_path = args.input_path
    if not input_path:
        print("Enter the graph file name: ", end="", file=output, flush=True)
        input_path = input_stream.readline().strip()

    store, report = load_graph(input_path)
    print_load_summary(report, output)

    dispatcher = CommandDispatcher(QueryOrchestrator(store, settings))
    run_session(dispatcher, input_stream=input_stream, output=output)
    return 0


def parse_generate_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a random graph file.")
    parser.add_argument("--output-path", default="graph2.txt", help="Where to write the graph file.")
    parser.add_argument("--nodes", type=int, default=DEFAULT_NUM_NODES, help="Number of nodes.")
    parser.add_argument("--edges", type=int, default=DEFAULT_NUM_EDGES, help="Number of unique edges.")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible output.")
    return parser.parse_args(argv)


def generate_main(argv: List[str] | None = None) -> int:
    args = parse_generate_args(argv)
    configure_logging(resolve_log_level())
    try:
        path = generate_graph_file(args.output_path, args.nodes, args.edges, seed=args.seed)
    except ValueError as error:
        print(f"Cannot generate graph: {error}", file=sys.stderr)
        return 2
    print(f"Graph file generated successfully: {path}")
    return 0
