"""Interactive command dispatch for graph queries."""

import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, List, TextIO

from .errors import CommandError, SearchError
from .graph_orchestrator import QueryComparison, QueryOrchestrator, StrategyRun

logger = logging.getLogger(__name__)

PROMPT = "\nEnter your query (nodes, node x, edges, edge a b, path a b, help, exit): "
HELP_TEXT = [
    "Commands:",
    "  nodes          list all nodes",
    "  node <id>      check whether a node exists",
    "  edges          list all edges",
    "  edge <a> <b>   check whether the directed edge a -> b exists",
    "  path <a> <b>   search for a directed path from a to b",
    "  exit           leave the session",
]


@dataclass
class CommandOutcome:
    lines: List[str] = field(default_factory=list)
    exit_session: bool = False


class CommandDispatcher:
    def __init__(self, orchestrator: QueryOrchestrator) -> None:
        self.orchestrator = orchestrator
        self._handlers: Dict[str, Callable[[List[str]], CommandOutcome]] = {
            "nodes": self._list_nodes,
            "node": self._check_node,
            "edges": self._list_edges,
            "edge": self._check_edge,
            "path": self._check_path,
            "help": self._help,
            "exit": self._exit,
        }

    def dispatch(self, raw_command: str) -> CommandOutcome:
        tokens = raw_command.split()
        if not tokens:
            return CommandOutcome()

        name, args = tokens[0].lower(), tokens[1:]
        handler = self._handlers.get(name)
        if handler is None:
            return CommandOutcome(["Unknown command. Type 'help' for the list of commands."])
        try:
            return handler(args)
        except CommandError as error:
            return CommandOutcome([str(error)])
        except SearchError as error:
            logger.error(f"Query '{raw_command.strip()}' failed: {error}")
            return CommandOutcome([f"Search failed: {error}"])

    def _list_nodes(self, args: List[str]) -> CommandOutcome:
        _expect_args(args, 0, "nodes")
        return CommandOutcome(["Nodes: " + ", ".join(self.orchestrator.store.nodes())])

    def _list_edges(self, args: List[str]) -> CommandOutcome:
        _expect_args(args, 0, "edges")
        rendered = ", ".join(str(edge) for edge in self.orchestrator.store.edges())
        return CommandOutcome(["Edges: " + rendered])

    def _check_node(self, args: List[str]) -> CommandOutcome:
        _expect_args(args, 1, "node x")
        comparison = self.orchestrator.check_node(args[0])
        return CommandOutcome(_existence_lines(comparison, "Node"))

    def _check_edge(self, args: List[str]) -> CommandOutcome:
        _expect_args(args, 2, "edge a b")
        comparison = self.orchestrator.check_edge(args[0], args[1])
        return CommandOutcome(_existence_lines(comparison, "Edge"))

    def _check_path(self, args: List[str]) -> CommandOutcome:
        _expect_args(args, 2, "path a b")
        comparison = self.orchestrator.check_path(args[0], args[1])
        return CommandOutcome(
            [
                f"Sequential Path Search: {format_path(comparison.sequential)} "
                f"(Time: {comparison.sequential.elapsed_ms:.3f} ms)",
                f"Parallel Path Search: {format_path(comparison.parallel)} "
                f"(Time: {comparison.parallel.elapsed_ms:.3f} ms)",
            ]
        )

    def _help(self, args: List[str]) -> CommandOutcome:
        return CommandOutcome(list(HELP_TEXT))

    def _exit(self, args: List[str]) -> CommandOutcome:
        return CommandOutcome(["Exiting the program."], exit_session=True)


def format_path(run: StrategyRun) -> str:
    if run.value:
        return " -> ".join(run.value)
    if run.timed_out:
        return "No path found (search exceeded time budget)"
    return "No path found"


def run_session(dispatcher: CommandDispatcher, input_stream: TextIO = sys.stdin, output: TextIO = sys.stdout) -> None:
    """Read commands until ``exit`` or end of input."""
    while True:
        print(PROMPT, end="", file=output, flush=True)
        raw_command = input_stream.readline()
        if not raw_command:
            print("", file=output)
            break
        outcome = dispatcher.dispatch(raw_command)
        for line in outcome.lines:
            print(line, file=output)
        if outcome.exit_session:
            break


def _existence_lines(comparison: QueryComparison, noun: str) -> List[str]:
    return [
        f"Single-threaded search: {_exists_text(comparison.sequential, noun)} "
        f"Time taken: {comparison.sequential.elapsed_ns} ns",
        f"Multi-threaded search: {_exists_text(comparison.parallel, noun)} "
        f"Time taken: {comparison.parallel.elapsed_ns} ns",
    ]


def _exists_text(run: StrategyRun, noun: str) -> str:
    return f"{noun} exists." if run.value else f"{noun} does not exist."


def _expect_args(args: List[str], count: int, usage: str) -> None:
    if len(args) != count:
        raise CommandError(f"Invalid {usage.split()[0]} query format. Use '{usage}'.")
