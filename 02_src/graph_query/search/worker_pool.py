"""Fixed-size thread pool that hands back results in completion order."""

import logging
import queue
import threading
from concurrent.futures import CancelledError, Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from ..errors import PoolClosedError

logger = logging.getLogger(__name__)


class ShutdownMode(Enum):
    GRACEFUL = "graceful"
    IMMEDIATE = "immediate"


@dataclass(frozen=True)
class Completion:
    """Outcome of one submitted unit: a value or the error it raised."""

    future: Future
    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BoundedWorkerPool:
    """Worker threads living for the duration of one query.

    ``outstanding`` counts units that were submitted but whose completion has
    not been delivered by ``await_any`` yet.
    """

    def __init__(self, num_workers: int = 4, name: str = "graph-query") -> None:
        if num_workers < 1:
            raise ValueError(f"num_workers must be >= 1, got {num_workers}")
        self.num_workers = num_workers
        self.name = name
        self._executor = ThreadPoolExecutor(max_workers=num_workers, thread_name_prefix=name)
        self._completions: "queue.Queue[Completion]" = queue.Queue()
        self._cancel = threading.Event()
        self._lock = threading.Lock()
        self._closed = False
        self._outstanding = 0
        self._submitted = 0

    @property
    def outstanding(self) -> int:
        with self._lock:
            return self._outstanding

    @property
    def submitted(self) -> int:
        with self._lock:
            return self._submitted

    @property
    def cancelled(self) -> bool:
        return self._cancel.is_set()

    @property
    def closed(self) -> bool:
        with self._lock:
            return self._closed

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        with self._lock:
            if self._closed:
                raise PoolClosedError(f"Pool '{self.name}' is shut down.")
            future = self._executor.submit(fn, *args, **kwargs)
            self._outstanding += 1
            self._submitted += 1
        future.add_done_callback(self._on_done)
        return future

    def await_any(self, timeout: float | None = None) -> Completion | None:
        """Block until some unit completes; ``None`` means the timeout elapsed."""
        try:
            completion = self._completions.get(timeout=timeout)
        except queue.Empty:
            return None
        with self._lock:
            self._outstanding -= 1
        return completion

    def shutdown(self, mode: ShutdownMode = ShutdownMode.GRACEFUL) -> None:
        with self._lock:
            already_closed = self._closed
            self._closed = True
        if mode is ShutdownMode.IMMEDIATE:
            self._cancel.set()
        if already_closed and mode is ShutdownMode.GRACEFUL:
            return
        self._executor.shutdown(wait=True, cancel_futures=mode is ShutdownMode.IMMEDIATE)
        logger.debug(f"Pool '{self.name}' shut down ({mode.value}), submitted={self.submitted}")

    def _on_done(self, future: Future) -> None:
        if future.cancelled():
            self._completions.put(Completion(future=future, error=CancelledError()))
            return
        error = future.exception()
        if error is not None:
            logger.debug(f"Unit failed in pool '{self.name}': {error!r}")
            self._completions.put(Completion(future=future, error=error))
            return
        self._completions.put(Completion(future=future, value=future.result()))

    def __enter__(self) -> "BoundedWorkerPool":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown(ShutdownMode.IMMEDIATE)
