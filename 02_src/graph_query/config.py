"""Search settings resolved from environment/.env and CLI overrides."""

import os
from dataclasses import dataclass, replace
from typing import Any, Callable, Dict

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError

DEFAULT_NUM_WORKERS = 4
DEFAULT_POLL_TIMEOUT = 60.0
DEFAULT_MAX_POLL_TIMEOUTS = 1

ENV_WORKERS = "GRAPH_QUERY_WORKERS"
ENV_POLL_TIMEOUT = "GRAPH_QUERY_POLL_TIMEOUT"
ENV_MAX_POLL_TIMEOUTS = "GRAPH_QUERY_MAX_POLL_TIMEOUTS"
ENV_MAX_DEPTH = "GRAPH_QUERY_MAX_DEPTH"
ENV_LOG_LEVEL = "GRAPH_QUERY_LOG_LEVEL"


@dataclass(frozen=True)
class SearchSettings:
    num_workers: int = DEFAULT_NUM_WORKERS
    poll_timeout: float = DEFAULT_POLL_TIMEOUT
    max_poll_timeouts: int = DEFAULT_MAX_POLL_TIMEOUTS
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if self.num_workers < 1:
            raise ConfigError(f"num_workers must be >= 1, got {self.num_workers}")
        if self.poll_timeout <= 0:
            raise ConfigError(f"poll_timeout must be > 0, got {self.poll_timeout}")
        if self.max_poll_timeouts < 1:
            raise ConfigError(f"max_poll_timeouts must be >= 1, got {self.max_poll_timeouts}")
        if self.max_depth is not None and self.max_depth < 0:
            raise ConfigError(f"max_depth must be >= 0, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> "SearchSettings":
        _load_env_file()
        values: Dict[str, Any] = {}
        _read_env(values, "num_workers", ENV_WORKERS, int)
        _read_env(values, "poll_timeout", ENV_POLL_TIMEOUT, float)
        _read_env(values, "max_poll_timeouts", ENV_MAX_POLL_TIMEOUTS, int)
        _read_env(values, "max_depth", ENV_MAX_DEPTH, int)
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> "SearchSettings":
        present = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **present) if present else self


def resolve_log_level(default: str = "WARNING") -> str:
    _load_env_file()
    return os.getenv(ENV_LOG_LEVEL, default).upper()


def _read_env(values: Dict[str, Any], key: str, env_name: str, cast: Callable[[str], Any]) -> None:
    raw = os.getenv(env_name)
    if raw is None or not raw.strip():
        return
    try:
        values[key] = cast(raw.strip())
    except ValueError as error:
        raise ConfigError(f"{env_name} has invalid value {raw!r}") from error


def _load_env_file() -> None:
    # .env is looked up from the working directory the CLI runs in.
    load_dotenv(find_dotenv(usecwd=True))
