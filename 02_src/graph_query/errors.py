"""Exception types raised by the graph query package."""


class GraphQueryError(Exception):
    """Base class for all package errors."""


class GraphSealedError(GraphQueryError):
    """Raised when a sealed store is mutated after its load phase."""


class PoolClosedError(GraphQueryError):
    """Raised when work is submitted to a pool that has been shut down."""


class SearchError(GraphQueryError):
    """Raised when a parallel search cannot produce a trustworthy answer."""


class CommandError(GraphQueryError):
    """Raised for malformed interactive commands; the message is user-facing."""


class ConfigError(GraphQueryError, ValueError):
    """Raised for invalid settings values."""
