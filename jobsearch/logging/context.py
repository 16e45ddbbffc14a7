"""Scoped context fields for structured logging.

Fields bound here (for example the query being normalized) are copied onto
every log record emitted while the scope is active. Backed by contextvars, so
concurrent searches on different threads or tasks never see each other's
fields.
"""

from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

_LOG_CONTEXT: ContextVar[Dict[str, Any]] = ContextVar("jobsearch_log_context", default={})


def get_log_context() -> Dict[str, Any]:
    """Return a copy of the fields bound in the current scope."""
    return dict(_LOG_CONTEXT.get())


def push_log_context(**fields: Any) -> Token:
    """Bind extra fields on top of the current context.

    Args:
        **fields: Key-value pairs to add

    Returns:
        Token for pop_log_context()

    Example:
        >>> token = push_log_context(query="pyhton dev")
        >>> pop_log_context(token)
    """
    return _LOG_CONTEXT.set({**_LOG_CONTEXT.get(), **fields})


def pop_log_context(token: Token) -> None:
    """Restore the context that was active before push_log_context()."""
    _LOG_CONTEXT.reset(token)


def clear_log_context() -> None:
    """Drop every bound field. Mostly useful in tests."""
    _LOG_CONTEXT.set({})


class log_context:
    """Context manager binding fields for the duration of a block.

    Example:
        >>> with log_context(query="sr eng", origin="cli"):
        ...     logger.info("Normalizing query")
    """

    def __init__(self, **fields: Any):
        self.fields = fields
        self.token: Optional[Token] = None

    def __enter__(self):
        self.token = push_log_context(**self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.token is not None:
            pop_log_context(self.token)
            self.token = None
        return False
