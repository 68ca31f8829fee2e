"""Correlation ID management for notification dispatch."""

from __future__ import annotations

import contextlib
import uuid
from collections.abc import Iterator
from contextvars import ContextVar

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def get_correlation_id() -> str | None:
    """Get current correlation ID from context."""
    return _correlation_id.get()


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


@contextlib.contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation ID for the duration of the block.

    Reuses the ID already in context when none is given, so nested
    dispatches share the caller's correlation.
    """
    current = correlation_id or get_correlation_id() or generate_correlation_id()
    token = _correlation_id.set(current)
    try:
        yield current
    finally:
        _correlation_id.reset(token)
