# src/logging/context.py — v1
"""Contextual logging support — attach source, run_id and stage to log records.

A run binds ``source`` and ``run_id`` once; each pipeline step runs inside
``stage(...)``. Both are context managers that restore the previous values
on exit, so a nested or failed step never leaks its stage into later logs.
"""

from __future__ import annotations

import contextvars
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from typing import Any, Iterator


@dataclass(frozen=True)
class LogContext:
    """Immutable snapshot of current logging context."""

    source: str | None = None
    run_id: str | None = None
    stage: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in asdict(self).items() if v is not None}


_context: contextvars.ContextVar[LogContext] = contextvars.ContextVar(
    "cliqueperc_log_context", default=LogContext()
)


def get_context() -> LogContext:
    return _context.get()


def _replace(**fields: str | None) -> contextvars.Token[LogContext]:
    current = _context.get()
    return _context.set(LogContext(**{**asdict(current), **fields}))


@contextmanager
def run_context(source: str, run_id: str) -> Iterator[LogContext]:
    """Bind the run's source and id; the stage starts empty."""
    token = _replace(source=source, run_id=run_id, stage=None)
    try:
        yield _context.get()
    finally:
        _context.reset(token)


@contextmanager
def stage(name: str) -> Iterator[LogContext]:
    """Mark log records emitted inside the block with pipeline stage ``name``."""
    token = _replace(stage=name)
    try:
        yield _context.get()
    finally:
        _context.reset(token)


def clear_context() -> None:
    """Reset all context fields."""
    _context.set(LogContext())
