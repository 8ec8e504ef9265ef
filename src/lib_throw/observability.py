"""Structured logging helpers for the composition root.

Purpose
    Keep every log emission of the library predictable and contextual without
    forcing applications to adopt a specific logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug``: emits a structured debug entry carrying the trace context.
    - ``debug_enabled``: reports whether the package logger handles debug records.
    - ``make_event``: builds the structured payload describing an error.

System Integration
    Used only by :mod:`lib_throw.core`. The domain and application layers stay
    free from logging so error kinds can be raised from anywhere, including
    inside logging handlers.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any, Final

TRACE_ID: ContextVar[str | None] = ContextVar("lib_throw_trace_id", default=None)
"""Current trace identifier attached to every log record of the library."""

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_throw")
_LOGGER.addHandler(logging.NullHandler())


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers.

    Why
        Leaves the library silent by default while giving host applications full
        control over handler and formatter configuration.
    """

    return _LOGGER


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('req-42')
    >>> TRACE_ID.get()
    'req-42'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def debug_enabled() -> bool:
    """Return ``True`` when a debug record of the package logger would be handled."""

    return _LOGGER.isEnabledFor(logging.DEBUG)


def make_event(error: BaseException, payload: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Build a structured logging payload describing ``error``.

    Why
        Log processors should see the kind, the message, and the error context
        under stable keys regardless of where the error was observed.
    What
        Returns ``kind``, ``error_message`` and a plain copy of the error
        ``context`` (empty for errors without one), then any ``payload``
        fields. The keys never clash with the ``message`` parameter of
        :func:`log_debug`, so the event can be unpacked into it.

    Examples
    --------
    >>> make_event(KeyError("port"), {"stage": "boot"})
    {'kind': 'KeyError', 'error_message': "'port'", 'context': {}, 'stage': 'boot'}
    >>> from lib_throw.exceptions import CacheException
    >>> make_event(CacheException("miss").with_context(key="user:1"))
    {'kind': 'CacheException', 'error_message': 'miss', 'context': {'key': 'user:1'}}
    """

    event = _base_event(error)
    return _merge_payload(event, payload)


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current trace identifier to the provided structured fields."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context


def _base_event(error: BaseException) -> dict[str, Any]:
    context = getattr(error, "context", None)
    return {
        "kind": type(error).__name__,
        "error_message": str(error),
        "context": dict(context) if isinstance(context, Mapping) else {},
    }


def _merge_payload(event: dict[str, Any], payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge optional diagnostic data into the event payload when provided."""

    if payload:
        event |= dict(payload)
    return event
