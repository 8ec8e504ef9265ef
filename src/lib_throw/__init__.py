"""Public package surface for ``lib_throw``.

Exports the function-style helpers (:func:`ensure`, :func:`attempt`,
:func:`raise_group`, :func:`errdefer`), the outcome types they return, the
abort extension point, chain lookups, and the observability hooks. Error kinds
are imported from :mod:`lib_throw.exceptions`.
"""

from __future__ import annotations

from .application.assertion import Assertion
from .application.attempt import Attempt
from .application.cleanup import DeferredCleanup
from .core import attempt, ensure, errdefer, raise_group
from .domain.abort import HttpAbort, abort, set_abort_handler, use_abort_handler
from .domain.chain import error_as, error_is
from .domain.errors import ThrowException
from .domain.group import ExceptionGroup
from .observability import bind_trace_id, get_logger

__all__ = [
    "Assertion",
    "Attempt",
    "DeferredCleanup",
    "ExceptionGroup",
    "HttpAbort",
    "ThrowException",
    "abort",
    "attempt",
    "bind_trace_id",
    "ensure",
    "errdefer",
    "error_as",
    "error_is",
    "get_logger",
    "raise_group",
    "set_abort_handler",
    "use_abort_handler",
]
