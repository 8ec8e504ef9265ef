"""Environment-specific abort extension point.

Purpose
-------
``or_abort`` / ``abort_if`` terminate the current request in web hosts. The
library owns no HTTP stack, so the actual termination is delegated to a
pluggable handler.

Contents
--------
* :class:`HttpAbort` – raised by the default handler.
* :data:`ABORT_HANDLER` – context variable holding the active handler.
* :func:`abort` – dispatch to the active handler.
* :func:`set_abort_handler` / :func:`use_abort_handler` – install handlers
  globally for the current context or for a ``with`` block.

System Role
-----------
Used by :class:`lib_throw.domain.conditional.ConditionallyThrowable`,
:class:`lib_throw.application.assertion.Assertion`, and
:class:`lib_throw.application.attempt.Attempt`. Hosts embed the library by
installing a handler that raises their framework's HTTP exception.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from http import HTTPStatus
from typing import Callable, Iterator, NoReturn


AbortHandler = Callable[[int, str], NoReturn]
"""Signature of an abort handler: ``handler(status_code, message)``."""


class HttpAbort(Exception):
    """Request termination signal raised by the default abort handler.

    Not part of the error taxonomy: it stands in for the host framework's
    abort exception and carries only a status code and a message.

    Examples
    --------
    >>> signal = HttpAbort(404, "Post not found")
    >>> signal.status_code, signal.message
    (404, 'Post not found')
    >>> signal.phrase
    'Not Found'
    """

    def __init__(self, status_code: int, message: str = "") -> None:
        super().__init__(message or _phrase(status_code))
        self.status_code = status_code
        self.message = message

    @property
    def phrase(self) -> str:
        """Standard reason phrase for :attr:`status_code` (empty when unknown)."""

        return _phrase(self.status_code)


def raise_http_abort(status_code: int, message: str) -> NoReturn:
    """Default handler: raise :class:`HttpAbort`."""

    raise HttpAbort(status_code, message)


ABORT_HANDLER: ContextVar[AbortHandler] = ContextVar("lib_throw_abort_handler", default=raise_http_abort)


def abort(status: int | HTTPStatus, message: str = "") -> NoReturn:
    """Terminate through the active handler.

    Examples
    --------
    >>> try:
    ...     abort(HTTPStatus.FORBIDDEN, "admins only")
    ... except HttpAbort as signal:
    ...     print(signal.status_code, signal)
    403 admins only
    """

    code = int(status)
    ABORT_HANDLER.get()(code, message)
    raise HttpAbort(code, message)  # handler returned instead of terminating


def set_abort_handler(handler: AbortHandler | None) -> None:
    """Install ``handler`` for the current context; ``None`` restores the default."""

    ABORT_HANDLER.set(handler if handler is not None else raise_http_abort)


@contextmanager
def use_abort_handler(handler: AbortHandler) -> Iterator[AbortHandler]:
    """Install ``handler`` for the duration of a ``with`` block."""

    token = ABORT_HANDLER.set(handler)
    try:
        yield handler
    finally:
        ABORT_HANDLER.reset(token)


def _phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""
