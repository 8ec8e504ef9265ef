"""Deferred assertion outcome produced by ``ensure``.

Purpose
-------
Separate evaluating a condition from choosing the reaction, so guard clauses
read as ``ensure(user.is_admin).or_throw(ForbiddenException)``.

Contents
--------
* :data:`ExceptionSpec` – accepted shapes for the error to raise.
* :func:`build_exception` – turn an :data:`ExceptionSpec` into an instance.
* :class:`Assertion` – the outcome with ``or_throw`` / ``or_abort``.

System Role
-----------
Created by :func:`lib_throw.core.ensure`. Holds only the evaluated boolean, so
the condition is never re-evaluated no matter how the outcome is consumed.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Callable, Union

from ..domain.abort import abort
from ..domain.errors import InvalidArgumentException

ExceptionSpec = Union[BaseException, type[BaseException], Callable[..., BaseException]]
"""An error instance, an error class, or a factory returning an error."""


def build_exception(exception: ExceptionSpec, message: str | None = None) -> BaseException:
    """Return the error described by ``exception``.

    Instances are returned unchanged. Classes and factories are called with
    ``message`` when one is given, without arguments otherwise.

    Examples
    --------
    >>> error = build_exception(KeyError, "missing")
    >>> type(error).__name__, error.args
    ('KeyError', ('missing',))
    >>> build_exception(ValueError("kept"), "ignored").args
    ('kept',)
    """

    if isinstance(exception, BaseException):
        return exception
    if not callable(exception):
        raise InvalidArgumentException(
            f"Expected an exception instance, class, or factory, got {type(exception).__name__}"
        )
    built = exception(message) if message is not None else exception()
    if not isinstance(built, BaseException):
        raise InvalidArgumentException(
            f"Exception factory returned {type(built).__name__}, not an exception"
        )
    return built


@dataclass(frozen=True, slots=True)
class Assertion:
    """Outcome of a guard condition.

    Why
    ----
    Keeps the reaction lazy: the error class is only instantiated on the
    failing branch, so a passing check never pays for building it.

    Examples
    --------
    >>> from lib_throw.exceptions import ForbiddenException
    >>> Assertion(True).or_throw(ForbiddenException, "never built")
    >>> try:
    ...     Assertion(False).or_throw(ForbiddenException, "admins only")
    ... except ForbiddenException as error:
    ...     print(error)
    admins only
    """

    passed: bool

    @property
    def failed(self) -> bool:
        return not self.passed

    def or_throw(self, exception: ExceptionSpec, message: str | None = None) -> None:
        """Raise ``exception`` when the condition did not hold."""

        if self.passed:
            return
        raise build_exception(exception, message)

    def or_abort(self, status: int | HTTPStatus, message: str | None = None) -> None:
        """Abort with ``status`` through the active handler when the condition did not hold."""

        if self.passed:
            return
        abort(status, message or "")


__all__ = ["Assertion", "ExceptionSpec", "build_exception"]
