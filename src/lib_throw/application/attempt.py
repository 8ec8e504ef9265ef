"""Try-style wrapper capturing the outcome of a unit of work.

Purpose
-------
Turn "call something that may raise" into a value that can be inspected,
transformed, or converted back into a raise at a convenient boundary.

Contents
--------
* :func:`resolve_work` – normalise the accepted work shapes into a
  zero-argument callable.
* :class:`Attempt` – immutable Success/Failure outcome.

System Role
-----------
Created through :func:`lib_throw.core.attempt` or :meth:`Attempt.of`. Only
failures raised *by the work* are captured; a value that cannot be executed
at all raises a taxonomy argument error immediately.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable, Generic, TypeVar

from ..domain.abort import abort
from ..domain.errors import (
    ClassMissingCallableMethodException,
    InvalidArgumentException,
    InvalidCallableException,
    ObjectMissingCallableMethodException,
    UnexpectedValueException,
)
from .assertion import ExceptionSpec
from .ports import Handler, Invokable

T = TypeVar("T")
U = TypeVar("U")

_PLAIN_DATA = (str, bytes, bytearray, int, float, complex, list, tuple, dict, set, frozenset, type(None))


def _defines(cls: type, name: str) -> bool:
    """Return ``True`` when ``cls`` (not ``object``) provides a callable ``name``."""

    return any(callable(vars(klass).get(name)) for klass in cls.__mro__ if klass is not object)


def resolve_work(work: Any) -> Callable[[], Any]:
    """Return a zero-argument callable running ``work``.

    Why
        ``attempt`` accepts functions, invokable objects, command objects with
        a ``handle`` method, and classes whose instances are either. The
        shapes are checked in that order, ``__call__`` before ``handle``.
    Raises
        ClassMissingCallableMethodException: ``work`` is a class without
            ``__call__`` or ``handle``.
        InvalidCallableException: ``work`` is plain data (``None``, numbers,
            strings, containers).
        ObjectMissingCallableMethodException: ``work`` is any other object
            without ``__call__`` or ``handle``.

    Classes are instantiated without arguments when the returned callable
    runs, so constructor failures are captured like any other failure.

    Examples
    --------
    >>> class Job:
    ...     def handle(self):
    ...         return "done"
    >>> resolve_work(Job)()
    'done'
    >>> resolve_work(42)
    Traceback (most recent call last):
    ...
    lib_throw.domain.errors.InvalidCallableException: Invalid callable provided
    """

    if isinstance(work, type):
        if _defines(work, "__call__"):
            return lambda: work()()
        if _defines(work, "handle"):
            return lambda: work().handle()
        raise ClassMissingCallableMethodException.for_class(work)
    if isinstance(work, Invokable):
        return work
    if isinstance(work, Handler) and callable(work.handle):
        return work.handle
    if isinstance(work, _PLAIN_DATA):
        raise InvalidCallableException.create().with_context(received=type(work).__name__)
    raise ObjectMissingCallableMethodException.create().with_context(received=type(work).__qualname__)


@dataclass(frozen=True, slots=True, repr=False)
class Attempt(Generic[T]):
    """Outcome of running a unit of work: a Success value or a Failure error.

    Why
    ----
    Lets callers chain transformations and decide late how to react to a
    failure (default value, recovery, re-raise as a domain error, abort).

    What
    ----
    Exactly one of ``value`` / ``error`` is meaningful; ``error is None``
    marks a Success. A Failure never carries a value and its error is always
    an :class:`Exception`, so a failure cannot turn into a Success by
    accident. Every transformation returns a new :class:`Attempt` and
    captures errors raised by the supplied function. Functions meant for the
    other branch are never called.

    Examples
    --------
    >>> Attempt.of(lambda: 21).map(lambda value: value * 2)
    Success(42)
    >>> failed = Attempt.of(lambda: int("x"))
    >>> failed.is_failure(), type(failed.error).__name__
    (True, 'ValueError')
    >>> failed.get_or_else(0)
    0
    >>> failed.recover(lambda error: -1).get()
    -1
    """

    value: T | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if self.error is None:
            return
        if not isinstance(self.error, Exception):
            raise InvalidArgumentException("Attempt error must be an Exception").with_context(
                received=type(self.error).__name__
            )
        if self.value is not None:
            raise InvalidArgumentException("Attempt cannot hold both a value and an error")

    @classmethod
    def of(cls, work: Any) -> Attempt[Any]:
        """Run ``work`` now and capture its result or the ``Exception`` it raised."""

        invoke = resolve_work(work)
        try:
            return cls.success(invoke())
        except Exception as error:
            return cls.failure(error)

    @classmethod
    def success(cls, value: U) -> Attempt[U]:
        return cls(value, None)  # type: ignore[arg-type, return-value]

    @classmethod
    def failure(cls, error: Exception) -> Attempt[Any]:
        if error is None:
            raise InvalidArgumentException("Attempt.failure requires an error")
        return cls(None, error)

    def is_success(self) -> bool:
        return self.error is None

    def is_failure(self) -> bool:
        return self.error is not None

    def get(self) -> T:
        """Return the success value or re-raise the captured error."""

        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def get_or_else(self, default: Any) -> Any:
        """Return the success value, or ``default`` on failure.

        A callable ``default`` is treated as a supplier and called (without
        arguments) only on the failure branch. Wrap a callable you want
        returned as-is in a lambda.
        """

        if self.error is None:
            return self.value
        return default() if callable(default) else default

    def to_optional(self) -> T | None:
        """Return the success value, or ``None`` on failure."""

        return self.value if self.error is None else None

    def map(self, transform: Callable[[T], U]) -> Attempt[U]:
        if self.error is not None:
            return self  # type: ignore[return-value]
        try:
            return Attempt.success(transform(self.value))  # type: ignore[arg-type]
        except Exception as error:
            return Attempt.failure(error)

    def flat_map(self, transform: Callable[[T], Attempt[U]]) -> Attempt[U]:
        """Chain a step that itself returns an :class:`Attempt`."""

        if self.error is not None:
            return self  # type: ignore[return-value]
        try:
            return transform(self.value)  # type: ignore[arg-type]
        except Exception as error:
            return Attempt.failure(error)

    def recover(self, rescue: Callable[[Exception], U]) -> Attempt[T | U]:
        """Turn a Failure into a Success holding ``rescue(error)``."""

        if self.error is None:
            return self
        try:
            return Attempt.success(rescue(self.error))
        except Exception as error:
            return Attempt.failure(error)

    def map_error(self, transform: Callable[[Exception], Exception]) -> Attempt[T]:
        """Replace the captured error, e.g. to translate it into a domain kind.

        A ``transform`` returning anything but an :class:`Exception` yields a
        Failure with :class:`UnexpectedValueException` wrapping the original
        error.
        """

        if self.error is None:
            return self
        try:
            replacement = transform(self.error)
        except Exception as error:
            return Attempt.failure(error)
        if not isinstance(replacement, Exception):
            return Attempt.failure(
                UnexpectedValueException("map_error must return an Exception")
                .with_context(received=type(replacement).__name__)
                .wrap(self.error)
            )
        return Attempt.failure(replacement)

    def or_throw(self, exception: ExceptionSpec, message: str | None = None) -> T:
        """Return the success value or raise ``exception`` for the failure.

        An instance is raised unchanged. A class or factory is called with
        ``message`` (default: the captured message) and raised with the
        captured error as its cause.

        Examples
        --------
        >>> from lib_throw.exceptions import ConfigurationException
        >>> try:
        ...     Attempt.of(lambda: {}["port"]).or_throw(ConfigurationException, "port missing")
        ... except ConfigurationException as error:
        ...     print(error, "<-", type(error.wrapped).__name__)
        port missing <- KeyError
        """

        if self.error is None:
            return self.value  # type: ignore[return-value]
        if isinstance(exception, BaseException):
            raise exception
        raise exception(message if message is not None else str(self.error)) from self.error

    def abort(self, status: int | HTTPStatus, message: str | None = None) -> T:
        """Return the success value or abort with ``status`` through the active handler."""

        if self.error is None:
            return self.value  # type: ignore[return-value]
        abort(status, message if message is not None else str(self.error))

    def or_bad_request(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.BAD_REQUEST, message)

    def or_unauthorized(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.UNAUTHORIZED, message)

    def or_forbidden(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.FORBIDDEN, message)

    def or_not_found(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.NOT_FOUND, message)

    def or_conflict(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.CONFLICT, message)

    def or_unprocessable(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.UNPROCESSABLE_ENTITY, message)

    def or_too_many_requests(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.TOO_MANY_REQUESTS, message)

    def or_server_error(self, message: str | None = None) -> T:
        return self.abort(HTTPStatus.INTERNAL_SERVER_ERROR, message)

    def __repr__(self) -> str:
        if self.error is None:
            return f"Success({self.value!r})"
        return f"Failure({self.error!r})"


__all__ = ["Attempt", "resolve_work"]
