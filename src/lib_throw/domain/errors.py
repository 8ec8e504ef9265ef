"""Domain-level exception hierarchy roots.

Purpose
-------
Expose the marker root shared by every error kind in ``lib_throw`` and the
language-runtime style base categories the long-tail taxonomy hangs off.

Contents
--------
* :class:`ThrowException` – marker root carrying the shared concerns (context,
  wrapping, conditional throwing, chain lookups, transforms).
* Logic branch: :class:`LogicException`, :class:`BadFunctionCallException`,
  :class:`BadMethodCallException`, :class:`DomainException`,
  :class:`InvalidArgumentException`, :class:`LengthException`,
  :class:`OutOfRangeException`.
* Runtime branch: :class:`RuntimeException`, :class:`OutOfBoundsException`,
  :class:`RangeException`, :class:`UnderflowException`,
  :class:`UnexpectedValueException`.
* Callable resolution errors raised by ``attempt``:
  :class:`InvalidCallableException`,
  :class:`ClassMissingCallableMethodException`,
  :class:`ObjectMissingCallableMethodException`.

System Role
-----------
Callers catch :class:`ThrowException` to handle every library error uniformly
while unrelated host errors pass through. Kinds with a natural Python
counterpart also subclass the builtin (``InvalidArgumentException`` is a
``ValueError``) so generic handlers keep working.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from .chain import FiltersExceptions
from .conditional import ConditionallyThrowable
from .context import HasErrorContext
from .transforms import TransformsErrors
from .wrapping import WrapsErrors


class ThrowException(
    HasErrorContext,
    WrapsErrors,
    ConditionallyThrowable,
    FiltersExceptions,
    TransformsErrors,
    Exception,
):
    """Base type for all exceptions emitted by ``lib_throw``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need
    fine-grained handling, and a single place where the shared behaviours are
    implemented.

    What
    ----
    Stores the message as the first positional argument. Optional keyword
    arguments seed the context bags and the wrapped cause; every builder
    method afterwards is copy-on-write.

    Parameters
    ----------
    message:
        Human-readable description; empty when default-constructed.
    context / tags / metadata:
        Initial diagnostic bags.
    wrapped:
        Error to record as ``__cause__``.

    Examples
    --------
    >>> error = ThrowException("boom", context={"job": 3}, tags=["critical"])
    >>> error.kind, error.message, dict(error.context), error.tags
    ('ThrowException', 'boom', {'job': 3}, ('critical',))
    """

    def __init__(
        self,
        message: str = "",
        *,
        context: Mapping[str, Any] | None = None,
        tags: Iterable[str] | None = None,
        metadata: Mapping[str, Any] | None = None,
        wrapped: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        if context:
            self._context = dict(context)
        if tags:
            self._tags = tuple(tags)
        if metadata:
            self._metadata = dict(metadata)
        if wrapped is not None:
            self.__cause__ = wrapped

    @property
    def kind(self) -> str:
        """Name of the concrete error kind."""

        return type(self).__name__

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class LogicException(ThrowException):
    """Raised for errors in the program logic that a code change should fix."""


class BadFunctionCallException(LogicException):
    """Raised when a callback refers to an undefined function or misses arguments."""


class BadMethodCallException(BadFunctionCallException):
    """Raised when a callback refers to an undefined method or misses arguments."""


class DomainException(LogicException):
    """Raised when a value does not adhere to a defined valid data domain."""


class InvalidArgumentException(LogicException, ValueError):
    """Raised when an argument does not have the expected type or shape."""


class LengthException(LogicException):
    """Raised when a length is invalid."""


class OutOfRangeException(LogicException, IndexError):
    """Raised when an illegal index is requested."""


class RuntimeException(ThrowException):
    """Raised for errors that can only be detected while the program runs."""


class OutOfBoundsException(RuntimeException, LookupError):
    """Raised when a value is not a valid key."""


class RangeException(RuntimeException):
    """Raised to indicate range errors during program execution."""


class UnderflowException(RuntimeException):
    """Raised when removing an element from an empty container."""


class UnexpectedValueException(RuntimeException, ValueError):
    """Raised when a value does not match a set of expected values."""


class InvalidCallableException(InvalidArgumentException):
    """Raised when ``attempt`` receives something that cannot be executed."""

    @classmethod
    def create(cls) -> InvalidCallableException:
        return cls("Invalid callable provided")


class ClassMissingCallableMethodException(InvalidArgumentException):
    """Raised when ``attempt`` receives a class without ``__call__`` or ``handle``."""

    @classmethod
    def for_class(cls, target: type) -> ClassMissingCallableMethodException:
        """Build the error for ``target``.

        >>> class Report: ...
        >>> str(ClassMissingCallableMethodException.for_class(Report))
        'Class Report must have __call__ or handle method'
        """

        return cls(f"Class {target.__qualname__} must have __call__ or handle method").with_context(
            target=f"{target.__module__}.{target.__qualname__}"
        )


class ObjectMissingCallableMethodException(InvalidArgumentException):
    """Raised when ``attempt`` receives an object without ``__call__`` or ``handle``."""

    @classmethod
    def create(cls) -> ObjectMissingCallableMethodException:
        return cls("Object must have __call__ or handle method")


__all__ = [
    "ThrowException",
    "LogicException",
    "BadFunctionCallException",
    "BadMethodCallException",
    "DomainException",
    "InvalidArgumentException",
    "LengthException",
    "OutOfRangeException",
    "RuntimeException",
    "OutOfBoundsException",
    "RangeException",
    "UnderflowException",
    "UnexpectedValueException",
    "InvalidCallableException",
    "ClassMissingCallableMethodException",
    "ObjectMissingCallableMethodException",
]
