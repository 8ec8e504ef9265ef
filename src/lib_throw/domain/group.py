"""Aggregate several independent failures into one error.

Purpose
-------
Batch validation and multi-step operations collect every failure before
reporting instead of stopping at the first one. :class:`ExceptionGroup`
carries that list as a single throwable value.

Contents
--------
* :data:`DEFAULT_GROUP_MESSAGE` – message used by :meth:`ExceptionGroup.from_exceptions`.
* :class:`ExceptionGroup` – ordered, immutable collection of member errors.

System Role
-----------
The group is itself a :class:`lib_throw.domain.errors.RuntimeException`, so it
carries context, wrapping, and chain lookups like any other kind. Interop with
``except*`` goes through :meth:`ExceptionGroup.as_exception_group`.
"""

from __future__ import annotations

import builtins
from typing import Any, Final, Iterable, Iterator

from .chain import Kind
from .errors import LengthException, RuntimeException, ThrowException

DEFAULT_GROUP_MESSAGE: Final[str] = "Multiple exceptions occurred"


class ExceptionGroup(RuntimeException):
    """Ordered list of member errors plus a summary message.

    Why
    ----
    Lets a form validator report all invalid fields at once and lets callers
    branch on the kinds present without unpacking the list themselves.

    What
    ----
    Members are stored as a tuple in insertion order and never change after
    construction. :meth:`filter` and :meth:`has` use ``isinstance`` semantics,
    so asking for a parent kind also matches its subkinds.

    Parameters
    ----------
    message:
        Summary shown on the first line of :meth:`format`.
    exceptions:
        Member errors; any ``BaseException`` is accepted.

    Examples
    --------
    >>> from lib_throw.exceptions import ValidationException, UnauthorizedException
    >>> group = ExceptionGroup.from_exceptions([
    ...     ValidationException("Invalid email"),
    ...     UnauthorizedException("Invalid password"),
    ... ])
    >>> group.count(), group.has(ValidationException)
    (2, True)
    >>> print(group.format())
    Multiple exceptions occurred
      [1] ValidationException: Invalid email
      [2] UnauthorizedException: Invalid password
    """

    def __init__(
        self,
        message: str = DEFAULT_GROUP_MESSAGE,
        exceptions: Iterable[BaseException] = (),
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self._exceptions: tuple[BaseException, ...] = tuple(exceptions)

    @classmethod
    def from_exceptions(
        cls,
        exceptions: Iterable[BaseException],
        message: str = DEFAULT_GROUP_MESSAGE,
    ) -> ExceptionGroup:
        """Build a group from ``exceptions``, keeping their order."""

        return cls(message, exceptions)

    @property
    def exceptions(self) -> tuple[BaseException, ...]:
        return self._exceptions

    def filter(self, kind: Kind) -> list[BaseException]:
        """Return the members that are instances of ``kind``, in order."""

        return [error for error in self._exceptions if isinstance(error, kind)]

    def has(self, kind: Kind) -> bool:
        return any(isinstance(error, kind) for error in self._exceptions)

    def count(self) -> int:
        return len(self._exceptions)

    def is_empty(self) -> bool:
        return not self._exceptions

    def format(self) -> str:
        """Render the message followed by one ``[n] Kind: message`` line per member.

        Library members contribute their own message only, so a nested group
        stays on a single line.
        """

        lines = [self.message]
        lines.extend(
            f"  [{index}] {type(error).__name__}: {_member_message(error)}"
            for index, error in enumerate(self._exceptions, start=1)
        )
        return "\n".join(lines)

    def as_exception_group(self) -> builtins.BaseExceptionGroup:
        """Convert to the builtin group so callers can use ``except*``.

        The builtin type cannot be empty, so an empty group raises
        :class:`LengthException`.

        Examples
        --------
        >>> from lib_throw.exceptions import ValidationException
        >>> group = ExceptionGroup("bad input", [ValidationException("name")])
        >>> try:
        ...     raise group.as_exception_group()
        ... except* ValidationException as caught:
        ...     print(len(caught.exceptions))
        1
        """

        if not self._exceptions:
            raise LengthException("Cannot convert an empty exception group").with_context(
                message=self.message
            )
        return builtins.BaseExceptionGroup(self.message, list(self._exceptions))

    def __len__(self) -> int:
        return len(self._exceptions)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._exceptions)

    def __bool__(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.format()


def _member_message(error: BaseException) -> str:
    if isinstance(error, ThrowException):
        return error.message
    return str(error)


__all__ = ["DEFAULT_GROUP_MESSAGE", "ExceptionGroup"]
