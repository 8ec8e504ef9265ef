"""Wrapping lower-level errors inside domain errors.

Purpose
-------
Translate an infrastructure failure (``sqlite3.OperationalError``,
``httpx.ConnectError``...) into a domain kind without losing the original for
diagnostics.

Contents
--------
* :class:`WrapsErrors` – ``wrap`` builder plus ``wrapped`` / ``has_wrapped``.

System Role
-----------
The wrapped error is stored in the standard ``__cause__`` slot, so
``wrap`` and ``raise ... from ...`` are interchangeable and tracebacks print
"The above exception was the direct cause of the following exception".
"""

from __future__ import annotations

from typing import Self

from .evolve import Evolvable


class WrapsErrors(Evolvable):
    """Attach a single predecessor error.

    Calling :meth:`wrap` twice replaces the cause on the returned copy; the
    receiver keeps whatever cause it had.

    Examples
    --------
    >>> from lib_throw.exceptions import CacheException
    >>> original = ConnectionError("redis down")
    >>> error = CacheException("cache unavailable").wrap(original)
    >>> error.wrapped is original, error.has_wrapped()
    (True, True)
    >>> CacheException("cold").wrapped is None
    True
    """

    def wrap(self, error: BaseException) -> Self:
        """Return a copy of this error whose cause is ``error``."""

        clone = self._evolve()
        clone.__cause__ = error  # type: ignore[attr-defined]
        return clone

    @property
    def wrapped(self) -> BaseException | None:
        """The wrapped predecessor, or ``None``."""

        return self.__cause__  # type: ignore[attr-defined]

    def has_wrapped(self) -> bool:
        return self.wrapped is not None
