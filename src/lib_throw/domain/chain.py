"""Cause-chain traversal.

Purpose
-------
Locate root causes or specific kinds buried under several layers of wrapping.

Contents
--------
* :func:`iter_chain` – yield an error and its causes, newest first.
* :func:`error_is` / :func:`error_as` – module-level lookups usable on any
  exception, including ones outside the taxonomy.
* :class:`FiltersExceptions` – the same lookups as methods on every error.

System Role
-----------
Only explicit causes (``__cause__``, set by ``wrap`` or ``raise ... from``)
form the chain. Implicit ``__context__`` links are ignored.
"""

from __future__ import annotations

from typing import Callable, Iterator, TypeVar

E = TypeVar("E", bound=BaseException)
Kind = type[BaseException] | tuple[type[BaseException], ...]


def iter_chain(error: BaseException) -> Iterator[BaseException]:
    """Yield ``error`` followed by each wrapped cause down to the root."""

    current: BaseException | None = error
    while current is not None:
        yield current
        current = current.__cause__


def error_is(error: BaseException, kind: Kind) -> bool:
    """Return ``True`` when any error in the chain is an instance of ``kind``.

    Examples
    --------
    >>> outer = RuntimeError("outer")
    >>> outer.__cause__ = KeyError("inner")
    >>> error_is(outer, LookupError), error_is(outer, OSError)
    (True, False)
    """

    return any(isinstance(link, kind) for link in iter_chain(error))


def error_as(error: BaseException, kind: type[E]) -> E | None:
    """Return the first error in the chain that is an instance of ``kind``."""

    for link in iter_chain(error):
        if isinstance(link, kind):
            return link
    return None


class FiltersExceptions:
    """Chain lookups available on every error kind.

    Examples
    --------
    >>> from lib_throw.exceptions import ApiException, TimeoutException
    >>> root = TimeoutError("read timed out")
    >>> error = ApiException("api failed").wrap(TimeoutException("upstream slow").wrap(root))
    >>> [type(link).__name__ for link in error.chain()]
    ['ApiException', 'TimeoutException', 'TimeoutError']
    >>> error.root_cause() is root, error.chain_depth()
    (True, 3)
    """

    def chain(self) -> list[BaseException]:
        """Return this error and every cause, newest first."""

        return list(iter_chain(self))  # type: ignore[arg-type]

    def find_first(self, kind: type[E]) -> E | None:
        return error_as(self, kind)  # type: ignore[arg-type]

    def find_all(self, kind: Kind) -> list[BaseException]:
        """Return every error in the chain matching ``kind``, newest first."""

        return [link for link in iter_chain(self) if isinstance(link, kind)]  # type: ignore[arg-type]

    def filter_chain(self, predicate: Callable[[BaseException], bool]) -> list[BaseException]:
        return [link for link in iter_chain(self) if predicate(link)]  # type: ignore[arg-type]

    def has_in_chain(self, kind: Kind) -> bool:
        return error_is(self, kind)  # type: ignore[arg-type]

    def root_cause(self) -> BaseException:
        """Return the deepest wrapped cause (``self`` when nothing is wrapped)."""

        *_, root = iter_chain(self)  # type: ignore[arg-type]
        return root

    def chain_depth(self) -> int:
        return sum(1 for _ in iter_chain(self))  # type: ignore[arg-type]
