"""Cleanup callbacks that run only when an operation fails.

Purpose
-------
Multi-step operations acquire resources one after another (temp files, locks,
reservations). On failure the steps done so far must be undone in reverse
order; on success nothing is rolled back.

Contents
--------
* :class:`DeferredCleanup` – LIFO stack of error-only cleanup callbacks.

System Role
-----------
Created by :func:`lib_throw.core.errdefer`. Usable either through
:meth:`DeferredCleanup.run` or as a context manager; the error is always
re-raised after cleanup.
"""

from __future__ import annotations

from types import TracebackType
from typing import Callable, TypeVar

T = TypeVar("T")


class DeferredCleanup:
    """Collect callbacks and run them newest first when the guarded work fails.

    Examples
    --------
    >>> steps = []
    >>> try:
    ...     with DeferredCleanup() as cleanup:
    ...         cleanup.on_error(lambda: steps.append("release lock"))
    ...         cleanup.on_error(lambda: steps.append("delete temp file"))
    ...         raise OSError("disk full")
    ... except OSError:
    ...     pass
    >>> steps
    ['delete temp file', 'release lock']
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], object]] = []
        self._cleaned = False

    def on_error(self, callback: Callable[[], object]) -> DeferredCleanup:
        """Register ``callback``; returns ``self`` for chaining."""

        self._callbacks.append(callback)
        return self

    @property
    def cleaned(self) -> bool:
        return self._cleaned

    @property
    def pending(self) -> int:
        return 0 if self._cleaned else len(self._callbacks)

    def cleanup(self) -> None:
        """Run every registered callback in reverse order, at most once."""

        if self._cleaned:
            return
        self._cleaned = True
        for callback in reversed(self._callbacks):
            callback()

    def run(self, work: Callable[[], T]) -> T:
        """Return ``work()``; on failure run :meth:`cleanup` and re-raise."""

        try:
            return work()
        except BaseException:
            self.cleanup()
            raise

    def __enter__(self) -> DeferredCleanup:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is not None:
            self.cleanup()


__all__ = ["DeferredCleanup"]
