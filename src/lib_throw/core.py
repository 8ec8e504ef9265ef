"""Composition root for ``lib_throw``.

Purpose
-------
Provide the function-style entry points that combine the domain taxonomy, the
application use cases, and structured observability.

Contents
--------
* :func:`ensure` – evaluate a guard condition into an :class:`Assertion`.
* :func:`attempt` – run a unit of work into an :class:`Attempt`.
* :func:`raise_group` – raise collected errors as one :class:`ExceptionGroup`.
* :func:`errdefer` – create a :class:`DeferredCleanup` stack.

System Role
-----------
The only module that emits log records. Events are ``debug`` level so a host
that attaches a handler to the ``lib_throw`` logger sees failures the library
observed without the library deciding how they are reported.
"""

from __future__ import annotations

from typing import Any, Iterable

from .application.assertion import Assertion
from .application.attempt import Attempt
from .application.cleanup import DeferredCleanup
from .domain.conditional import Condition, resolve_condition
from .domain.group import DEFAULT_GROUP_MESSAGE, ExceptionGroup
from .observability import debug_enabled, log_debug, make_event


def ensure(condition: Condition) -> Assertion:
    """Evaluate ``condition`` once and return the outcome.

    Why
        Guard clauses read left to right: the condition first, the reaction
        (``or_throw`` / ``or_abort``) second.
    Inputs
        condition: A truthy value or a zero-argument callable producing one.
            The callable runs exactly once, synchronously.

    Examples
    --------
    >>> from lib_throw.exceptions import ValidationException
    >>> ensure(lambda: 2 > 1).or_throw(ValidationException, "never raised")
    >>> ensure(False).passed
    False
    """

    passed = resolve_condition(condition)
    if not passed:
        log_debug("assertion_failed")
    return Assertion(passed)


def attempt(work: Any) -> Attempt[Any]:
    """Run ``work`` and capture its outcome.

    ``work`` may be a function, an object with ``__call__`` or ``handle``, or a
    class whose instances have one of them. Resolution errors
    (:class:`~lib_throw.domain.errors.InvalidCallableException` and friends)
    propagate; everything ``work`` raises that derives from :class:`Exception`
    is captured.

    Examples
    --------
    >>> attempt(lambda: 1 / 0).get_or_else(0)
    0
    >>> attempt(lambda: "ok")
    Success('ok')
    """

    outcome = Attempt.of(work)
    if outcome.error is not None and debug_enabled():
        log_debug("attempt_failed", **make_event(outcome.error))
    return outcome


def raise_group(exceptions: Iterable[BaseException], message: str = DEFAULT_GROUP_MESSAGE) -> None:
    """Raise ``exceptions`` as one :class:`ExceptionGroup`; do nothing when empty.

    Examples
    --------
    >>> raise_group([])
    >>> raise_group([ValueError("a"), KeyError("b")], "2 problems")
    Traceback (most recent call last):
    ...
    lib_throw.domain.group.ExceptionGroup: 2 problems
      [1] ValueError: a
      [2] KeyError: 'b'
    """

    collected = list(exceptions)
    if not collected:
        return
    group = ExceptionGroup.from_exceptions(collected, message)
    if debug_enabled():
        log_debug(
            "exception_group_raised",
            **make_event(group, {"count": group.count(), "kinds": [type(error).__name__ for error in group]}),
        )
    raise group


def errdefer() -> DeferredCleanup:
    """Return an empty cleanup stack that runs only on failure.

    Examples
    --------
    >>> cleanup = errdefer()
    >>> cleanup.on_error(lambda: print("rolled back")).run(lambda: "committed")
    'committed'
    >>> cleanup.cleaned
    False
    """

    return DeferredCleanup()


__all__ = ["attempt", "ensure", "errdefer", "raise_group"]
