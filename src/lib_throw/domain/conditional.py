"""Guard clauses expressed on the error itself.

Purpose
-------
Replace ``if ...: raise ...`` blocks with fluent one-liners such as
``MissingTokenException("no token").throw_if(token is None)``.

Contents
--------
* :data:`Condition` – accepted condition shapes.
* :func:`resolve_condition` – evaluate a condition exactly once.
* :class:`ConditionallyThrowable` – ``throw_if`` / ``throw_unless`` /
  ``abort_if`` / ``abort_unless``.

System Role
-----------
:func:`resolve_condition` is shared with :func:`lib_throw.core.ensure` so both
guard idioms accept the same inputs.
"""

from __future__ import annotations

from http import HTTPStatus
from typing import Callable, Union

from .abort import abort

Condition = Union[bool, object, Callable[[], object]]
"""A truthy value, or a zero-argument callable producing one."""


def resolve_condition(condition: Condition) -> bool:
    """Return the boolean value of ``condition``, calling it once if callable.

    Examples
    --------
    >>> resolve_condition(True), resolve_condition(lambda: 0)
    (True, False)
    """

    if callable(condition):
        return bool(condition())
    return bool(condition)


class ConditionallyThrowable:
    """Raise or abort with this error depending on a condition.

    Examples
    --------
    >>> from lib_throw.exceptions import ForbiddenException
    >>> ForbiddenException("admins only").throw_unless(lambda: True)
    >>> try:
    ...     ForbiddenException("admins only").throw_if(True)
    ... except ForbiddenException as error:
    ...     print(error)
    admins only
    """

    def throw_if(self, condition: Condition) -> None:
        """Raise this error when ``condition`` is truthy."""

        if resolve_condition(condition):
            raise self  # type: ignore[misc]

    def throw_unless(self, condition: Condition) -> None:
        """Raise this error when ``condition`` is falsy."""

        if not resolve_condition(condition):
            raise self  # type: ignore[misc]

    def abort_if(self, condition: Condition, status: int | HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR) -> None:
        """Abort with ``status`` and this error's message when ``condition`` is truthy."""

        if resolve_condition(condition):
            abort(status, str(self))

    def abort_unless(self, condition: Condition, status: int | HTTPStatus = HTTPStatus.INTERNAL_SERVER_ERROR) -> None:
        """Abort with ``status`` and this error's message when ``condition`` is falsy."""

        if not resolve_condition(condition):
            abort(status, str(self))
