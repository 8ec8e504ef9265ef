"""Testing diagnostics that keep failure scenarios observable and predictable.

Purpose
    Provide an intentionally failing helper that exercises error-handling paths
    in the CLI and integration suites without relying on brittle fixtures.

Contents
    - ``FAILURE_MESSAGE``: stable message used when forcing a failure.
    - ``i_should_fail``: raises a taxonomy ``RuntimeException`` carrying context
      so callers can assert on the propagated error details.

System Integration
    Backs the ``fail`` CLI command used by the end-to-end suite to check
    traceback handling and exit codes.
"""

from __future__ import annotations

from typing import Final

from .domain.errors import RuntimeException

FAILURE_MESSAGE: Final[str] = "i should fail"
"""Stable message emitted when ``i_should_fail`` triggers a failure sequence."""


def i_should_fail() -> None:
    """Raise a deterministic :class:`RuntimeException` for failure-path testing.

    Why
        Validates that higher-level orchestrators preserve stack traces and
        messages when surfacing library errors to end users.
    What
        Always raises :class:`~lib_throw.domain.errors.RuntimeException` with
        :data:`FAILURE_MESSAGE` and ``{"source": "i_should_fail"}`` context.

    Examples
    --------
    >>> i_should_fail()
    Traceback (most recent call last):
    ...
    lib_throw.domain.errors.RuntimeException: i should fail
    """

    raise RuntimeException(FAILURE_MESSAGE, context={"source": "i_should_fail"})
