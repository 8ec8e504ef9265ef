"""Structural contracts recognised by ``attempt``.

Purpose
-------
Describe the shapes of a "unit of work" that :func:`lib_throw.core.attempt`
accepts without requiring callers to inherit from a library base class.

Contents
--------
* :class:`Invokable` – objects exposing ``__call__``.
* :class:`Handler` – objects exposing a ``handle`` method (command/job style).

System Role
-----------
Both protocols are ``runtime_checkable`` so the application layer can decide
how to execute a value with ``isinstance`` instead of ``hasattr`` chains.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Invokable(Protocol):
    """A unit of work invoked directly, e.g. ``work()``."""

    def __call__(self) -> Any:
        """Run the work and return its result."""


@runtime_checkable
class Handler(Protocol):
    """A unit of work invoked through ``handle``, e.g. queued jobs or commands."""

    def handle(self) -> Any:
        """Run the work and return its result."""


__all__ = ["Handler", "Invokable"]
