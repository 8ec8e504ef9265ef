"""Functional transforms over error state.

Purpose
-------
Normalise or enrich an error while it crosses layers: prefix the message,
strip secrets from the context, attach notes.

Contents
--------
* :class:`TransformsErrors` – ``map_*`` builders, ``with_note``, ``transform``.

System Role
-----------
Every transform is copy-on-write. Notes use the standard PEP 678
``__notes__`` list so they show up in tracebacks.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Self

from .evolve import Evolvable


class TransformsErrors(Evolvable):
    """Apply callables to the message, context, metadata, tags, or notes.

    Examples
    --------
    >>> from lib_throw.exceptions import PaymentException
    >>> error = PaymentException("declined").with_context(card="4242", user=1)
    >>> cleaned = error.map_message(lambda msg: f"Payment error: {msg}").map_context(
    ...     lambda ctx: {k: v for k, v in ctx.items() if k != "card"}
    ... )
    >>> str(cleaned), dict(cleaned.context)
    ('Payment error: declined', {'user': 1})
    """

    def map_message(self, callback: Callable[[str], str]) -> Self:
        """Return a copy whose message is ``callback(message)``."""

        args: tuple[Any, ...] = self.args  # type: ignore[attr-defined]
        current = str(args[0]) if args else ""
        return self._evolve(args=(callback(current), *args[1:]))

    def map_context(self, callback: Callable[[Mapping[str, Any]], Mapping[str, Any]]) -> Self:
        return self._evolve(_context=dict(callback(dict(self.context))))  # type: ignore[attr-defined]

    def map_metadata(self, callback: Callable[[Mapping[str, Any]], Mapping[str, Any]]) -> Self:
        return self._evolve(_metadata=dict(callback(dict(self.metadata))))  # type: ignore[attr-defined]

    def map_tags(self, callback: Callable[[tuple[str, ...]], Any]) -> Self:
        return self._evolve(_tags=tuple(callback(self.tags)))  # type: ignore[attr-defined]

    def with_note(self, note: str) -> Self:
        """Return a copy with ``note`` appended to ``__notes__``."""

        return self._evolve(__notes__=[*self.notes, note])

    def map_notes(self, callback: Callable[[list[str]], Any]) -> Self:
        return self._evolve(__notes__=list(callback(list(self.notes))))

    @property
    def notes(self) -> list[str]:
        """Copy of the PEP 678 notes attached to this error."""

        return list(getattr(self, "__notes__", ()))

    def transform(self, callback: Callable[[Self], Self]) -> Self:
        """Return ``callback(self)``, grouping several transforms in one step.

        ``callback`` receives this error and must return the transformed
        error, typically built by chaining the other builders.
        """

        return callback(self)
