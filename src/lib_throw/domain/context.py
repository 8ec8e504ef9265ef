"""Structured context attached to error instances.

Purpose
-------
Let handlers and log processors read machine-readable diagnostic fields from
an error without parsing its message.

Contents
--------
* :class:`HasErrorContext` – ``with_context`` / ``with_tags`` /
  ``with_metadata`` builders and the matching read-only accessors.

System Role
-----------
Mixed into :class:`lib_throw.domain.errors.ThrowException`, hence available on
every error kind. Builders are copy-on-write (see
:mod:`lib_throw.domain.evolve`).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterable, Mapping, Self

from .evolve import Evolvable


def _merge(current: Mapping[str, Any], incoming: Mapping[str, Any] | None, fields: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``incoming`` then ``fields`` over ``current``; later keys win."""

    merged = dict(current)
    if incoming:
        merged.update(incoming)
    merged.update(fields)
    return merged


class HasErrorContext(Evolvable):
    """Context, tags, and metadata bags for an error.

    Context describes the circumstances of the failure (``user_id``,
    ``amount``), tags categorise it (``"critical"``, ``"payment"``), and
    metadata carries verbose debugging detail (request bodies, SQL).

    Examples
    --------
    >>> from lib_throw.exceptions import PaymentException
    >>> error = PaymentException("card declined").with_context(user_id=7)
    >>> dict(error.with_context({"user_id": 8, "amount": 10}).context)
    {'user_id': 8, 'amount': 10}
    >>> dict(error.context)
    {'user_id': 7}
    """

    # Plain dicts so errors stay picklable. Never mutated in place; builders
    # always store a fresh dict.
    _context: dict[str, Any] = {}
    _tags: tuple[str, ...] = ()
    _metadata: dict[str, Any] = {}

    def with_context(self, context: Mapping[str, Any] | None = None, /, **fields: Any) -> Self:
        """Return a copy with ``context`` and ``fields`` merged into the context."""

        return self._evolve(_context=_merge(self._context, context, fields))

    def with_tags(self, tags: Iterable[str]) -> Self:
        """Return a copy with ``tags`` appended, preserving order."""

        return self._evolve(_tags=(*self._tags, *tags))

    def with_metadata(self, metadata: Mapping[str, Any] | None = None, /, **fields: Any) -> Self:
        """Return a copy with ``metadata`` and ``fields`` merged into the metadata."""

        return self._evolve(_metadata=_merge(self._metadata, metadata, fields))

    @property
    def context(self) -> Mapping[str, Any]:
        """Read-only view of the attached context (empty when none was set)."""

        return MappingProxyType(self._context)

    @property
    def tags(self) -> tuple[str, ...]:
        return self._tags

    @property
    def metadata(self) -> Mapping[str, Any]:
        return MappingProxyType(self._metadata)
