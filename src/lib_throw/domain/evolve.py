"""Copy-on-write cloning shared by every error builder method.

Purpose
-------
Error instances may be caught, stored, and re-raised by several holders at
once. Builder methods (``with_context``, ``wrap``, ``map_message``...) must
therefore never mutate the receiver; they return an evolved copy instead.

Contents
--------
* :class:`Evolvable` – mixin exposing :meth:`Evolvable._evolve`.

System Role
-----------
Inherited by every concern in :mod:`lib_throw.domain` so the clone rules live
in exactly one place.
"""

from __future__ import annotations

from typing import Any, Self


class Evolvable:
    """Provide :meth:`_evolve`, the single copy-on-write primitive.

    Why
    ----
    Exception constructors of subclasses take arbitrary arguments, so cloning
    through ``type(self)(...)`` is not reliable. Allocating through
    ``__new__`` and copying the instance dictionary works for every subclass.

    What
    ----
    Copies ``args``, the instance ``__dict__``, the explicit cause and the
    implicit context. ``__traceback__`` is deliberately left empty: the clone
    has not been raised yet.
    """

    def _evolve(self, *, args: tuple[Any, ...] | None = None, **changes: Any) -> Self:
        """Return a clone of ``self`` with ``changes`` applied to its attributes."""

        source: BaseException = self  # type: ignore[assignment]
        new_args = source.args if args is None else args
        clone = type(source).__new__(type(source), *new_args)
        clone.args = new_args
        clone.__dict__.update(source.__dict__)
        notes = source.__dict__.get("__notes__")
        if notes is not None:
            clone.__notes__ = list(notes)
        clone.__dict__.update(changes)
        clone.__cause__ = source.__cause__
        clone.__context__ = source.__context__
        clone.__suppress_context__ = source.__suppress_context__
        return clone  # type: ignore[return-value]
