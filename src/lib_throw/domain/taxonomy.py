"""Introspection over the error taxonomy.

Purpose
-------
Answer structural questions about the kind tree: which kind is the parent of
another, what sits below a category, and how the whole tree looks.

Contents
--------
* :func:`kinds` – every library kind under a root, depth first.
* :func:`resolve_kind` – look a kind up by its class name.
* :func:`parent_of` / :func:`lineage` / :func:`children` – tree navigation.
* :func:`summary` / :func:`builtin_bases` – descriptive data used by the CLI.
* :func:`render_tree` – indented text rendering.

System Role
-----------
The tree is the Python class hierarchy itself; nothing is registered by hand.
Only classes defined inside ``lib_throw`` count as kinds, so application
subclasses never shadow library names during lookups.
"""

from __future__ import annotations

from typing import Iterator

from . import catalog as _catalog  # noqa: F401
from . import group as _group  # noqa: F401
from .errors import OutOfBoundsException, ThrowException

_PACKAGE = "lib_throw"
_HIDDEN_BUILTINS = (object, BaseException, Exception)


def _is_library_kind(kind: type) -> bool:
    return kind.__module__.split(".", 1)[0] == _PACKAGE


def children(kind: type[ThrowException]) -> list[type[ThrowException]]:
    """Return the library kinds whose parent is ``kind``, sorted by name.

    Examples
    --------
    >>> from lib_throw.domain.errors import LogicException
    >>> [child.__name__ for child in children(LogicException)][:3]
    ['BadFunctionCallException', 'DomainException', 'InvalidArgumentException']
    """

    found = {
        sub
        for sub in kind.__subclasses__()
        if _is_library_kind(sub) and parent_of(sub) is kind
    }
    return sorted(found, key=lambda sub: sub.__name__)


def _walk(kind: type[ThrowException], depth: int) -> Iterator[tuple[int, type[ThrowException]]]:
    yield depth, kind
    for child in children(kind):
        yield from _walk(child, depth + 1)


def kinds(root: type[ThrowException] = ThrowException) -> list[type[ThrowException]]:
    """Return ``root`` and every library kind below it, depth first."""

    return [kind for _, kind in _walk(root, 0)]


def resolve_kind(name: str) -> type[ThrowException]:
    """Return the library kind called ``name``.

    Raises
    ------
    OutOfBoundsException
        When no library kind has that name.

    Examples
    --------
    >>> resolve_kind("CacheException").__name__
    'CacheException'
    >>> resolve_kind("NoSuchException")
    Traceback (most recent call last):
    ...
    lib_throw.domain.errors.OutOfBoundsException: Unknown error kind 'NoSuchException'
    """

    for kind in kinds():
        if kind.__name__ == name:
            return kind
    raise OutOfBoundsException(f"Unknown error kind {name!r}").with_context(kind=name)


def parent_of(kind: type[ThrowException]) -> type[ThrowException] | None:
    """Return the taxonomy parent of ``kind`` (``None`` for the root).

    Builtin bridge bases such as ``ValueError`` are not part of the taxonomy
    and are skipped.
    """

    if kind is ThrowException:
        return None
    for base in kind.__bases__:
        if isinstance(base, type) and issubclass(base, ThrowException):
            return base
    return None


def lineage(kind: type[ThrowException]) -> list[type[ThrowException]]:
    """Return ``kind`` followed by its ancestors up to :class:`ThrowException`.

    Examples
    --------
    >>> [k.__name__ for k in lineage(resolve_kind("BadMethodCallException"))]
    ['BadMethodCallException', 'BadFunctionCallException', 'LogicException', 'ThrowException']
    """

    chain: list[type[ThrowException]] = []
    current: type[ThrowException] | None = kind
    while current is not None:
        chain.append(current)
        current = parent_of(current)
    return chain


def summary(kind: type[ThrowException]) -> str:
    """First line of the kind's docstring, or an empty string."""

    doc = kind.__doc__ or ""
    return doc.strip().splitlines()[0] if doc.strip() else ""


def builtin_bases(kind: type[ThrowException]) -> list[str]:
    """Names of the builtin exception types ``kind`` also is an instance of."""

    return [
        base.__name__
        for base in kind.__mro__
        if base.__module__ == "builtins" and base not in _HIDDEN_BUILTINS
    ]


def render_tree(root: type[ThrowException] = ThrowException, indent: str = "  ") -> str:
    """Render ``root`` and its descendants as an indented outline.

    Examples
    --------
    >>> from lib_throw.domain.errors import BadFunctionCallException
    >>> print(render_tree(BadFunctionCallException))
    BadFunctionCallException
      BadMethodCallException
    """

    return "\n".join(f"{indent * depth}{kind.__name__}" for depth, kind in _walk(root, 0))


__all__ = [
    "builtin_bases",
    "children",
    "kinds",
    "lineage",
    "parent_of",
    "render_tree",
    "resolve_kind",
    "summary",
]
