"""Public import path for every error kind.

Purpose
-------
Let applications write ``from lib_throw.exceptions import CacheException``
without knowing which internal module declares a kind.

Contents
--------
* The marker root, the base kinds, and the callable resolution errors from
  :mod:`lib_throw.domain.errors`.
* Every kind of the long-tail taxonomy from :mod:`lib_throw.domain.catalog`.
* :class:`~lib_throw.domain.group.ExceptionGroup`.

System Role
-----------
Pure re-export layer; nothing is defined here.
"""

from __future__ import annotations

from .domain import catalog as _catalog
from .domain import errors as _errors
from .domain.catalog import *  # noqa: F401,F403
from .domain.errors import *  # noqa: F401,F403
from .domain.group import ExceptionGroup

__all__ = [*_errors.__all__, *_catalog.__all__, "ExceptionGroup"]
