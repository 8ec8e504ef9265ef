"""Shared fixtures for the lib_throw test-suite.

Provides application-style error kinds (one per layer of a typical service)
and the unit-of-work shapes accepted by ``attempt``, so individual tests can
focus on behaviour instead of boilerplate classes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from lib_throw.exceptions import BalanceException, InfrastructureException, RuntimeException, ValidationException


class DomainFixtureException(RuntimeException):
    """Business rule violation raised by fixture services."""

    @classmethod
    def insufficient_funds(cls, balance: int, requested: int) -> DomainFixtureException:
        return cls(f"Insufficient funds: balance {balance}, requested {requested}").with_context(
            balance=balance, requested=requested
        )


class ValidationFixtureException(ValidationException):
    """Input validation failure raised by fixture services."""

    @classmethod
    def required(cls, field_name: str) -> ValidationFixtureException:
        return cls(f"{field_name} is required").with_context(field=field_name)


class InfrastructureFixtureException(InfrastructureException):
    """Backend failure raised by fixture adapters."""


class InsufficientBalanceException(BalanceException):
    """Balance too low for the requested purchase."""


class InvokableJob:
    """Unit of work exposing ``__call__``."""

    def __call__(self) -> str:
        return "invoked"


class HandlerJob:
    """Unit of work exposing ``handle``."""

    def handle(self) -> str:
        return "handled"


class BothMethodsJob:
    """``__call__`` must win over ``handle``."""

    def __call__(self) -> str:
        return "invoked"

    def handle(self) -> str:
        return "handled"


class FailingJob:
    def handle(self) -> None:
        raise InfrastructureFixtureException("backend unavailable")


class PlainObject:
    """Neither ``__call__`` nor ``handle``."""


@dataclass
class CallCounter:
    """Callable that records how often it ran and returns a fixed value."""

    value: Any = True
    calls: int = 0
    seen: list[Any] = field(default_factory=list)

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        self.seen.extend(args)
        return self.value


@dataclass
class AbortRecorder:
    """Abort handler that records ``(status, message)`` then raises ``StopAbort``."""

    calls: list[tuple[int, str]] = field(default_factory=list)

    def __call__(self, status_code: int, message: str) -> Any:
        self.calls.append((status_code, message))
        raise StopAbort(status_code, message)


class StopAbort(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(status_code, message)
        self.status_code = status_code
        self.message = message
