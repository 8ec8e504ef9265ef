"""Unit tests for guard clauses on errors and the abort extension point."""

from __future__ import annotations

from http import HTTPStatus

import pytest

from lib_throw.domain.abort import HttpAbort, abort, set_abort_handler, use_abort_handler
from lib_throw.exceptions import ForbiddenException, UnauthorizedException
from tests.support import AbortRecorder, CallCounter, StopAbort


def test_throw_if_raises_when_condition_holds() -> None:
    with pytest.raises(ForbiddenException, match="admins only"):
        ForbiddenException("admins only").throw_if(True)


def test_throw_if_is_silent_when_condition_fails() -> None:
    assert ForbiddenException("admins only").throw_if(False) is None


def test_throw_unless_is_the_inverse() -> None:
    ForbiddenException("admins only").throw_unless(True)
    with pytest.raises(ForbiddenException):
        ForbiddenException("admins only").throw_unless(0)


def test_callable_condition_runs_exactly_once() -> None:
    condition = CallCounter(value=False)
    ForbiddenException("x").throw_if(condition)
    assert condition.calls == 1
    with pytest.raises(ForbiddenException):
        ForbiddenException("x").throw_unless(condition)
    assert condition.calls == 2


def test_raised_error_keeps_its_context() -> None:
    with pytest.raises(ForbiddenException) as caught:
        ForbiddenException("admins only").with_context(role="guest").throw_if(True)
    assert dict(caught.value.context) == {"role": "guest"}


def test_abort_if_defaults_to_internal_server_error() -> None:
    with pytest.raises(HttpAbort) as caught:
        ForbiddenException("boom").abort_if(True)
    assert caught.value.status_code == 500
    assert caught.value.message == "boom"


def test_abort_unless_uses_given_status() -> None:
    with pytest.raises(HttpAbort) as caught:
        UnauthorizedException("login required").abort_unless(lambda: False, HTTPStatus.UNAUTHORIZED)
    assert caught.value.status_code == 401
    assert caught.value.phrase == "Unauthorized"


def test_abort_is_silent_when_guard_passes() -> None:
    ForbiddenException("boom").abort_if(False)
    ForbiddenException("boom").abort_unless(True)


def test_custom_handler_is_scoped_to_the_with_block() -> None:
    recorder = AbortRecorder()
    with use_abort_handler(recorder):
        with pytest.raises(StopAbort):
            abort(404, "missing")
    assert recorder.calls == [(404, "missing")]
    with pytest.raises(HttpAbort):
        abort(404, "missing")


def test_handler_that_returns_still_terminates() -> None:
    seen: list[int] = []

    def _lenient(status_code: int, message: str) -> None:
        seen.append(status_code)

    with use_abort_handler(_lenient):  # type: ignore[arg-type]
        with pytest.raises(HttpAbort):
            abort(HTTPStatus.CONFLICT)
    assert seen == [409]


def test_set_abort_handler_none_restores_default() -> None:
    recorder = AbortRecorder()
    set_abort_handler(recorder)
    try:
        with pytest.raises(StopAbort):
            abort(418, "teapot")
    finally:
        set_abort_handler(None)
    with pytest.raises(HttpAbort) as caught:
        abort(418)
    assert str(caught.value) == "I'm a Teapot"


def test_unknown_status_has_empty_phrase() -> None:
    assert HttpAbort(599).phrase == ""
