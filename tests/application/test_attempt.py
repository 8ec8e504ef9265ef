"""Tests for ``attempt`` and the Attempt outcome."""

from __future__ import annotations

from http import HTTPStatus

from hypothesis import given
from hypothesis import strategies as st

import pytest

from lib_throw import Attempt, HttpAbort, attempt, use_abort_handler
from lib_throw.domain.errors import (
    ClassMissingCallableMethodException,
    InvalidArgumentException,
    InvalidCallableException,
    ObjectMissingCallableMethodException,
    UnexpectedValueException,
)
from lib_throw.exceptions import ConfigurationException, NotFoundException
from tests.support import (
    AbortRecorder,
    BothMethodsJob,
    CallCounter,
    FailingJob,
    HandlerJob,
    InfrastructureFixtureException,
    InvokableJob,
    PlainObject,
    StopAbort,
)


def _fail() -> int:
    raise KeyError("missing")


# --- resolution -----------------------------------------------------------


@pytest.mark.parametrize(
    ("work", "expected"),
    [
        (lambda: "closure", "closure"),
        ("abc".upper, "ABC"),
        (InvokableJob(), "invoked"),
        (HandlerJob(), "handled"),
        (InvokableJob, "invoked"),
        (HandlerJob, "handled"),
        (BothMethodsJob, "invoked"),
        (BothMethodsJob(), "invoked"),
    ],
)
def test_accepted_work_shapes(work: object, expected: str) -> None:
    assert attempt(work).get() == expected


def test_class_without_methods_is_rejected() -> None:
    with pytest.raises(ClassMissingCallableMethodException, match="PlainObject must have __call__ or handle method"):
        attempt(PlainObject)


def test_object_without_methods_is_rejected() -> None:
    with pytest.raises(ObjectMissingCallableMethodException):
        attempt(PlainObject())


@pytest.mark.parametrize("work", [None, 42, "not a function", 3.5, [1, 2], {"a": 1}])
def test_plain_data_is_rejected(work: object) -> None:
    with pytest.raises(InvalidCallableException):
        attempt(work)


def test_resolution_errors_are_raised_not_captured() -> None:
    with pytest.raises(InvalidCallableException):
        Attempt.of(None)


def test_base_exceptions_propagate() -> None:
    def _interrupt() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        attempt(_interrupt)


# --- outcome accessors -------------------------------------------------------


def test_success_outcome() -> None:
    outcome = attempt(lambda: 42)
    assert outcome.is_success() and not outcome.is_failure()
    assert outcome.get() == 42
    assert outcome.error is None
    assert outcome.to_optional() == 42
    assert repr(outcome) == "Success(42)"


def test_success_may_hold_none() -> None:
    outcome = attempt(lambda: None)
    assert outcome.is_success()
    assert outcome.get() is None


def test_failure_outcome_keeps_the_original_error() -> None:
    outcome = attempt(FailingJob)
    assert outcome.is_failure()
    assert isinstance(outcome.error, InfrastructureFixtureException)
    with pytest.raises(InfrastructureFixtureException) as caught:
        outcome.get()
    assert caught.value is outcome.error
    assert outcome.to_optional() is None
    assert repr(outcome).startswith("Failure(InfrastructureFixtureException(")


def test_get_or_else_supplier_runs_only_on_failure() -> None:
    supplier = CallCounter(value="fallback")
    assert attempt(lambda: "value").get_or_else(supplier) == "value"
    assert supplier.calls == 0
    assert attempt(_fail).get_or_else(supplier) == "fallback"
    assert supplier.calls == 1


def test_get_or_else_plain_values() -> None:
    assert attempt(_fail).get_or_else([]) == []
    assert attempt(_fail).get_or_else(None) is None


# --- transforms --------------------------------------------------------------


def test_map_and_recover_skip_the_other_branch() -> None:
    mapper = CallCounter(value="mapped")
    rescuer = CallCounter(value="rescued")
    assert attempt(_fail).map(mapper).is_failure()
    assert mapper.calls == 0
    assert attempt(lambda: 1).recover(rescuer).get() == 1
    assert rescuer.calls == 0


def test_recover_receives_the_error() -> None:
    rescuer = CallCounter(value="rescued")
    assert attempt(_fail).recover(rescuer).get() == "rescued"
    assert isinstance(rescuer.seen[0], KeyError)


def test_raising_transform_becomes_failure() -> None:
    outcome = attempt(lambda: "abc").map(int)
    assert outcome.is_failure()
    assert isinstance(outcome.error, ValueError)


def test_flat_map_chains_attempts() -> None:
    outcome = attempt(lambda: "8").flat_map(lambda text: attempt(lambda: int(text) * 2))
    assert outcome.get() == 16
    assert attempt(lambda: "x").flat_map(lambda text: attempt(lambda: int(text))).is_failure()


def test_map_error_translates_the_failure() -> None:
    outcome = attempt(_fail).map_error(lambda error: NotFoundException(f"not found: {error}").wrap(error))
    assert isinstance(outcome.error, NotFoundException)
    assert isinstance(outcome.error.wrapped, KeyError)
    assert attempt(lambda: 1).map_error(lambda error: error).get() == 1


@pytest.mark.parametrize("replacement", [None, "not an error", 0])
def test_map_error_returning_a_non_error_stays_a_failure(replacement: object) -> None:
    outcome = attempt(_fail).map_error(lambda error: replacement)  # type: ignore[arg-type,return-value]
    assert outcome.is_failure()
    assert isinstance(outcome.error, UnexpectedValueException)
    assert isinstance(outcome.error.wrapped, KeyError)
    assert outcome.error.context["received"] == type(replacement).__name__


def test_failure_requires_an_error() -> None:
    with pytest.raises(InvalidArgumentException):
        Attempt.failure(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidArgumentException):
        Attempt(None, "boom")  # type: ignore[arg-type]


def test_outcome_cannot_hold_both_value_and_error() -> None:
    with pytest.raises(InvalidArgumentException):
        Attempt(5, KeyError("missing"))
    assert Attempt(None, KeyError("missing")).is_failure()
    assert Attempt(5).is_success()


def test_chained_pipeline() -> None:
    outcome = attempt(lambda: {"port": "8080"}).map(lambda env: env["port"]).map(int).map(lambda port: port + 1)
    assert outcome.get() == 8081


# --- or_throw / abort --------------------------------------------------------


def test_or_throw_returns_value_on_success() -> None:
    assert attempt(lambda: "ok").or_throw(ConfigurationException) == "ok"


def test_or_throw_class_uses_captured_message_and_chains() -> None:
    with pytest.raises(ConfigurationException) as caught:
        attempt(lambda: int("x")).or_throw(ConfigurationException)
    assert "invalid literal" in caught.value.message
    assert isinstance(caught.value.wrapped, ValueError)


def test_or_throw_custom_message() -> None:
    with pytest.raises(ConfigurationException, match="^port missing$"):
        attempt(_fail).or_throw(ConfigurationException, "port missing")


def test_or_throw_instance_is_raised_unchanged() -> None:
    prepared = ConfigurationException("prepared")
    with pytest.raises(ConfigurationException) as caught:
        attempt(_fail).or_throw(prepared)
    assert caught.value is prepared


def test_abort_uses_captured_message_by_default() -> None:
    recorder = AbortRecorder()
    with use_abort_handler(recorder), pytest.raises(StopAbort):
        attempt(lambda: int("x")).abort(HTTPStatus.BAD_REQUEST)
    status, message = recorder.calls[0]
    assert status == 400
    assert "invalid literal" in message


@pytest.mark.parametrize(
    ("shortcut", "status"),
    [
        ("or_bad_request", 400),
        ("or_unauthorized", 401),
        ("or_forbidden", 403),
        ("or_not_found", 404),
        ("or_conflict", 409),
        ("or_unprocessable", 422),
        ("or_too_many_requests", 429),
        ("or_server_error", 500),
    ],
)
def test_http_shortcuts(shortcut: str, status: int) -> None:
    with pytest.raises(HttpAbort) as caught:
        getattr(attempt(_fail), shortcut)("custom")
    assert caught.value.status_code == status
    assert caught.value.message == "custom"
    assert getattr(attempt(lambda: "ok"), shortcut)() == "ok"


# --- properties --------------------------------------------------------------

VALUES = st.one_of(st.integers(), st.text(max_size=5), st.none(), st.lists(st.integers(), max_size=3))


@given(VALUES)
def test_success_round_trip(value: object) -> None:
    outcome = attempt(lambda: value)
    assert outcome.is_success()
    assert outcome.get() == value
    assert outcome.get_or_else("default") == value


@given(st.text(max_size=10))
def test_failure_capture(message: str) -> None:
    def _raise() -> None:
        raise InfrastructureFixtureException(message)

    outcome = attempt(_raise)
    assert outcome.is_failure()
    assert outcome.error.message == message  # type: ignore[union-attr]
    with pytest.raises(InfrastructureFixtureException):
        outcome.get()


@given(st.booleans(), st.integers())
def test_get_or_else_never_raises(fails: bool, default: int) -> None:
    def _work() -> int:
        if fails:
            raise ValueError("boom")
        return 1

    assert attempt(_work).get_or_else(default) == (default if fails else 1)


@given(st.integers())
def test_map_identity_and_composition(value: int) -> None:
    outcome = attempt(lambda: value)
    assert outcome.map(lambda item: item).get() == value
    composed = outcome.map(lambda item: item + 1).map(lambda item: item * 2)
    assert composed.get() == outcome.map(lambda item: (item + 1) * 2).get()
