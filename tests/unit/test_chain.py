"""Unit tests for cause-chain traversal."""

from __future__ import annotations

from lib_throw.domain.chain import error_as, error_is
from lib_throw.exceptions import (
    ApiException,
    ExternalServiceException,
    InfrastructureException,
    NetworkException,
    TimeoutException,
)
from tests.support import DomainFixtureException, InfrastructureFixtureException


def _layered() -> tuple[ApiException, TimeoutError]:
    root = TimeoutError("read timed out")
    middle = NetworkException("socket closed").wrap(root)
    outer = ApiException("payment api failed").wrap(middle)
    return outer, root


def test_chain_lists_newest_first() -> None:
    error, root = _layered()
    assert [type(link) for link in error.chain()] == [ApiException, NetworkException, TimeoutError]
    assert error.chain()[-1] is root


def test_root_cause_and_depth() -> None:
    error, root = _layered()
    assert error.root_cause() is root
    assert error.chain_depth() == 3
    single = TimeoutException("slow")
    assert single.root_cause() is single
    assert single.chain_depth() == 1


def test_find_first_uses_subtype_matching() -> None:
    error, _ = _layered()
    assert error.find_first(InfrastructureException) is error
    assert isinstance(error.find_first(NetworkException), NetworkException)
    assert error.find_first(ExternalServiceException) is None


def test_find_all_and_filter_chain() -> None:
    error, root = _layered()
    assert len(error.find_all(InfrastructureException)) == 2
    assert error.find_all((OSError,)) == [root]
    assert error.filter_chain(lambda link: "api" in str(link)) == [error]


def test_has_in_chain() -> None:
    error, _ = _layered()
    assert error.has_in_chain(TimeoutError)
    assert not error.has_in_chain(KeyError)


def test_implicit_context_is_not_followed() -> None:
    try:
        try:
            raise KeyError("inner")
        except KeyError:
            raise DomainFixtureException("outer")
    except DomainFixtureException as caught:
        assert caught.__context__ is not None
        assert caught.chain_depth() == 1


def test_module_functions_work_on_foreign_errors() -> None:
    outer = RuntimeError("outer")
    outer.__cause__ = InfrastructureFixtureException("backend")
    assert error_is(outer, InfrastructureException)
    assert isinstance(error_as(outer, InfrastructureFixtureException), InfrastructureFixtureException)
    assert error_as(outer, KeyError) is None
    assert not error_is(ValueError("alone"), KeyError)
