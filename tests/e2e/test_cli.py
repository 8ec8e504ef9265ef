"""End-to-end CLI coverage for the public commands exposed by lib_throw.

These tests exercise the taxonomy browsing workflows (tree, describe, info)
and the shared exit handling provided by ``lib_cli_exit_tools``.
"""

from __future__ import annotations

import json

from click.testing import CliRunner

import lib_cli_exit_tools

from lib_throw import cli
from lib_throw.exceptions import RuntimeException


def _runner() -> CliRunner:
    """Return a fresh CLI runner so each test starts from a clean state."""

    return CliRunner()


def test_cli_tree_defaults_to_the_root() -> None:
    result = _runner().invoke(cli.cli, ["tree"])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0] == "ThrowException"
    assert "  LogicException" in lines
    assert "  RuntimeException" in lines
    assert len(lines) > 300


def test_cli_tree_with_root() -> None:
    result = _runner().invoke(cli.cli, ["tree", "--root", "LogicException"])
    assert result.exit_code == 0
    assert result.output.splitlines()[0] == "LogicException"
    assert "RuntimeException" not in result.output


def test_cli_tree_rejects_unknown_root() -> None:
    result = _runner().invoke(cli.cli, ["tree", "--root", "MadeUpException"])
    assert result.exit_code == 2
    assert "MadeUpException" in result.output


def test_cli_describe_outputs_json() -> None:
    result = _runner().invoke(cli.cli, ["describe", "InvalidArgumentException"])
    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["kind"] == "InvalidArgumentException"
    assert payload["parent"] == "LogicException"
    assert payload["lineage"] == ["InvalidArgumentException", "LogicException", "ThrowException"]
    assert "InvalidCallableException" in payload["children"]
    assert payload["builtins"] == ["ValueError"]
    assert payload["summary"]


def test_cli_describe_indent_option() -> None:
    result = _runner().invoke(cli.cli, ["describe", "ApiException", "--indent", "4"])
    assert result.exit_code == 0
    assert '\n    "kind": "ApiException"' in result.output


def test_cli_describe_root_has_no_parent() -> None:
    result = _runner().invoke(cli.cli, ["describe", "ThrowException"])
    payload = json.loads(result.output)
    assert payload["parent"] is None
    assert payload["children"] == ["LogicException", "RuntimeException"]


def test_cli_info_handles_missing_metadata(monkeypatch) -> None:
    """`cli info` must degrade gracefully when package metadata is unavailable."""

    def _raise_pkg_not_found(*_args, **_kwargs):
        raise cli.metadata.PackageNotFoundError()

    monkeypatch.setattr(cli.metadata, "metadata", _raise_pkg_not_found)
    result = _runner().invoke(cli.cli, ["info"])
    assert result.exit_code == 0
    assert "metadata unavailable" in result.output


def test_cli_fail_command() -> None:
    """`cli fail` should bubble library errors for debugging flows."""

    result = _runner().invoke(cli.cli, ["fail"])
    assert result.exit_code != 0
    assert isinstance(result.exception, RuntimeException)
    assert str(result.exception) == "i should fail"


def test_cli_main_returns_exit_code_and_restores_traceback_flag() -> None:
    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    assert cli.main(["--traceback", "tree", "--root", "LengthException"], restore_traceback=True) == 0
    assert getattr(lib_cli_exit_tools.config, "traceback", False) == previous_traceback


def test_cli_main_reports_failures_with_non_zero_exit() -> None:
    assert cli.main(["fail"]) != 0
