"""CLI adapter for ``lib_throw`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let developers browse the error taxonomy from a shell: find the right kind to
raise, see where it sits in the tree, and check which builtin exceptions it is
compatible with.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_tree` – prints the kind tree below a root kind.
* :func:`cli_describe` – prints one kind as JSON.
* :func:`cli_fail` – deterministic failure for traceback handling tests.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
Outermost layer. It reads the taxonomy through
:mod:`lib_throw.domain.taxonomy` and never constructs errors itself apart from
the ``fail`` command. ``lib_cli_exit_tools`` centralises the exit code strategy
so all commands behave consistently across shells and CI.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from typing import Any, Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .domain.errors import OutOfBoundsException, ThrowException
from .domain.taxonomy import builtin_bases, children, kinds, lineage, parent_of, render_tree, resolve_kind, summary
from .testing import i_should_fail

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` when not installed."""

    try:
        return metadata.version("lib_throw")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Browse the lib_throw error taxonomy",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_throw",
    message="lib_throw version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print distribution metadata and the size of the taxonomy."""

    try:
        meta = metadata.metadata("lib_throw")
    except metadata.PackageNotFoundError:
        click.echo("lib_throw (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_throw')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.11')}")
    summary_line = meta.get("Summary")
    if summary_line:
        click.echo(f"  Summary         : {summary_line}")
    click.echo(f"  Error kinds     : {len(kinds())}")
    for entry in meta.get_all("Project-URL") or []:
        click.echo(f"  {entry}")


@cli.command("tree", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--root",
    "root_name",
    default=ThrowException.__name__,
    show_default=True,
    help="Kind whose subtree is printed",
)
def cli_tree(root_name: str) -> None:
    """Print the kind tree below ``--root`` as an indented outline.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["tree", "--root", "BadFunctionCallException"])
    >>> print(result.output.strip())
    BadFunctionCallException
      BadMethodCallException
    """

    click.echo(render_tree(_kind_option(root_name, "--root")))


@cli.command("describe", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("kind_name", metavar="KIND")
@click.option(
    "--indent",
    type=int,
    default=2,
    show_default=True,
    help="Indent size of the JSON output",
)
def cli_describe(kind_name: str, indent: Optional[int]) -> None:
    """Print KIND with its parent, lineage, children, and builtin bases as JSON."""

    click.echo(json.dumps(describe_kind(_kind_option(kind_name, "KIND")), indent=indent))


@cli.command("fail", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_fail() -> None:
    """Trigger a deterministic error for testing traceback handling.

    This mirrors the helper exposed by `lib_throw.testing.i_should_fail`.
    """

    i_should_fail()


def describe_kind(kind: type[ThrowException]) -> dict[str, Any]:
    """Return the JSON-ready description printed by ``describe``.

    Examples
    --------
    >>> describe_kind(resolve_kind("OutOfRangeException"))["builtins"]
    ['IndexError', 'LookupError']
    """

    parent = parent_of(kind)
    return {
        "kind": kind.__name__,
        "module": kind.__module__,
        "summary": summary(kind),
        "parent": parent.__name__ if parent is not None else None,
        "lineage": [ancestor.__name__ for ancestor in lineage(kind)],
        "children": [child.__name__ for child in children(kind)],
        "builtins": builtin_bases(kind),
    }


def _kind_option(name: str, param_hint: str) -> type[ThrowException]:
    """Resolve ``name`` or report it as a bad CLI parameter."""

    try:
        return resolve_kind(name)
    except OutOfBoundsException as exc:
        raise click.BadParameter(str(exc), param_hint=param_hint) from exc


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_throw",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
