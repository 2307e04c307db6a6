"""Typer CLI for planfs."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler

from planfs.core.settings import Settings, load_settings
from planfs.sandbox.roots import RootKind
from planfs.tools.gateway import ConfirmationRequired, ToolGateway, build_gateway
from planfs.tools.registry import tool_name
from planfs.tools.schemas import ToolCall, ToolResult, build_tool_call

app = typer.Typer(help="Scope-confined text file tools")
console = Console(soft_wrap=True, emoji=False)
err_console = Console(stderr=True, soft_wrap=True, emoji=False)

tools_app = typer.Typer(help="Tools operations")
config_app = typer.Typer(help="Configuration")

SCOPE_OPTION = typer.Option(
    ..., "--scope", "-s", envvar="PLANFS_SCOPE", help="Scope identifier"
)
EXTERNAL_OPTION = typer.Option(
    False, "--external", help="Use the external linked folder instead of the workspace"
)
YES_OPTION = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation")


@app.command()
def read(
    path: str,
    scope: str = SCOPE_OPTION,
    offset: int | None = None,
    limit: int | None = None,
    bypass_limit: bool = False,
    external: bool = EXTERNAL_OPTION,
) -> None:
    """Print a file as numbered lines."""
    _run(
        "read",
        scope,
        external,
        {
            "file_path": path,
            "offset": offset,
            "limit": limit,
            "bypass_limit": bypass_limit,
        },
    )


@app.command()
def write(
    path: str,
    scope: str = SCOPE_OPTION,
    contents: str | None = None,
    from_file: Path | None = None,
    external: bool = EXTERNAL_OPTION,
    yes: bool = YES_OPTION,
) -> None:
    """Create or overwrite a file."""
    if from_file is not None:
        contents = from_file.read_text(encoding="utf-8")
    _run("write", scope, external, {"file_path": path, "contents": contents}, yes)


@app.command()
def replace(
    path: str,
    old_string: str,
    new_string: str,
    scope: str = SCOPE_OPTION,
    external: bool = EXTERNAL_OPTION,
    yes: bool = YES_OPTION,
) -> None:
    """Replace one unique occurrence of OLD_STRING with NEW_STRING."""
    _run(
        "replace",
        scope,
        external,
        {"file_path": path, "old_string": old_string, "new_string": new_string},
        yes,
    )


@app.command()
def delete(
    path: str,
    scope: str = SCOPE_OPTION,
    external: bool = EXTERNAL_OPTION,
    yes: bool = YES_OPTION,
) -> None:
    """Delete a file."""
    _run("delete", scope, external, {"file_path": path}, yes)


@app.command("ls")
def list_files(
    path: str | None = typer.Argument(None),
    scope: str = SCOPE_OPTION,
    external: bool = EXTERNAL_OPTION,
) -> None:
    """List a directory."""
    _run("list", scope, external, {"path": path})


@app.command()
def count(
    path: str,
    scope: str = SCOPE_OPTION,
    external: bool = EXTERNAL_OPTION,
) -> None:
    """Show line, character and word counts."""
    _run("count", scope, external, {"file_path": path})


@app.command()
def split(
    path: str,
    scope: str = SCOPE_OPTION,
    header: str | None = None,
    split_count: int | None = None,
    external: bool = EXTERNAL_OPTION,
    yes: bool = YES_OPTION,
) -> None:
    """Split a file into numbered pieces next to it."""
    _run(
        "split",
        scope,
        external,
        {"file_path": path, "header": header, "split_count": split_count},
        yes,
    )


@tools_app.command("list")
def tools_list() -> None:
    gateway = build_gateway(load_settings())
    for spec in gateway.registry.list_specs():
        console.print(
            f"{spec.name} ({spec.risk_level.value}) - {spec.description}",
            markup=False,
        )


@config_app.command("show")
def config_show() -> None:
    settings = load_settings()
    for field in dataclasses.fields(Settings):
        value = getattr(settings, field.name)
        if isinstance(value, frozenset):
            value = ",".join(sorted(value))
        if field.name == "log_level":
            value = logging.getLevelName(value)
        console.print(f"{field.name}={value}", markup=False)


app.add_typer(tools_app, name="tools")
app.add_typer(config_app, name="config")


def _run(
    operation: str,
    scope: str,
    external: bool,
    args: dict[str, Any],
    yes: bool = False,
) -> None:
    settings = load_settings()
    _configure_logging(settings)
    gateway = build_gateway(settings)
    root_kind = RootKind.EXTERNAL_LINK if external else RootKind.WORKSPACE
    call = build_tool_call(
        scope,
        tool_name(root_kind, operation),
        {key: value for key, value in args.items() if value is not None},
        requires_confirm=not yes,
    )
    result = _execute(gateway, call)
    if not result.ok:
        err_console.print(result.error, markup=False, highlight=False)
        raise typer.Exit(code=1)
    console.print(result.result, markup=False, highlight=False, end="")
    if result.result and not result.result.endswith("\n"):
        console.print()


def _execute(gateway: ToolGateway, call: ToolCall) -> ToolResult:
    try:
        return asyncio.run(gateway.execute(call))
    except ConfirmationRequired as exc:
        if not typer.confirm(f"{exc.tool_name}: {exc.reason}. Continue?"):
            raise typer.Abort()
        return asyncio.run(
            gateway.execute(dataclasses.replace(call, requires_confirm=False))
        )


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
