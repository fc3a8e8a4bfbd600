"""CLI commands for managing commit types and scopes."""

from pathlib import Path
from typing import Optional

import typer

from preform.exceptions import StoreError
from preform.git import resolve_base_dir
from preform.store import (
    DEFAULT_TYPES,
    get_components_dir,
    load_scope_history,
    load_types,
    persist_new_scope,
    persist_new_type,
)

BASE_DIR_OPTION = typer.Option(
    None,
    "--base-dir",
    "-b",
    help="Directory holding .pre-form-git (default: repository root, else current directory)",
)

# Subcommand group for commit types
types_app = typer.Typer(
    name="types",
    help="Manage commit types in .pre-form-git/components",
    add_completion=False,
)

# Subcommand group for scopes
scopes_app = typer.Typer(
    name="scopes",
    help="Manage the scope history in .pre-form-git/scopes.txt",
    add_completion=False,
)


@types_app.command("list")
def types_list(base_dir: Optional[Path] = BASE_DIR_OPTION) -> None:
    """Show the commit types offered by the form."""
    root = resolve_base_dir(base_dir)
    types = load_types(root)

    typer.echo("Commit types:")
    typer.echo()
    for name in types:
        typer.echo(f"  - {name}")
    typer.echo()

    if types == DEFAULT_TYPES and not any(get_components_dir(root).glob("*")):
        typer.echo("(built-in defaults; add a type to start a custom list)")
    else:
        typer.echo(f"Total: {len(types)} type(s)")


@types_app.command("add")
def types_add(
    name: str = typer.Argument(..., help="Type name to add (e.g., perf, build)"),
    base_dir: Optional[Path] = BASE_DIR_OPTION,
) -> None:
    """Add a commit type."""
    name = name.strip()
    if not name:
        typer.echo("Error: type name cannot be empty", err=True)
        raise typer.Exit(1)

    try:
        persist_new_type(resolve_base_dir(base_dir), name)
    except StoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Added commit type: {name}")


@scopes_app.command("list")
def scopes_list(base_dir: Optional[Path] = BASE_DIR_OPTION) -> None:
    """Show every scope recorded so far, oldest first."""
    scopes = load_scope_history(resolve_base_dir(base_dir))

    typer.echo("Scope history:")
    typer.echo()
    if scopes:
        for scope in scopes:
            typer.echo(f"  - {scope}")
        typer.echo()
        typer.echo(f"Total: {len(scopes)} scope(s)")
    else:
        typer.echo("  (no scopes recorded)")


@scopes_app.command("add")
def scopes_add(
    name: str = typer.Argument(..., help="Scope name to record (e.g., api, ui)"),
    base_dir: Optional[Path] = BASE_DIR_OPTION,
) -> None:
    """Append a scope to the history."""
    name = name.strip()
    if not name:
        typer.echo("Error: scope name cannot be empty", err=True)
        raise typer.Exit(1)

    try:
        persist_new_scope(resolve_base_dir(base_dir), name)
    except StoreError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Recorded scope: {name}")
