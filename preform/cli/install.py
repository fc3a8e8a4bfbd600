"""CLI command for installing the git hook."""

from pathlib import Path
from typing import Optional

import typer

from preform.exceptions import GitError, HookInstallError
from preform.git import get_repo_root
from preform.hook import install_hook


def install_command(
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-b",
        help="Repository root to install into (default: the current repository)",
    ),
) -> None:
    """Install the prepare-commit-msg hook that opens the form."""
    try:
        repo_root = base_dir if base_dir is not None else get_repo_root()
        hook_path = install_hook(repo_root)
    except (GitError, HookInstallError) as e:
        typer.echo(f"Error: failed to install git hook: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Git hook installed successfully at {hook_path}")
