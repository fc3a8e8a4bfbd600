"""Main CLI commands for filling in a commit message."""

from pathlib import Path
from typing import Optional

import typer

from preform.git import resolve_base_dir
from preform.cli.utils import run_and_write, version_callback

BASE_DIR_HELP = "Directory holding .pre-form-git (default: repository root, else current directory)"
LOG_FILE_HELP = "Write debug logs to this file"


def main_command(
    ctx: typer.Context,
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-b",
        help=BASE_DIR_HELP,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help=LOG_FILE_HELP,
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Fill in a conventional commit message and print it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    run_and_write(resolve_base_dir(base_dir), None, log_file)


def edit_command(
    commit_msg_path: Optional[Path] = typer.Argument(
        None,
        help="Commit message file passed by the git hook (e.g., .git/COMMIT_EDITMSG)",
    ),
    base_dir: Optional[Path] = typer.Option(
        None,
        "--base-dir",
        "-b",
        help=BASE_DIR_HELP,
    ),
    log_file: Optional[Path] = typer.Option(
        None,
        "--log-file",
        help=LOG_FILE_HELP,
    ),
) -> None:
    """Fill in a commit message and write it to COMMIT_MSG_PATH.

    Without a path the message is printed to stdout.
    """
    run_and_write(resolve_base_dir(base_dir), commit_msg_path, log_file)
