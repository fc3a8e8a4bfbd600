"""Shared utility functions for CLI commands."""

from pathlib import Path
from typing import Optional

import typer

from preform import __version__
from preform.config import PreformConfig, configure_logging, load_config
from preform.exceptions import PreformError, TerminalError
from preform.form import FormSession
from preform.output import write_message
from preform.tui import PreformApp


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is given."""
    if value:
        typer.echo(f"pre-form {__version__}")
        raise typer.Exit(0)


def get_effective_config(base_dir: Path, log_file: Optional[Path]) -> PreformConfig:
    """Load config.yaml and apply command-line overrides.

    Args:
        base_dir: Directory holding .pre-form-git.
        log_file: --log-file value, overriding the configured one.

    Returns:
        The effective configuration.
    """
    config = load_config(base_dir)
    if log_file is not None:
        config = config.model_copy(update={"log_file": log_file})
    return config


def run_form(session: FormSession) -> str:
    """Run the terminal form until the user finishes it.

    Args:
        session: The form session to drive.

    Returns:
        The assembled commit message.

    Raises:
        StoreError: If persisting a new type or scope failed.
        TerminalError: If the app could not start, crashed, or was quit
            before the form was finished.
    """
    app = PreformApp(session)
    try:
        app.run()
    except Exception as e:
        raise TerminalError(f"terminal form failed: {e}") from e

    if app.failure is not None:
        raise app.failure
    if app.return_code != 0:
        raise TerminalError(f"terminal form exited with code {app.return_code}")
    if not session.finished or app.return_value is None:
        raise TerminalError("terminal form closed before the message was finished")
    return app.return_value


def run_and_write(
    base_dir: Path,
    commit_msg_path: Optional[Path],
    log_file: Optional[Path],
) -> None:
    """Run the form and deliver the message.

    Args:
        base_dir: Directory holding .pre-form-git.
        commit_msg_path: File to write, or None to print to stdout.
        log_file: Optional --log-file override.

    Raises:
        typer.Exit: With code 1 if anything fails.
    """
    config = get_effective_config(base_dir, log_file)

    try:
        configure_logging(config.log_file)
        session = FormSession(base_dir, add_key=config.add_key)
        message = run_form(session)
        write_message(message, commit_msg_path)
    except (PreformError, OSError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
