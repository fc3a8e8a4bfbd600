"""CLI entry point for pre-form.

This module provides the main CLI application that combines all commands
and subcommands into a single unified interface.
"""

import typer

from preform.cli.install import install_command
from preform.cli.main import edit_command, main_command
from preform.cli.values import scopes_app, types_app

# Main application
app = typer.Typer(
    name="pre-form",
    help="pre-form: interactive conventional commit message form",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(types_app, name="types")
app.add_typer(scopes_app, name="scopes")

# Add individual commands
app.command("edit")(edit_command)
app.command("install")(install_command)

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "types_app",
    "scopes_app",
    "edit_command",
    "install_command",
    "main_command",
]
