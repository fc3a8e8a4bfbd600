"""Delivery of the finished commit message."""

import logging
from pathlib import Path
from typing import Optional

import typer

from preform.exceptions import OutputError

logger = logging.getLogger(__name__)


def write_message(message: str, path: Optional[Path] = None) -> None:
    """Write the message to ``path``, or print it when no path is given.

    The file is overwritten with exactly ``message``; no trailing newline
    is added.

    Args:
        message: The assembled commit message.
        path: Target file, typically the path git passes to the hook.

    Raises:
        OutputError: If the file cannot be written.
    """
    if path is None:
        typer.echo(message)
        return

    try:
        Path(path).write_text(message, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"failed to write commit message to `{path}`: {e}")

    logger.debug("Wrote %d characters to %s", len(message), path)
