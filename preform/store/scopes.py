"""Append-only scope history stored in .pre-form-git/scopes.txt."""

import logging
from pathlib import Path

from preform.exceptions import StoreError
from preform.store.paths import get_scopes_file, get_store_dir

logger = logging.getLogger(__name__)


def persist_new_scope(base_dir: Path, name: str) -> Path:
    """Append ``name`` as a new line of the scope log.

    The log is never deduplicated or rewritten.

    Args:
        base_dir: Directory the store lives in.
        name: The scope name.

    Returns:
        Path to the scope log.

    Raises:
        StoreError: If the store directory or the log cannot be written.
    """
    store_dir = get_store_dir(base_dir)
    try:
        store_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreError(f"creating store directory failed: {store_dir}: {e}")

    scopes_file = get_scopes_file(base_dir)
    try:
        f = open(scopes_file, "a", encoding="utf-8")
    except OSError as e:
        raise StoreError(f"opening scopes file failed: {scopes_file}: {e}")

    with f:
        try:
            f.write(f"{name}\n")
        except OSError as e:
            raise StoreError(f"writing scope failed: {scopes_file}: {e}")

    logger.debug("Appended scope %r to %s", name, scopes_file)
    return scopes_file


def load_scope_history(base_dir: Path) -> list[str]:
    """Read every scope ever recorded, oldest first.

    Args:
        base_dir: Directory the store lives in.

    Returns:
        List of non-empty lines, or an empty list if the log is unreadable.
    """
    scopes_file = get_scopes_file(base_dir)
    try:
        content = scopes_file.read_text(encoding="utf-8")
    except OSError as e:
        logger.debug("Treating scope log as empty, cannot read %s: %s", scopes_file, e)
        return []

    return [line for line in content.splitlines() if line]
