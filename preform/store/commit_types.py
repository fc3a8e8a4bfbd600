"""Commit type enumeration backed by a directory of marker files.

Each known type is an empty file under .pre-form-git/components; the file
name is the type name. An empty or unreadable directory means the built-in
conventional types are used.
"""

import logging
from pathlib import Path

from preform.exceptions import StoreError
from preform.store.paths import get_components_dir

logger = logging.getLogger(__name__)

# Fallback list, in display order
DEFAULT_TYPES = [
    "feat",
    "fix",
    "docs",
    "style",
    "refactor",
    "test",
    "chore",
]


def load_types(base_dir: Path) -> list[str]:
    """Load the commit types from the components directory.

    Entries are returned in the order the filesystem lists them.

    Args:
        base_dir: Directory the store lives in.

    Returns:
        List of type names, or a copy of DEFAULT_TYPES when the directory
        is missing, unreadable, or empty.
    """
    components_dir = get_components_dir(base_dir)

    try:
        types = [entry.name for entry in components_dir.iterdir()]
    except OSError as e:
        logger.debug("Using default types, cannot read %s: %s", components_dir, e)
        return DEFAULT_TYPES.copy()

    if not types:
        logger.debug("Using default types, %s is empty", components_dir)
        return DEFAULT_TYPES.copy()

    return types


def persist_new_type(base_dir: Path, name: str) -> Path:
    """Ensure a marker file exists for ``name``.

    Creates the components directory when needed. Calling this for a type
    that already exists is a no-op.

    Args:
        base_dir: Directory the store lives in.
        name: The type name.

    Returns:
        Path to the marker file.

    Raises:
        StoreError: If the directory or the marker cannot be created.
    """
    components_dir = get_components_dir(base_dir)

    try:
        components_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StoreError(f"creating components directory failed: {components_dir}: {e}")

    marker = components_dir / name
    if not marker.exists():
        try:
            marker.touch()
        except OSError as e:
            raise StoreError(f"creating type file failed: {marker}: {e}")

    logger.debug("Persisted type %r at %s", name, marker)
    return marker
