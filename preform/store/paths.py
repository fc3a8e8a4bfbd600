"""Store path utilities for pre-form.

Contains functions for getting paths inside the .pre-form-git directory:
- get_store_dir: Get the .pre-form-git directory
- get_components_dir: Get the directory holding one marker per commit type
- get_scopes_file: Get path to the scope history log
- get_config_file: Get path to config.yaml
"""

from pathlib import Path

STORE_DIR_NAME = ".pre-form-git"


def get_store_dir(base_dir: Path) -> Path:
    """Return the .pre-form-git directory (not created).

    Args:
        base_dir: Directory the store lives in (usually the repo root).

    Returns:
        Path to the .pre-form-git directory.
    """
    return Path(base_dir) / STORE_DIR_NAME


def get_components_dir(base_dir: Path) -> Path:
    """Return the directory listing the known commit types.

    Args:
        base_dir: Directory the store lives in.

    Returns:
        Path to .pre-form-git/components.
    """
    return get_store_dir(base_dir) / "components"


def get_scopes_file(base_dir: Path) -> Path:
    """Return path to the append-only scope log.

    Args:
        base_dir: Directory the store lives in.

    Returns:
        Path to .pre-form-git/scopes.txt.
    """
    return get_store_dir(base_dir) / "scopes.txt"


def get_config_file(base_dir: Path) -> Path:
    """Return path to the configuration file.

    Args:
        base_dir: Directory the store lives in.

    Returns:
        Path to .pre-form-git/config.yaml.
    """
    return get_store_dir(base_dir) / "config.yaml"
