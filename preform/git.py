"""Locating the repository pre-form works in.

Contains:
- _git: Run a git command and return its output
- get_repo_root: Get the root directory of the current git repository
- resolve_base_dir: Pick the directory holding .pre-form-git
"""

import logging
import subprocess
from pathlib import Path
from typing import Optional

from preform.exceptions import GitError

logger = logging.getLogger(__name__)


def _git(args: list[str], cwd: Optional[Path] = None) -> str:
    """Run git with ``args`` and return its stripped stdout.

    Raises:
        GitError: If git is missing or exits non-zero.
    """
    try:
        result = subprocess.run(
            ["git"] + args,
            cwd=cwd,
            capture_output=True,
            text=True,
            check=True,
        )
    except subprocess.CalledProcessError as e:
        raise GitError(f"git {' '.join(args)} failed: {e.stderr.strip()}")
    except FileNotFoundError:
        raise GitError("Git is not installed or not in PATH.")
    return result.stdout.strip()


def get_repo_root(cwd: Optional[Path] = None) -> Path:
    """Return the top-level directory of the enclosing repository.

    Raises:
        GitError: If ``cwd`` is not inside a git work tree.
    """
    try:
        return Path(_git(["rev-parse", "--show-toplevel"], cwd=cwd))
    except GitError:
        raise GitError("Not in a git repository. Please run this command from within a git repo.")


def resolve_base_dir(base_dir: Optional[Path] = None) -> Path:
    """Return the directory that holds .pre-form-git.

    An explicit ``base_dir`` wins. Otherwise the repository root is used,
    and outside a repository the current directory.
    """
    if base_dir is not None:
        return Path(base_dir)
    try:
        return get_repo_root()
    except GitError as e:
        logger.debug("Using current directory as base: %s", e)
        return Path.cwd()
