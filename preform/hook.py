"""Installation of the prepare-commit-msg git hook."""

import logging
from pathlib import Path

from preform.exceptions import HookInstallError

logger = logging.getLogger(__name__)

HOOK_NAME = "prepare-commit-msg"

# Only run when git did not supply a message source ($2), e.g. -m or merge
HOOK_SCRIPT = """#!/bin/sh
# pre-form Git hook: generates commit message via TUI
if [ -z "$2" ]; then
  pre-form edit "$1" < /dev/tty
fi
"""


def get_hook_path(base_dir: Path) -> Path:
    """Return where the hook is installed.

    Args:
        base_dir: Repository root.

    Returns:
        Path to .git/hooks/prepare-commit-msg.
    """
    return Path(base_dir) / ".git" / "hooks" / HOOK_NAME


def install_hook(base_dir: Path) -> Path:
    """Write the prepare-commit-msg hook and make it executable.

    An existing hook is overwritten.

    Args:
        base_dir: Repository root.

    Returns:
        Path to the installed hook.

    Raises:
        HookInstallError: If any step fails; the message names the step.
    """
    hook_path = get_hook_path(base_dir)
    hook_dir = hook_path.parent

    try:
        hook_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise HookInstallError(f"failed to create directory `{hook_dir}`: {e}")

    try:
        f = open(hook_path, "w", encoding="utf-8")
    except OSError as e:
        raise HookInstallError(f"failed to create hook file `{hook_path}`: {e}")

    with f:
        try:
            f.write(HOOK_SCRIPT)
        except OSError as e:
            raise HookInstallError(f"failed to write to `{hook_path}`: {e}")

    try:
        hook_path.chmod(0o755)
    except OSError as e:
        raise HookInstallError(f"failed to set permissions on `{hook_path}`: {e}")

    logger.debug("Installed hook at %s", hook_path)
    return hook_path
