"""Exception classes for pre-form.

Contains:
- PreformError: Base exception for all pre-form errors
- StoreError: Persisting a new type or scope failed
- OutputError: Writing the commit message failed
- HookInstallError: Installing the git hook failed
- ConfigError: Reading or validating the configuration failed
- GitError: A git command failed
- TerminalError: The terminal form crashed or was quit
"""


class PreformError(Exception):
    """Base exception for pre-form errors."""

    pass


class StoreError(PreformError):
    """Raised when a type or scope cannot be persisted."""

    pass


class OutputError(PreformError):
    """Raised when the commit message cannot be written."""

    pass


class HookInstallError(PreformError):
    """Raised when the prepare-commit-msg hook cannot be installed."""

    pass


class ConfigError(PreformError):
    """Raised when the configuration file is invalid."""

    pass


class GitError(PreformError):
    """Raised when a git command fails or git is unavailable."""

    pass


class TerminalError(PreformError):
    """Raised when the terminal form exits without the user finishing it."""

    pass
