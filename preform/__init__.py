"""Interactive conventional-commit message form."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("pre-form")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
