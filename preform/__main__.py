"""Allow running pre-form with ``python -m preform``."""

from preform.cli import app

if __name__ == "__main__":
    app()
