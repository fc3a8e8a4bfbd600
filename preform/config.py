"""User configuration for pre-form.

Handles reading the .pre-form-git/config.yaml file in each repository:
- add_key: Character that opens the new type/scope overlay
- log_file: Where to write debug logs (disabled when unset)
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from preform.exceptions import ConfigError
from preform.form.session import DEFAULT_ADD_KEY
from preform.store.paths import get_config_file

logger = logging.getLogger(__name__)


class PreformConfig(BaseModel):
    """Settings read from config.yaml."""

    add_key: str = DEFAULT_ADD_KEY
    log_file: Optional[Path] = None

    @field_validator("add_key")
    @classmethod
    def ensure_single_character(cls, v):
        """Ensure add_key is exactly one character."""
        if len(v) != 1:
            raise ValueError("add_key must be a single character")
        return v


def parse_config(data: Any) -> PreformConfig:
    """Validate a raw configuration mapping.

    Args:
        data: Parsed YAML content (None for an empty file).

    Returns:
        The validated configuration.

    Raises:
        ConfigError: If the content is not a mapping or fails validation.
    """
    if data is None:
        return PreformConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping, got {type(data).__name__}")
    try:
        return PreformConfig(**data)
    except ValidationError as e:
        raise ConfigError(str(e))


def load_config(base_dir: Path) -> PreformConfig:
    """Load the configuration from config.yaml.

    A missing, unreadable or invalid file yields the defaults.

    Args:
        base_dir: Directory holding .pre-form-git.

    Returns:
        The configuration.
    """
    config_file = get_config_file(base_dir)

    if not config_file.exists():
        return PreformConfig()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return parse_config(data)
    except (OSError, yaml.YAMLError, ConfigError) as e:
        logger.debug("Using default config, cannot load %s: %s", config_file, e)
        return PreformConfig()


def configure_logging(log_file: Optional[Path]) -> None:
    """Send pre-form debug logs to ``log_file``.

    Nothing is logged to the terminal, which the form owns while it runs.

    Args:
        log_file: Log destination, or None to leave logging unconfigured.
    """
    if log_file is None:
        return

    package_logger = logging.getLogger("preform")
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
