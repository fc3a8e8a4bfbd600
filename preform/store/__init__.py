"""Persistence for user-defined commit types and scopes.

This package keeps everything under <base>/.pre-form-git:
- paths: Functions for getting store paths
- commit_types: Load and persist the commit type enumeration
- scopes: Append-only scope history
"""

# Path utilities
from preform.store.paths import (
    STORE_DIR_NAME,
    get_components_dir,
    get_config_file,
    get_scopes_file,
    get_store_dir,
)

# Commit types
from preform.store.commit_types import (
    DEFAULT_TYPES,
    load_types,
    persist_new_type,
)

# Scopes
from preform.store.scopes import (
    load_scope_history,
    persist_new_scope,
)

__all__ = [
    "STORE_DIR_NAME",
    "get_components_dir",
    "get_config_file",
    "get_scopes_file",
    "get_store_dir",
    "DEFAULT_TYPES",
    "load_types",
    "persist_new_type",
    "load_scope_history",
    "persist_new_scope",
]
