"""Foundation domain - Base types, config, errors, logging and the Sanitizer.

This domain has no dependencies on other filetool modules. Everything else
imports from here.
"""

# Config
from filetool.foundation.config import (
    FileToolConfig,
    get_config,
    load_config,
    override_config,
    reset_config,
    save_default_config,
)

# Errors
from filetool.foundation.errors import (
    ErrorCode,
    FileToolError,
)

# Types
from filetool.foundation.types import CasingPolicy

# Utils (re-export from subpackage)
from filetool.foundation.utils import (
    ensure_dir,
    has_extension,
    join_filename,
    sanitize_filename,
    sanitize_path,
    split_filename,
    to_camel,
    to_pascal,
    with_date_suffix,
)

__all__ = [
    # === Types ===
    "CasingPolicy",
    # === Config ===
    "FileToolConfig",
    "get_config",
    "load_config",
    "override_config",
    "reset_config",
    "save_default_config",
    # === Errors ===
    "ErrorCode",
    "FileToolError",
    # === Utils ===
    "ensure_dir",
    "has_extension",
    "join_filename",
    "sanitize_filename",
    "sanitize_path",
    "split_filename",
    "to_camel",
    "to_pascal",
    "with_date_suffix",
]
