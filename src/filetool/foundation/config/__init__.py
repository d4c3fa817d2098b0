"""Configuration management for FileTool."""

from filetool.foundation.config.loader import (
    FileToolConfig,
    get_config,
    load_config,
    override_config,
    reset_config,
    save_default_config,
)

__all__ = [
    "FileToolConfig",
    "get_config",
    "load_config",
    "override_config",
    "reset_config",
    "save_default_config",
]
