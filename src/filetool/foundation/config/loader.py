"""FileTool configuration management.

Loads configuration from .filetool/config.yaml with sensible defaults.
All settings can be overridden via environment variables (FILETOOL_*).

Config locations (in priority order):
1. Explicit path passed to load_config()
2. .filetool/config.yaml (project-local)
3. ~/.filetool/config.yaml (user-global)
4. Built-in defaults

Thread Safety:
    Uses threading.Lock for thread-safe lazy initialization.
"""


import logging
import os
import threading
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from filetool.foundation.errors import config_error
from filetool.foundation.types import CasingPolicy

logger = logging.getLogger(__name__)

_ENV_PREFIX = "FILETOOL_"


@dataclass(frozen=True, slots=True)
class FileToolConfig:
    """Root configuration for FileTool."""

    default_mode: int = 0o777
    """Permission bits for directories created without an explicit mode."""

    error_status: int = 500
    """Status code handed to the error sink with every reported error."""

    default_policy: str = ""
    """Casing policy used by the CLI when --policy is not given."""

    debug: bool = False
    """Enable debug logging by default."""

    def __post_init__(self) -> None:
        if not 0 <= self.default_mode <= 0o7777:
            raise config_error("default_mode", f"{self.default_mode!r} is not a permission mode")
        # Fail fast on a bad policy tag instead of on first use
        CasingPolicy.parse(self.default_policy)


# Global config instance (lazy-loaded, thread-safe)
_config: FileToolConfig | None = None
_config_lock = threading.Lock()


def _coerce(key: str, value: Any) -> Any:
    """Coerce a raw YAML/env value to the type of the config field."""
    if key == "default_mode":
        if isinstance(value, str):
            try:
                # "0755", "0o755" and "755" all read as octal
                return int(value.removeprefix("0o").removeprefix("0O") or "0", 8)
            except ValueError as err:
                raise config_error(key, f"'{value}' is not an octal mode") from err
        return int(value)
    if key == "error_status":
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            raise config_error(key, f"'{value}' is not an integer") from err
    if key == "debug":
        if isinstance(value, str):
            return value.lower() in ("true", "yes", "1")
        return bool(value)
    if key == "default_policy":
        return "" if value is None else str(value)
    return value


def _apply_env_overrides(config_dict: dict[str, Any]) -> dict[str, Any]:
    """Apply environment variable overrides.

    Examples:
        FILETOOL_DEFAULT_MODE=0755
        FILETOOL_ERROR_STATUS=500
        FILETOOL_DEFAULT_POLICY=lower
    """
    known = {f.name for f in fields(FileToolConfig)}
    for key, value in os.environ.items():
        if not key.startswith(_ENV_PREFIX):
            continue
        name = key[len(_ENV_PREFIX):].lower()
        if name in known:
            config_dict[name] = value
    return config_dict


def _dict_to_config(data: dict[str, Any]) -> FileToolConfig:
    """Convert a dict to FileToolConfig, ignoring unknown keys."""
    known = {f.name for f in fields(FileToolConfig)}
    unknown = set(data) - known
    if unknown:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(sorted(unknown)))
    return FileToolConfig(**{k: _coerce(k, v) for k, v in data.items() if k in known})


def load_config(path: str | Path | None = None) -> FileToolConfig:
    """Load configuration from file with defaults and env overrides.

    Priority (highest to lowest):
    1. Environment variables (FILETOOL_*)
    2. Explicit path if provided
    3. .filetool/config.yaml (project-local)
    4. ~/.filetool/config.yaml (user-global)
    5. Built-in defaults

    Args:
        path: Optional explicit config file path.

    Returns:
        Merged FileToolConfig instance.

    Raises:
        FileToolError: CONFIG_INVALID if a value cannot be coerced
    """
    global _config

    config_dict: dict[str, Any] = asdict(FileToolConfig())

    config_paths = []
    if path:
        config_paths.append(Path(path))
    config_paths.extend([
        Path(".filetool/config.yaml"),
        Path.home() / ".filetool" / "config.yaml",
    ])

    for config_path in config_paths:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    file_config = yaml.safe_load(f) or {}
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Skipping unreadable config %s: %s", config_path, e)
                continue
            if not isinstance(file_config, dict):
                logger.warning("Skipping config %s: top level is not a mapping", config_path)
                continue
            config_dict.update(file_config)
            logger.debug("Loaded config from %s", config_path)
            break  # Use first found config

    config_dict = _apply_env_overrides(config_dict)

    _config = _dict_to_config(config_dict)
    return _config


def get_config() -> FileToolConfig:
    """Get the current configuration, loading if needed.

    Thread-safe with double-check locking.
    """
    global _config

    # Fast path: already initialized
    if _config is not None:
        return _config

    with _config_lock:
        if _config is None:
            _config = load_config()
        return _config


def reset_config() -> None:
    """Reset the global config (useful for testing)."""
    global _config
    with _config_lock:
        _config = None


def override_config(**changes: Any) -> FileToolConfig:
    """Replace selected fields of the current config (e.g. from CLI flags)."""
    global _config
    with _config_lock:
        base = _config if _config is not None else load_config()
        _config = replace(base, **changes)
        return _config


def save_default_config(path: str | Path = ".filetool/config.yaml") -> Path:
    """Save the default configuration to a file.

    Args:
        path: Where to save the config.

    Returns:
        Path to the saved config file.
    """
    defaults = FileToolConfig()
    config_content = f"""# FileTool Configuration
#
# Every key can also be set with an environment variable,
# e.g. FILETOOL_DEFAULT_MODE=0755.

# Permission bits for directories created without an explicit mode (octal)
default_mode: "{defaults.default_mode:04o}"

# Status code passed to the error sink with every reported error
error_status: {defaults.error_status}

# Casing policy used when none is given: none, lower, upper, camel, pascal, date
default_policy: "{defaults.default_policy}"

# Debug logging
debug: {str(defaults.debug).lower()}
"""

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(config_content)
    return path
