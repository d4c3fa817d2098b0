"""Logging configuration for FileTool.

Provides centralized logging setup with sensible defaults:
- Default: WARNING level (quiet operation)
- --debug flag: DEBUG level with full context
- FILETOOL_DEBUG=true or FILETOOL_LOG_LEVEL=DEBUG env vars: Override for CI/scripting
- Config file: debug: true in .filetool/config.yaml (persistent)
- Persistent logs: Optionally stored in .filetool/logs/ with session rotation

Usage:
    from filetool.foundation.logging import configure_logging
    configure_logging(debug=args.debug)

Priority for level resolution (highest to lowest):
    1. Explicit `level` parameter (programmatic override)
    2. FILETOOL_LOG_LEVEL env var (any level: DEBUG, INFO, WARNING, etc.)
    3. FILETOOL_DEBUG=true env var (simple boolean)
    4. `debug=True` parameter (--debug flag)
    5. Config file: debug: true
    6. WARNING (default)
"""

import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import TextIO

# Format includes module path for tracing issues
_DEBUG_FORMAT = "%(asctime)s %(name)s [%(levelname)s] %(message)s"
_DEFAULT_FORMAT = "%(name)s: %(message)s"

# Session log retention
_MAX_LOG_SESSIONS = 10


def _get_log_directory() -> Path:
    """Get or create the persistent log directory.

    Returns:
        Path to .filetool/logs/ directory
    """
    for base in [Path.cwd(), Path.home()]:
        filetool_dir = base / ".filetool"
        if filetool_dir.exists():
            log_dir = filetool_dir / "logs"
            log_dir.mkdir(exist_ok=True)
            return log_dir

    log_dir = Path.cwd() / ".filetool" / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _cleanup_old_logs(log_dir: Path, max_sessions: int = _MAX_LOG_SESSIONS) -> None:
    """Remove old session logs, keeping only the most recent N.

    Args:
        log_dir: Directory containing log files
        max_sessions: Maximum number of session logs to retain
    """
    if not log_dir.exists():
        return

    # session_YYYY-MM-DD_HH-MM-SS.log
    log_files = sorted(
        log_dir.glob("session_*.log"),
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )

    for old_log in log_files[max_sessions:]:
        try:
            old_log.unlink()
        except OSError as e:
            sys.stderr.write(f"Warning: Could not remove old log {old_log}: {e}\n")


def _config_debug() -> bool:
    """Read the debug flag from the loaded configuration."""
    from filetool.foundation.config import get_config

    try:
        return get_config().debug
    except Exception as e:
        # A broken config must not prevent logging from coming up
        sys.stderr.write(f"Warning: Could not read debug setting from config: {e}\n")
        return False


def configure_logging(
    *,
    debug: bool = False,
    level: int | str | None = None,
    stream: TextIO | None = None,
    persist: bool = False,
) -> None:
    """Configure logging for the FileTool CLI or an embedding application.

    Args:
        debug: Enable DEBUG level with detailed format
        level: Override log level (int or string like "DEBUG", "INFO")
        stream: Output stream (default: stderr)
        persist: Store logs in .filetool/logs/ with session rotation
    """
    resolved_level: int
    if level is not None:
        resolved_level = _parse_level(level)
    elif env_level := os.environ.get("FILETOOL_LOG_LEVEL"):
        resolved_level = _parse_level(env_level)
    elif os.environ.get("FILETOOL_DEBUG", "").lower() in ("true", "1", "yes"):
        resolved_level = logging.DEBUG
    elif debug or _config_debug():
        resolved_level = logging.DEBUG
    else:
        resolved_level = logging.WARNING

    console_format = _DEBUG_FORMAT if resolved_level <= logging.DEBUG else _DEFAULT_FORMAT

    root_logger = logging.getLogger()
    # File handler needs DEBUG records even when the console is quieter
    root_logger.setLevel(logging.DEBUG if persist else resolved_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(stream or sys.stderr)
    console_handler.setLevel(resolved_level)
    console_handler.setFormatter(logging.Formatter(console_format))
    root_logger.addHandler(console_handler)

    if persist:
        try:
            log_dir = _get_log_directory()
            _cleanup_old_logs(log_dir)

            timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
            log_file = log_dir / f"session_{timestamp}.log"

            file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
            file_handler.setLevel(logging.DEBUG)
            file_handler.setFormatter(logging.Formatter(_DEBUG_FORMAT))
            root_logger.addHandler(file_handler)

        except OSError as e:
            # Non-fatal: log to stderr if file logging fails
            sys.stderr.write(f"Warning: Could not enable persistent logging: {e}\n")

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, debug=%s, persist=%s",
        logging.getLevelName(resolved_level),
        debug,
        persist,
    )


def _parse_level(level: int | str) -> int:
    """Parse log level from int or string."""
    if isinstance(level, int):
        return level
    numeric = getattr(logging, level.upper(), None)
    if isinstance(numeric, int):
        return numeric
    try:
        return int(level)
    except ValueError:
        return logging.WARNING
