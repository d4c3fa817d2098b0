"""Precondition checks shared by the file operations.

Every ``require_*`` helper raises :class:`FileToolError` when its check
fails. Permission probes go through :func:`is_readable` /
:func:`is_writable` and directory listings through :func:`list_entries`,
so they can be swapped out in tests.

Checks and the mutation that follows them are not atomic: another process
can change the filesystem in between.
"""

import logging
import os
from pathlib import Path

from filetool.foundation.config import get_config
from filetool.foundation.errors import (
    ErrorCode,
    operation_error,
    path_error,
    validation_error,
)
from filetool.foundation.types import CasingPolicy
from filetool.foundation.utils import (
    ensure_dir,
    has_extension,
    sanitize_filename,
    sanitize_path,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Probes
# =============================================================================


def is_readable(path: Path) -> bool:
    return os.access(path, os.R_OK)


def is_writable(path: Path) -> bool:
    return os.access(path, os.W_OK)


def list_entries(directory: Path) -> list[str]:
    """Directory entries in host order, without ``.`` and ``..``."""
    return os.listdir(directory)


# =============================================================================
# Path resolution
# =============================================================================


def directory_path(raw: str | Path) -> Path:
    """Sanitize ``raw`` as a directory path.

    Raises:
        FileToolError: INVALID_PATH if nothing is left after sanitizing
    """
    sanitized = sanitize_path(raw)
    if not sanitized:
        raise validation_error(ErrorCode.INVALID_PATH, value=str(raw))
    return Path(sanitized)


def entry_path(
    raw: str | Path,
    policy: str | CasingPolicy | None = CasingPolicy.NONE,
) -> Path:
    """Sanitize ``raw`` as a file path or, without extension, as a directory.

    A path whose last component has an extension is split: the directory
    part goes through :func:`sanitize_path` and the last component through
    :func:`sanitize_filename` under ``policy``.
    """
    raw = str(raw)
    if not has_extension(raw):
        return directory_path(raw)

    head, sep, tail = raw.rstrip("/").rpartition("/")
    name = sanitize_filename(tail, policy)
    if not sep:
        return Path(name)
    if not head:
        return Path("/") / name
    return directory_path(head) / name


# =============================================================================
# Requirements
# =============================================================================


def require_directory(path: Path, kind: str = "directory") -> None:
    if not path.exists():
        raise path_error(ErrorCode.NOT_FOUND, path, kind=kind)
    if not path.is_dir():
        raise path_error(ErrorCode.NOT_A_DIRECTORY, path, kind=kind)


def require_file(path: Path) -> None:
    if not path.exists():
        raise path_error(ErrorCode.NOT_FOUND, path, kind="file")
    if not path.is_file():
        raise path_error(ErrorCode.NOT_A_FILE, path, kind="file")


def require_absent(path: Path, kind: str = "file") -> None:
    if path.exists():
        raise path_error(ErrorCode.ALREADY_EXISTS, path, kind=kind)


def require_readable(path: Path, kind: str = "file") -> None:
    if not is_readable(path):
        raise path_error(ErrorCode.NOT_READABLE, path, kind=kind)


def require_writable(path: Path, kind: str = "file") -> None:
    if not is_writable(path):
        raise path_error(ErrorCode.NOT_WRITABLE, path, kind=kind)


def require_accessible(path: Path, kind: str = "directory") -> None:
    """Path must exist as a directory and be readable and writable."""
    require_directory(path, kind)
    require_readable(path, kind)
    require_writable(path, kind)


# =============================================================================
# Mutations shared by several operations
# =============================================================================


def make_directory(path: Path, mode: int | None = None) -> None:
    """Create ``path`` and its ancestors.

    Raises:
        FileToolError: OPERATION_FAILED if the OS call fails
    """
    if mode is None:
        mode = get_config().default_mode
    try:
        ensure_dir(path, mode)
    except OSError as e:
        raise operation_error("create directory", path, e) from e
    logger.info("Created directory %s (mode %04o)", path, mode)


def create_empty(path: Path) -> None:
    """Create an empty file, failing if anything already exists there.

    Raises:
        FileToolError: ALREADY_EXISTS or OPERATION_FAILED
    """
    try:
        with open(path, "x"):
            pass
    except FileExistsError as e:
        raise path_error(ErrorCode.ALREADY_EXISTS, path, cause=e) from e
    except OSError as e:
        raise operation_error("create file", path, e) from e
    logger.info("Created file %s", path)
