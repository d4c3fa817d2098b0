"""Directory and file creation."""

import logging
from pathlib import Path

from filetool.foundation.errors import (
    ErrorCode,
    FileToolError,
    path_error,
    validation_error,
)
from filetool.foundation.types import CasingPolicy
from filetool.foundation.utils import join_filename, sanitize_filename, split_filename
from filetool.ops import guards
from filetool.ops.reporting import reported

logger = logging.getLogger(__name__)


def sequence_names(name: str, count: int) -> list[str]:
    """Names produced by :func:`create_sequence`.

    The first name is the bare ``name``; numbering starts at 1 with the
    second one.

    Example:
        >>> sequence_names("a.txt", 3)
        ['a.txt', 'a_1.txt', 'a_2.txt']
    """
    stem, ext = split_filename(name)
    return [name] + [join_filename(f"{stem}_{i}", ext) for i in range(1, count)]


def _prepare_directory(raw: str | Path) -> Path:
    """Sanitize a target directory, create it when missing, check access.

    A failed creation is only logged: the readable/writable probes that
    follow decide whether the operation can go on.
    """
    directory = guards.directory_path(raw)
    if not directory.is_dir():
        try:
            guards.make_directory(directory)
        except FileToolError as e:
            logger.warning("Could not create directory %s: %s", directory, e)
    guards.require_readable(directory, "directory")
    guards.require_writable(directory, "directory")
    return directory


@reported
def create_directory(path: str | Path, mode: int | None = None) -> None:
    """Create a directory and any missing ancestors.

    Args:
        path: Directory path, sanitized before use
        mode: Permission bits; defaults to ``config.default_mode`` (0o777)

    Errors:
        ALREADY_EXISTS if the directory is already there,
        OPERATION_FAILED if the OS refuses.
    """
    directory = guards.directory_path(path)
    if directory.is_dir():
        raise path_error(ErrorCode.ALREADY_EXISTS, directory, kind="directory")
    guards.make_directory(directory, mode)


@reported
def create_file(
    directory: str | Path,
    name: str,
    policy: str | CasingPolicy | None = CasingPolicy.NONE,
) -> None:
    """Create an empty file ``name`` inside ``directory``.

    The directory is created when missing. The filename is sanitized and
    restyled with ``policy``.
    """
    filename = sanitize_filename(name, policy)
    target_dir = _prepare_directory(directory)
    target = target_dir / filename
    guards.require_absent(target)
    guards.create_empty(target)


@reported
def create_sequence(
    directory: str | Path,
    base_name: str,
    policy: str | CasingPolicy | None = CasingPolicy.NONE,
    count: int = 1,
) -> None:
    """Create ``count`` empty files named after ``base_name``.

    Files are ``{stem}.{ext}``, ``{stem}_1.{ext}``, ... ``{stem}_{count-1}.{ext}``.
    Stops at the first file that cannot be created; files created before
    that are kept.
    """
    if count <= 0:
        raise validation_error(ErrorCode.INVALID_QUANTITY, value=count, count=count)

    filename = sanitize_filename(base_name, policy)
    target_dir = _prepare_directory(directory)

    for name in sequence_names(filename, count):
        target = target_dir / name
        guards.require_absent(target)
        guards.create_empty(target)

    logger.info("Created %d files in %s", count, target_dir)
