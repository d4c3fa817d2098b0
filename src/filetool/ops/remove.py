"""File and directory removal."""

import logging
import os
from pathlib import Path

from filetool.foundation.errors import (
    ErrorCode,
    batch_error,
    operation_error,
    path_error,
)
from filetool.ops import guards
from filetool.ops.reporting import reported

logger = logging.getLogger(__name__)


def _remove_empty_directory(directory: Path) -> None:
    guards.require_directory(directory)
    guards.require_readable(directory.parent, "parent directory")
    guards.require_writable(directory.parent, "parent directory")

    if guards.list_entries(directory):
        raise path_error(ErrorCode.NOT_EMPTY, directory, kind="directory")

    try:
        os.rmdir(directory)
    except OSError as e:
        raise operation_error("remove directory", directory, e) from e
    logger.info("Removed directory %s", directory)


@reported
def remove_directory(path: str | Path) -> None:
    """Remove an empty directory.

    Errors:
        NOT_FOUND, NOT_READABLE / NOT_WRITABLE on the parent,
        NOT_EMPTY if the directory holds any entry.
    """
    _remove_empty_directory(guards.directory_path(path))


@reported
def remove_file(path: str | Path) -> None:
    """Delete a single regular file."""
    target = guards.entry_path(path)
    guards.require_accessible(target.parent)
    guards.require_file(target)
    guards.require_writable(target, "file")

    try:
        os.remove(target)
    except OSError as e:
        raise operation_error("remove", target, e) from e
    logger.info("Removed file %s", target)


@reported
def remove_all_and_directory(path: str | Path) -> None:
    """Delete every file of a directory, then the directory itself.

    Unwritable files are counted but do not stop the pass. The directory
    is only removed when every file went away; it is then re-checked for
    emptiness, so a remaining subdirectory reports NOT_EMPTY.
    """
    directory = guards.directory_path(path)
    guards.require_accessible(directory)
    guards.require_accessible(directory.parent, "parent directory")

    failed = 0
    for entry in guards.list_entries(directory):
        item = directory / entry
        if not item.is_file():
            continue
        if not guards.is_writable(item):
            logger.debug("Not writable, keeping %s", item)
            failed += 1
            continue
        try:
            item.unlink()
        except OSError as e:
            logger.warning("Could not remove %s: %s", item, e)
            failed += 1
            continue
        logger.info("Removed file %s", item)

    if failed:
        raise batch_error("removed", failed)

    _remove_empty_directory(directory)
