"""Renaming single entries and whole directories."""

import logging
import os
from pathlib import Path

from filetool.foundation.errors import ErrorCode, batch_error, path_error, rename_error
from filetool.foundation.types import CasingPolicy
from filetool.foundation.utils import join_filename, sanitize_filename, split_filename
from filetool.ops import guards
from filetool.ops.reporting import reported

logger = logging.getLogger(__name__)


@reported
def rename(
    old_path: str | Path,
    new_path: str | Path,
    policy: str | CasingPolicy | None = CasingPolicy.NONE,
) -> None:
    """Rename or move a file or directory.

    ``new_path`` without an extension is taken as a directory path.
    Otherwise its last component is sanitized as a filename under
    ``policy`` and joined to its sanitized parent directory. An existing
    target is never overwritten.
    """
    target = guards.entry_path(new_path, policy)
    source = guards.entry_path(old_path)

    guards.require_accessible(source.parent)
    if not source.exists():
        raise path_error(ErrorCode.NOT_FOUND, source, kind="file")
    kind = "directory" if source.is_dir() else "file"
    guards.require_readable(source, kind)
    guards.require_writable(source, kind)

    if target.exists():
        raise rename_error(source, target, "target already exists")
    try:
        os.rename(source, target)
    except OSError as e:
        raise rename_error(source, target, e.strerror or str(e), cause=e) from e
    logger.info("Renamed %s -> %s", source, target)


@reported
def rename_all_sequential(
    directory: str | Path,
    base_name: str,
    policy: str | CasingPolicy | None = CasingPolicy.NONE,
) -> None:
    """Rename every entry of ``directory`` to ``{stem}_{n}.{ext}``.

    Entries are taken in the order the filesystem lists them. ``n`` starts
    at 1 and advances for every entry, including entries that are skipped
    because they are not readable and writable. Skipped and failed entries
    are reported once, as a BATCH_INCOMPLETE error.
    """
    stem, ext = split_filename(sanitize_filename(base_name, policy))
    target_dir = guards.directory_path(directory)
    guards.require_accessible(target_dir)

    failed = 0
    for number, entry in enumerate(guards.list_entries(target_dir), start=1):
        source = target_dir / entry
        if not (guards.is_readable(source) and guards.is_writable(source)):
            logger.debug("Skipping %s (#%d)", source, number)
            failed += 1
            continue

        target = target_dir / join_filename(f"{stem}_{number}", ext)
        if target == source:
            continue
        if target.exists():
            logger.warning("Not renaming %s: %s already exists", source, target)
            failed += 1
            continue

        try:
            os.rename(source, target)
        except OSError as e:
            logger.warning("Could not rename %s: %s", source, e)
            failed += 1
            continue
        logger.info("Renamed %s -> %s", source, target)

    if failed:
        raise batch_error("renamed", failed)
