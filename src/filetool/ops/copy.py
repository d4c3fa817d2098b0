"""File copy operations."""

import logging
import shutil
from pathlib import Path

from filetool.foundation.errors import batch_error, operation_error
from filetool.foundation.utils import join_filename, split_filename
from filetool.ops import guards
from filetool.ops.reporting import reported

logger = logging.getLogger(__name__)


def unique_copy_name(directory: Path, name: str) -> str:
    """Pick a name for a copy of ``name`` that is unused in ``directory``.

    Returns ``name`` itself when it is free, otherwise ``{stem}({i}).{ext}``
    for the lowest ``i >= 1`` not present in the directory listing.

    Example:
        >>> unique_copy_name(Path("backup"), "notes.txt")  # notes.txt taken
        'notes(1).txt'
    """
    existing = set(guards.list_entries(directory))
    if name not in existing:
        return name

    stem, ext = split_filename(name)
    i = 1
    while (candidate := join_filename(f"{stem}({i})", ext)) in existing:
        i += 1
    return candidate


def _destination_directory(raw: str | Path) -> Path:
    directory = guards.directory_path(raw)
    if not directory.is_dir():
        guards.make_directory(directory)
    return directory


def _copy(source: Path, target: Path) -> None:
    try:
        shutil.copy2(source, target)
    except OSError as e:
        raise operation_error("copy", source, e) from e
    logger.info("Copied %s -> %s", source, target)


@reported
def copy_file(origin: str | Path, destination_dir: str | Path) -> None:
    """Copy a file into ``destination_dir`` without overwriting.

    When the destination already holds a file with the same name the copy
    is stored as ``{stem}(1).{ext}``, ``{stem}(2).{ext}``, ...
    The destination directory is created when missing and must be
    readable (its listing picks the name) and writable.
    """
    source = guards.entry_path(origin)
    guards.require_directory(source.parent)
    guards.require_file(source)
    guards.require_readable(source, "file")
    guards.require_writable(source.parent, "directory")

    target_dir = _destination_directory(destination_dir)
    guards.require_readable(target_dir, "directory")
    guards.require_writable(target_dir, "directory")
    target = target_dir / unique_copy_name(target_dir, source.name)
    _copy(source, target)


@reported
def copy_all_files(origin_dir: str | Path, destination_dir: str | Path) -> None:
    """Copy every regular file of ``origin_dir`` into ``destination_dir``.

    Best effort: unreadable files and files whose name is already taken at
    the destination are skipped and counted. A single BATCH_INCOMPLETE
    error is reported at the end if anything was skipped.
    """
    source_dir = guards.directory_path(origin_dir)
    guards.require_directory(source_dir)
    guards.require_readable(source_dir, "directory")
    target_dir = _destination_directory(destination_dir)

    failed = 0
    for entry in guards.list_entries(source_dir):
        source = source_dir / entry
        if not source.is_file():
            continue

        target = target_dir / entry
        if not guards.is_readable(source) or target.exists():
            logger.debug("Skipping %s", source)
            failed += 1
            continue

        try:
            shutil.copy2(source, target)
        except OSError as e:
            logger.warning("Could not copy %s: %s", source, e)
            failed += 1
            continue
        logger.info("Copied %s -> %s", source, target)

    if failed:
        raise batch_error("copied", failed)


@reported
def copy_file_content(source: str | Path, destination: str | Path) -> None:
    """Overwrite ``destination`` with the full content of ``source``.

    The destination directory and file are created when missing. Content
    is read into memory in one piece.
    """
    src = guards.entry_path(source)
    dst = guards.entry_path(destination)

    guards.require_directory(src.parent)
    guards.require_readable(src.parent, "directory")
    guards.require_file(src)
    guards.require_readable(src, "file")

    if not dst.parent.is_dir():
        guards.make_directory(dst.parent)
    if not dst.exists():
        guards.create_empty(dst)
    guards.require_writable(dst.parent, "directory")
    guards.require_writable(dst, "file")

    try:
        content = src.read_bytes()
    except OSError as e:
        raise operation_error("read", src, e) from e
    try:
        dst.write_bytes(content)
    except OSError as e:
        raise operation_error("write", dst, e) from e
    logger.info("Copied content of %s -> %s (%d bytes)", src, dst, len(content))
