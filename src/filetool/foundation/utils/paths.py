"""Path and filename sanitization.

Directory paths and filenames are sanitized differently:

- Directory paths keep only ASCII letters, digits, ``.`` and ``/``.
- Filenames keep Unicode word characters, ``-`` and ``.``, and can be
  restyled by a :class:`~filetool.foundation.types.CasingPolicy`.

Both are pure string functions; nothing here touches the filesystem
except :func:`ensure_dir`.
"""

import os
import re
from datetime import date
from pathlib import Path

from filetool.foundation.errors import ErrorCode, validation_error
from filetool.foundation.types import CasingPolicy
from filetool.foundation.utils.strings import (
    strip_whitespace,
    to_camel,
    to_pascal,
    with_date_suffix,
)

_PATH_DISALLOWED = re.compile(r"[^A-Za-z0-9./]+")
_SLASH_RUNS = re.compile(r"/{2,}")
_DOT_RUNS = re.compile(r"\.{2,}")
# Any tail made of "/" and ".." pieces, e.g. "/", "/..", "../.."
_TRAILING = re.compile(r"(?:/|\.\.)+$")

_NAME_DISALLOWED = re.compile(r"[^\w\s.\-]+")


def sanitize_path(value: str | Path) -> str:
    """Normalize a user-supplied directory path.

    Strips every character outside ``[A-Za-z0-9./]``, collapses repeated
    ``/``, collapses runs of two or more ``.`` into ``..`` and removes any
    trailing ``/`` or ``..``. The result may be empty; callers treat an
    empty path as invalid.

    Idempotent: ``sanitize_path(sanitize_path(x)) == sanitize_path(x)``.

    Example:
        >>> sanitize_path("data//in box/...")
        'data/inbox'
    """
    sanitized = _PATH_DISALLOWED.sub("", str(value))
    sanitized = _SLASH_RUNS.sub("/", sanitized)
    sanitized = _DOT_RUNS.sub("..", sanitized)
    return _TRAILING.sub("", sanitized)


def sanitize_filename(
    value: str,
    policy: str | CasingPolicy | None = CasingPolicy.NONE,
    *,
    today: date | None = None,
) -> str:
    """Sanitize a filename and apply a casing policy.

    Args:
        value: Raw filename (no directory part)
        policy: Casing policy or its tag (case-insensitive)
        today: Date used by the ``date`` policy. Defaults to today.

    Returns:
        Sanitized filename

    Raises:
        FileToolError: INVALID_POLICY for an unknown policy tag,
            INVALID_INPUT when nothing usable is left

    Example:
        >>> sanitize_filename("My File.TXT", "lower")
        'myfile.txt'
    """
    casing = CasingPolicy.parse(policy)

    name = _NAME_DISALLOWED.sub("", value)
    name = _DOT_RUNS.sub(".", name)
    name = name.strip().lstrip(".")

    match casing:
        case CasingPolicy.NONE:
            result = strip_whitespace(name)
        case CasingPolicy.LOWER:
            result = strip_whitespace(name.lower())
        case CasingPolicy.UPPER:
            result = strip_whitespace(name.upper())
        case CasingPolicy.CAMEL:
            result = to_camel(name)
        case CasingPolicy.PASCAL:
            result = to_pascal(name)
        case CasingPolicy.DATE:
            result = with_date_suffix(strip_whitespace(name.lower()), today)
        case _:
            raise validation_error(ErrorCode.INVALID_POLICY, value=policy, policy=policy)

    if not result:
        raise validation_error(
            ErrorCode.INVALID_INPUT, value=value, detail="nothing left after sanitizing",
        )
    return result


def has_extension(value: str | Path) -> bool:
    """Whether the last component of ``value`` carries an extension."""
    return bool(os.path.splitext(str(value).rstrip("/"))[1])


def ensure_dir(path: str | Path, mode: int = 0o777) -> Path:
    """Ensure directory exists, return Path.

    Creates parent directories if needed, applying ``mode`` (subject to
    the process umask).

    Example:
        >>> ensure_dir("output/subdir")
        PosixPath('output/subdir')
    """
    path = Path(path)
    path.mkdir(mode=mode, parents=True, exist_ok=True)
    return path
