"""Filename casing transforms."""

import re
from datetime import date

from filetool.foundation.errors import ErrorCode, validation_error

_WHITESPACE = re.compile(r"\s+")


def strip_whitespace(value: str) -> str:
    """Remove every whitespace character."""
    return _WHITESPACE.sub("", value)


def upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]


def lower_first(word: str) -> str:
    return word[:1].lower() + word[1:]


def split_filename(name: str) -> tuple[str, str]:
    """Split a filename into stem and extension at the last dot.

    Example:
        >>> split_filename("report.final.txt")
        ('report.final', 'txt')
        >>> split_filename("README")
        ('README', '')
    """
    if "." not in name:
        return name, ""
    stem, _, ext = name.rpartition(".")
    return stem, ext


def join_filename(stem: str, ext: str) -> str:
    """Inverse of :func:`split_filename`; no trailing dot without extension."""
    return f"{stem}.{ext}" if ext else stem


def to_camel(value: str) -> str:
    """camelCase the whitespace-separated words of ``value``.

    Each word's first letter is upper-cased, then the first word's first
    letter is lower-cased. The rest of every word is left as-is.

    Raises:
        FileToolError: INVALID_INPUT when there are no words

    Example:
        >>> to_camel("my file")
        'myFile'
    """
    words = [upper_first(word) for word in value.split()]
    if not words:
        raise validation_error(
            ErrorCode.INVALID_INPUT, value=value, detail="no words to camelCase",
        )
    words[0] = lower_first(words[0])
    return "".join(words)


def to_pascal(value: str) -> str:
    """Title-case every word of the stem and lower-case the extension.

    Example:
        >>> to_pascal("my big FILE.TXT")
        'MyBigFile.txt'
    """
    stem, ext = split_filename(value)
    words = [word[:1].upper() + word[1:].lower() for word in stem.split()]
    return join_filename("".join(words), strip_whitespace(ext).lower())


def with_date_suffix(value: str, today: date | None = None) -> str:
    """Rewrite ``value`` as ``{stem}_{YYYY-MM-DD}.{ext}``.

    The dot is always written, so a name without extension ends in ``.``.

    Example:
        >>> with_date_suffix("report.txt", date(2024, 3, 9))
        'report_2024-03-09.txt'
        >>> with_date_suffix("report", date(2024, 3, 9))
        'report_2024-03-09.'
    """
    stem, ext = split_filename(value)
    day = (today or date.today()).isoformat()
    return f"{stem}_{day}.{ext}"
