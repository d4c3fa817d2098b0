"""Foundation utilities - Sanitizer and string helpers.

Provides:
- Path operations (sanitize_path, sanitize_filename, has_extension, ensure_dir)
- Casing transforms (to_camel, to_pascal, with_date_suffix)
- Filename splitting (split_filename, join_filename)
"""

from filetool.foundation.utils.paths import (
    ensure_dir,
    has_extension,
    sanitize_filename,
    sanitize_path,
)
from filetool.foundation.utils.strings import (
    join_filename,
    split_filename,
    strip_whitespace,
    to_camel,
    to_pascal,
    with_date_suffix,
)

__all__ = [
    # Path utilities
    "sanitize_path",
    "sanitize_filename",
    "has_extension",
    "ensure_dir",
    # String utilities
    "strip_whitespace",
    "split_filename",
    "join_filename",
    "to_camel",
    "to_pascal",
    "with_date_suffix",
]
