"""FileOps - guard-checked filesystem mutations.

Each operation sanitizes its paths, runs its precondition chain and then
performs one filesystem change. Errors are reported to a sink and
returned, never raised; success returns ``None``.
"""

from filetool.ops.copy import (
    copy_all_files,
    copy_file,
    copy_file_content,
    unique_copy_name,
)
from filetool.ops.create import (
    create_directory,
    create_file,
    create_sequence,
    sequence_names,
)
from filetool.ops.remove import (
    remove_all_and_directory,
    remove_directory,
    remove_file,
)
from filetool.ops.renaming import rename, rename_all_sequential
from filetool.ops.reporting import ErrorSink, log_sink, null_sink, report, reported

__all__ = [
    # Create
    "create_directory",
    "create_file",
    "create_sequence",
    "sequence_names",
    # Copy
    "copy_file",
    "copy_all_files",
    "copy_file_content",
    "unique_copy_name",
    # Remove
    "remove_directory",
    "remove_file",
    "remove_all_and_directory",
    # Rename
    "rename",
    "rename_all_sequential",
    # Reporting
    "ErrorSink",
    "log_sink",
    "null_sink",
    "report",
    "reported",
]
