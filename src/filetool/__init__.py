"""FileTool - sanitized filesystem operations.

Create, copy, rename and delete files and directories behind a chain of
existence and permission checks, with path sanitization and filename
casing policies.

Usage:
    from filetool import create_sequence, sanitize_filename

    sanitize_filename("My File.TXT", "lower")   # 'myfile.txt'
    error = create_sequence("data/inbox", "a.txt", "none", 3)
    if error is not None:
        print(error.error_id, error.message)
"""

from filetool.foundation import (
    CasingPolicy,
    ErrorCode,
    FileToolConfig,
    FileToolError,
    get_config,
    load_config,
    reset_config,
    sanitize_filename,
    sanitize_path,
)
from filetool.ops import (
    ErrorSink,
    copy_all_files,
    copy_file,
    copy_file_content,
    create_directory,
    create_file,
    create_sequence,
    log_sink,
    null_sink,
    remove_all_and_directory,
    remove_directory,
    remove_file,
    rename,
    rename_all_sequential,
)

__version__ = "1.0.0"

__all__ = [
    # Sanitizer
    "CasingPolicy",
    "sanitize_filename",
    "sanitize_path",
    # FileOps
    "copy_all_files",
    "copy_file",
    "copy_file_content",
    "create_directory",
    "create_file",
    "create_sequence",
    "remove_all_and_directory",
    "remove_directory",
    "remove_file",
    "rename",
    "rename_all_sequential",
    # Errors and reporting
    "ErrorCode",
    "ErrorSink",
    "FileToolError",
    "log_sink",
    "null_sink",
    # Config
    "FileToolConfig",
    "get_config",
    "load_config",
    "reset_config",
]
