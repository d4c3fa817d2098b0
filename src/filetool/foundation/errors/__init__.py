"""Error system for FileTool."""

from filetool.foundation.errors.errors import (
    ERROR_MESSAGES,
    RECOVERY_HINTS,
    ErrorCode,
    FileToolError,
    batch_error,
    config_error,
    operation_error,
    path_error,
    rename_error,
    validation_error,
)

__all__ = [
    "ErrorCode",
    "ERROR_MESSAGES",
    "RECOVERY_HINTS",
    "FileToolError",
    "batch_error",
    "config_error",
    "operation_error",
    "path_error",
    "rename_error",
    "validation_error",
]
