"""FileTool Error System.

Provides structured error handling with:
- Numeric error codes for programmatic handling
- User-friendly messages
- Recovery hints for callers deciding whether to retry
- Context for debugging
"""


from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Numeric error codes organized by category.

    Format: XYYY where X = category, YYY = specific error

    Categories:
        1xxx - Existence errors
        2xxx - Permission errors
        3xxx - Directory state errors
        4xxx - Validation errors
        5xxx - Configuration errors
        6xxx - Operation errors
    """

    # 1xxx - Existence Errors
    ALREADY_EXISTS = 1001
    NOT_FOUND = 1002
    NOT_A_FILE = 1003
    NOT_A_DIRECTORY = 1004

    # 2xxx - Permission Errors
    NOT_READABLE = 2001
    NOT_WRITABLE = 2002

    # 3xxx - State Errors
    NOT_EMPTY = 3001

    # 4xxx - Validation Errors
    INVALID_QUANTITY = 4001
    INVALID_POLICY = 4002
    INVALID_INPUT = 4003
    INVALID_PATH = 4004

    # 5xxx - Configuration Errors
    CONFIG_INVALID = 5001

    # 6xxx - Operation Errors
    OPERATION_FAILED = 6001
    RENAME_FAILED = 6002
    BATCH_INCOMPLETE = 6003

    @property
    def category(self) -> str:
        """Get the error category name."""
        prefix = self.value // 1000
        return {
            1: "existence",
            2: "permission",
            3: "state",
            4: "validation",
            5: "config",
            6: "operation",
        }.get(prefix, "unknown")

    @property
    def is_recoverable(self) -> bool:
        """Whether retrying after fixing the filesystem state can succeed."""
        non_recoverable = {
            ErrorCode.INVALID_QUANTITY,
            ErrorCode.INVALID_POLICY,
            ErrorCode.INVALID_INPUT,
            ErrorCode.INVALID_PATH,
            ErrorCode.CONFIG_INVALID,
        }
        return self not in non_recoverable


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    # Existence errors
    ErrorCode.ALREADY_EXISTS: "The {kind} already exists: {path}",
    ErrorCode.NOT_FOUND: "The {kind} does not exist: {path}",
    ErrorCode.NOT_A_FILE: "Not a regular file: {path}",
    ErrorCode.NOT_A_DIRECTORY: "Not a directory: {path}",

    # Permission errors
    ErrorCode.NOT_READABLE: "The {kind} is not readable: {path}",
    ErrorCode.NOT_WRITABLE: "The {kind} is not writable: {path}",

    # State errors
    ErrorCode.NOT_EMPTY: "The directory is not empty: {path}",

    # Validation errors
    ErrorCode.INVALID_QUANTITY: "Invalid quantity {count}: at least one file must be created.",
    ErrorCode.INVALID_POLICY: "Invalid casing policy '{policy}'.",
    ErrorCode.INVALID_INPUT: "Invalid input '{value}': {detail}",
    ErrorCode.INVALID_PATH: "Invalid path '{value}': nothing left after sanitizing.",

    # Config errors
    ErrorCode.CONFIG_INVALID: "Invalid configuration for '{key}': {detail}",

    # Operation errors
    ErrorCode.OPERATION_FAILED: "Could not {action} {path}: {detail}",
    ErrorCode.RENAME_FAILED: "Could not rename {path} to {target}: {detail}",
    ErrorCode.BATCH_INCOMPLETE: "{failed} files cannot be {action}",
}


# Recovery hints for callers
RECOVERY_HINTS: dict[ErrorCode, list[str]] = {
    ErrorCode.ALREADY_EXISTS: [
        "Pick a different name",
        "Remove the existing {kind} first",
    ],
    ErrorCode.NOT_FOUND: [
        "Check the path is relative to the current directory",
        "Remember that characters outside [A-Za-z0-9./] are stripped from directory paths",
    ],
    ErrorCode.NOT_READABLE: [
        "Grant read permission on {path}",
    ],
    ErrorCode.NOT_WRITABLE: [
        "Grant write permission on {path}",
    ],
    ErrorCode.NOT_EMPTY: [
        "Remove the directory contents first",
        "Use remove_all_and_directory to delete files and the directory together",
    ],
    ErrorCode.INVALID_POLICY: [
        "Use one of: none, lower, upper, camel, pascal, date",
    ],
    ErrorCode.INVALID_QUANTITY: [
        "Pass a count of 1 or more",
    ],
}


class FileToolError(Exception):
    """Base error type for all FileTool errors.

    Provides structured error information for:
    - Programmatic error handling (code)
    - User-friendly display (message)
    - Caller guidance (recovery_hints)
    - Debugging (context, cause)

    Example:
        >>> err = FileToolError(
        ...     code=ErrorCode.NOT_FOUND,
        ...     context={"kind": "directory", "path": "data/inbox"}
        ... )
        >>> print(err)
        [FT-1002] The directory does not exist: data/inbox
    """

    def __init__(
        self,
        code: ErrorCode,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        self.code = code
        self.context = context or {}
        self.cause = cause
        super().__init__(str(self))

    @property
    def message(self) -> str:
        """Get the formatted user-friendly message."""
        template = ERROR_MESSAGES.get(self.code, "An error occurred: {detail}")
        try:
            return template.format(**self.context)
        except KeyError:
            # Fallback if context doesn't have all keys
            return template

    @property
    def recovery_hints(self) -> list[str]:
        """Get recovery suggestions for this error."""
        hints = RECOVERY_HINTS.get(self.code, [])
        formatted = []
        for hint in hints:
            try:
                formatted.append(hint.format(**self.context))
            except KeyError:
                formatted.append(hint)
        return formatted

    @property
    def is_recoverable(self) -> bool:
        """Whether this error is typically recoverable."""
        return self.code.is_recoverable

    @property
    def category(self) -> str:
        """Get the error category."""
        return self.code.category

    @property
    def error_id(self) -> str:
        """Get the error ID string (e.g., 'FT-1002')."""
        return f"FT-{self.code.value}"

    def __str__(self) -> str:
        return f"[{self.error_id}] {self.message}"

    def __repr__(self) -> str:
        return f"FileToolError(code={self.code!r}, context={self.context!r})"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dict for logging/JSON output."""
        return {
            "error_id": self.error_id,
            "code": self.code.value,
            "category": self.category,
            "message": self.message,
            "recoverable": self.is_recoverable,
            "recovery_hints": self.recovery_hints,
            "context": self.context,
        }


# Convenience factory functions

def path_error(
    code: ErrorCode,
    path: object,
    kind: str = "file",
    cause: Exception | None = None,
) -> FileToolError:
    """Create an existence/permission/state error about a path."""
    return FileToolError(
        code=code,
        context={"path": str(path), "kind": kind},
        cause=cause,
    )


def validation_error(
    code: ErrorCode,
    value: object = "",
    detail: str = "",
    **extra: Any,
) -> FileToolError:
    """Create a validation error."""
    return FileToolError(
        code=code,
        context={"value": value, "detail": detail, **extra},
    )


def operation_error(
    action: str,
    path: object,
    cause: OSError,
) -> FileToolError:
    """Wrap a failed OS call into an OPERATION_FAILED error."""
    return FileToolError(
        code=ErrorCode.OPERATION_FAILED,
        context={
            "action": action,
            "path": str(path),
            "detail": cause.strerror or str(cause),
        },
        cause=cause,
    )


def batch_error(action: str, failed: int) -> FileToolError:
    """Create the aggregated error reported at the end of a batch operation."""
    return FileToolError(
        code=ErrorCode.BATCH_INCOMPLETE,
        context={"action": action, "failed": failed},
    )


def config_error(key: str, detail: str = "") -> FileToolError:
    """Create a configuration error."""
    return FileToolError(
        code=ErrorCode.CONFIG_INVALID,
        context={"key": key, "detail": detail},
    )


def rename_error(
    path: object,
    target: object,
    detail: str,
    cause: OSError | None = None,
) -> FileToolError:
    """Create a RENAME_FAILED error."""
    return FileToolError(
        code=ErrorCode.RENAME_FAILED,
        context={"path": str(path), "target": str(target), "detail": detail},
        cause=cause,
    )
