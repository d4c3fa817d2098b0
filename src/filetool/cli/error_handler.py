"""CLI Error Handler.

Provides unified error handling for the CLI with support for:
- Human-readable output (default)
- JSON output for machine consumption (--json)
"""

import json
import sys
from typing import NoReturn

from rich.console import Console
from rich.text import Text

from filetool.foundation.errors import ErrorCode, FileToolError

_ICONS = {
    "existence": "📁",
    "permission": "🔒",
    "state": "📦",
    "validation": "✗",
    "config": "⚙️",
    "operation": "⚡",
}


def _wrap(error: FileToolError | Exception) -> FileToolError:
    if isinstance(error, FileToolError):
        return error
    return FileToolError(
        code=ErrorCode.OPERATION_FAILED,
        context={"action": "run", "path": "command", "detail": str(error)},
        cause=error,
    )


def handle_error(
    error: FileToolError | Exception,
    json_output: bool = False,
) -> NoReturn:
    """Print an error and exit.

    Args:
        error: The error to handle (FileToolError or generic Exception)
        json_output: If True, output JSON to stderr for programmatic use

    Raises:
        SystemExit: Always exits with code 1
    """
    error = _wrap(error)

    if json_output:
        print(format_error_for_json(error), file=sys.stderr)
        sys.exit(1)

    _print_human_error(error)
    sys.exit(1)


def _print_human_error(error: FileToolError) -> None:
    """Print error in human-readable format with recovery hints."""
    console = Console(stderr=True)

    header = Text()
    header.append(f"{_ICONS.get(error.category, '❌')} ", style="bold")
    header.append(error.error_id, style="bold red")
    header.append(f" {error.message}")
    console.print(header)

    if error.recovery_hints:
        console.print("\n[bold]What you can do:[/]")
        for i, hint in enumerate(error.recovery_hints, 1):
            console.print(Text(f"  {i}. {hint}"))


def format_error_for_json(error: FileToolError | Exception) -> str:
    """Format an error as a JSON string.

    Args:
        error: The error to format

    Returns:
        JSON string representation of the error
    """
    error = _wrap(error)
    error_dict = error.to_dict()
    if error.cause:
        error_dict["cause"] = str(error.cause)
    return json.dumps(error_dict, default=str)
