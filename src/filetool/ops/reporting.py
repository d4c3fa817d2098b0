"""Error reporting for file operations.

Operations never raise to their caller. The :func:`reported` decorator
catches :class:`FileToolError` (and any ``OSError`` a filesystem probe
lets through, wrapped as OPERATION_FAILED), hands ``(message, status)`` to
an error sink and returns the error, so callers can still inspect it.
"""

import functools
import logging
from collections.abc import Callable
from typing import Any

from filetool.foundation.config import get_config
from filetool.foundation.errors import FileToolError, operation_error

logger = logging.getLogger(__name__)

DEFAULT_ERROR_STATUS = 500

ErrorSink = Callable[[str, int], None]
"""Receives (message, status) for every reported error."""


def log_sink(message: str, status: int) -> None:
    """Default sink: record the error in the log."""
    logger.error("Error [%d]: %s", status, message)


def null_sink(message: str, status: int) -> None:
    """Sink for callers that handle the returned error themselves."""


def _error_status() -> int:
    try:
        return get_config().error_status
    except FileToolError as e:
        # A broken config must not turn a reported error into a raised one
        logger.warning("Using status %d: %s", DEFAULT_ERROR_STATUS, e)
        return DEFAULT_ERROR_STATUS


def report(error: FileToolError, sink: ErrorSink | None = None) -> FileToolError:
    """Hand ``error`` to ``sink`` with the configured status and return it."""
    logger.debug("Reporting %r", error)
    (sink or log_sink)(error.message, _error_status())
    return error


def reported(
    func: Callable[..., None],
) -> Callable[..., FileToolError | None]:
    """Turn a raising operation into a reporting one.

    The wrapped function gains a keyword-only ``sink`` argument and
    returns ``None`` on success or the reported error.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, sink: ErrorSink | None = None, **kwargs: Any) -> FileToolError | None:
        try:
            func(*args, **kwargs)
        except FileToolError as error:
            return report(error, sink)
        except OSError as e:
            return report(operation_error("access", e.filename or "", e), sink)
        return None

    return wrapper
