"""Error handling utilities: switch error taxonomy, structured logging and error responses."""
from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class SwitchError(Exception):
    """Base class for every failure a switch command can report to the player."""

    error_code = "SWITCH_FAILED"

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CatalogUnavailableError(SwitchError):
    """The catalog for a category failed to load or the category is disabled."""

    error_code = "CATALOG_UNAVAILABLE"


class EntryNotFoundError(SwitchError):
    """A valid query matched no catalog entry (or no loadout)."""

    error_code = "NOT_FOUND"


class InvalidQueryError(SwitchError):
    """Empty or blank query; reported separately from not-found."""

    error_code = "INVALID_QUERY"


class PreconditionFailedError(SwitchError):
    """Action attempted outside the host context it requires."""

    error_code = "PRECONDITION_FAILED"


class ActionFailedError(SwitchError):
    """The host action gateway raised while performing an action."""

    error_code = "ACTION_FAILED"


def log_error_with_context(
    error: Exception,
    operation: str,
    command: str | None = None,
    extra_context: dict[str, Any] | None = None,
) -> None:
    """
    Log an error with its context: operation, command string and error code.

    Args:
        error: The exception that occurred
        operation: Name of the operation (e.g., 'class_job', 'phantom_job', 'register')
        command: The typed command string, when there is one
        extra_context: Additional context dict to include in log
    """
    context_parts = []
    if command:
        context_parts.append(f"command={command}")
    code = getattr(error, "error_code", None)
    if code:
        context_parts.append(f"error_code={code}")
    context_str = ", ".join(context_parts) if context_parts else "no context"

    extra: dict[str, Any] = {}
    if extra_context:
        extra.update(extra_context)
    if command:
        extra["command"] = command
    extra["operation"] = operation

    # Domain errors are expected outcomes; only unexpected ones carry a traceback.
    logger.error(
        f"[{operation}] Error: {type(error).__name__}: {str(error)} ({context_str})",
        exc_info=True if not isinstance(error, SwitchError) or error.__cause__ is not None else None,
        extra=extra,
    )


def create_error_response(
    error_code: str,
    message: str,
    details: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Create a structured error response for CLI JSON output.

    Args:
        error_code: Error code (e.g., 'NOT_FOUND', 'INVALID_QUERY')
        message: Human-readable error message
        details: Additional error details

    Returns:
        Structured error dict
    """
    response: dict[str, Any] = {
        "error_code": error_code,
        "message": message,
    }
    if details:
        response["details"] = details
    return response
