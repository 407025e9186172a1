"""Astro CLI Core Exceptions - Core exception classes for error handling.

This module contains the exception hierarchy for the Astro CLI. Library code
raises these; only the CLI entry point decides how a failure ends the process.
"""

from typing import Optional, Any, Dict


class AstroError(Exception):
    """Base exception for all Astro CLI errors.

    Carries a human-readable message plus optional context and the underlying
    exception that caused it.
    """

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize Astro error.

        Args:
            message: Human-readable error description
            context: Optional dictionary with error context (e.g., paths, keys)
            cause: Optional underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}
        self.cause = cause

    def __str__(self) -> str:
        """Return formatted error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (context: {context_str})"
        return self.message

    def add_context(self, key: str, value: Any) -> "AstroError":
        """Add context information to the error."""
        self.context[key] = value
        return self


class ValidationError(AstroError):
    """Raised when user input does not match what the CLI accepts."""

    def __init__(
        self,
        field: str,
        value: Any,
        reason: str,
        context: Optional[Dict[str, Any]] = None
    ):
        """Initialize validation error.

        Args:
            field: Name of the field that failed validation
            value: The invalid value
            reason: Description of why validation failed
            context: Optional additional context
        """
        message = f"Validation failed for field '{field}': {reason}"
        super().__init__(message, context)
        self.field = field
        self.value = value
        self.reason = reason


class ConfigIOError(AstroError):
    """Raised when a config directory or file cannot be created, read or written.

    The message names the scope directory involved, e.g.
    ``Error creating config in home dir: <cause>``.
    """

    def __init__(
        self,
        operation: str,
        scope: str,
        reason: Optional[str] = None,
        path: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize config I/O error.

        Args:
            operation: What was attempted ("creating", "reading", "saving")
            scope: Config scope the file belongs to ("home" or "project")
            reason: Description of what went wrong
            path: File or directory involved
            cause: Underlying OS or YAML error
        """
        message = f"Error {operation} config in {scope} dir"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, cause=cause)
        self.operation = operation
        self.scope = scope
        self.reason = reason
        self.path = path


class ProjectSearchError(AstroError):
    """Raised when walking up the directory tree for a project fails."""

    def __init__(
        self,
        start: Optional[str] = None,
        reason: Optional[str] = None,
        cause: Optional[Exception] = None
    ):
        message = "Error searching for project dir"
        if start:
            message = f"{message} from {start}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, cause=cause)
        self.start = start
        self.reason = reason


class HoustonError(AstroError):
    """Raised for any failure talking to the Houston API.

    Transport failures and GraphQL errors share this type. ``message`` holds
    the server's text verbatim so callers can match on it; ``code`` and
    ``status_code`` are informational only.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        cause: Optional[Exception] = None
    ):
        """Initialize Houston error.

        Args:
            message: Raw message from the server or transport
            code: GraphQL ``extensions.code`` if the server sent one
            status_code: HTTP status code if a response was received
            cause: Underlying exception, if any
        """
        super().__init__(message, cause=cause)
        self.code = code
        self.status_code = status_code

    @property
    def raw_message(self) -> str:
        """Server-provided message, unmodified."""
        return self.message

    def __str__(self) -> str:
        return self.message
