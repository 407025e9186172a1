"""Astro CLI Core Exceptions Package - Core exception classes for error handling.

The exception hierarchy is designed to:
- Provide specific exception types for config, project discovery and API errors
- Keep the raw Houston message available for callers that match on it
- Support structured error messages and context
"""

from .core import (
    AstroError,
    ConfigIOError,
    HoustonError,
    ProjectSearchError,
    ValidationError,
)

__all__ = [
    # Base exception
    "AstroError",

    # Domain-specific exceptions
    "ValidationError",
    "ConfigIOError",
    "ProjectSearchError",
    "HoustonError",
]
