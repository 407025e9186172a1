"""Shared utilities for Astro CLI commands."""

from .output import OutputFormatter

__all__ = [
    "OutputFormatter",
]
