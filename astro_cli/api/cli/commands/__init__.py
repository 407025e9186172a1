"""Astro CLI commands package - modular command implementations."""

from .config import config_command
from .deployment import deployment_command
from .project import project_command

__all__ = [
    "config_command",
    "deployment_command",
    "project_command",
]
