"""Argument parser utilities for Astro CLI commands."""

from .main_parser import create_main_parser, setup_subparsers
from .config_parser import add_config_subparser
from .deployment_parser import add_deployment_subparser
from .project_parser import add_project_subparser

__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_config_subparser",
    "add_deployment_subparser",
    "add_project_subparser",
]
