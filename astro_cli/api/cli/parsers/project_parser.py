"""Project command argument parser for the Astro CLI."""

import argparse
from pathlib import Path

from .main_parser import add_common_arguments


def add_project_subparser(subparsers) -> argparse.ArgumentParser:
    """Add project command subparser to the main parser.

    Args:
        subparsers: Subparsers object from the main argument parser

    Returns:
        The configured project subparser
    """
    project_parser = subparsers.add_parser(
        "project",
        help="Manage the project config",
        description="Create and locate project-scoped configuration"
    )

    add_common_arguments(project_parser)

    project_subparsers = project_parser.add_subparsers(
        dest="project_command",
        help="Project commands",
        required=True
    )

    init_parser = project_subparsers.add_parser(
        "init",
        help="Create .astro/config.yaml in a project directory"
    )
    init_parser.add_argument(
        "path",
        nargs="?",
        type=Path,
        default=Path("."),
        help="Project directory (default: current directory)"
    )

    project_subparsers.add_parser(
        "root",
        help="Print the nearest project root"
    )

    return project_parser
