"""Main argument parser for the Astro CLI."""

import argparse

from astro_cli import __version__


def create_main_parser() -> argparse.ArgumentParser:
    """Create and configure the main argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="astro",
        description="Command-line client for the Astronomer platform",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  astro config set cloud.domain astronomer.example.com --global
  astro config get cloud.api.port
  astro project init
  astro deployment user add --deployment-id ckgg... --email someone@example.com --role DEPLOYMENT_ADMIN
  astro deployment user remove --deployment-id ckgg... --email someone@example.com
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"astro {__version__}",
    )

    return parser


def setup_subparsers(parser: argparse.ArgumentParser) -> argparse._SubParsersAction:
    """Set up subparsers for the main parser.

    Args:
        parser: Main argument parser

    Returns:
        Subparsers action for adding command parsers
    """
    return parser.add_subparsers(dest="command", help="Available commands")


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    """Add common arguments used across multiple commands.

    Args:
        parser: Parser to add arguments to
    """
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )


__all__ = [
    "create_main_parser",
    "setup_subparsers",
    "add_common_arguments",
]
