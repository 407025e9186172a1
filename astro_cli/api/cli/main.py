"""CLI entry point for the Astro CLI."""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from loguru import logger

from astro_cli.core.exceptions import AstroError


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI.

    Args:
        verbose: Whether to enable verbose logging
    """
    logger.remove()

    if verbose:
        logger.add(
            sys.stderr,
            level="DEBUG",
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        logger.add(
            sys.stderr,
            level="INFO",
            format="<level>{level: <8}</level> | <level>{message}</level>"
        )


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the complete argument parser.

    Returns:
        Configured ArgumentParser instance
    """
    from .parsers import (
        add_config_subparser,
        add_deployment_subparser,
        add_project_subparser,
        create_main_parser,
        setup_subparsers,
    )

    parser = create_main_parser()
    subparsers = setup_subparsers(parser)

    add_config_subparser(subparsers)
    add_deployment_subparser(subparsers)
    add_project_subparser(subparsers)

    return parser


async def async_main(argv: Optional[Sequence[str]] = None) -> None:
    """Async main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(getattr(args, "verbose", False))

    from astro_cli.core.config import init_config
    ctx = init_config()

    try:
        if args.command == "config":
            from .commands.config import config_command
            await config_command(args, ctx)
        elif args.command == "deployment":
            from .commands.deployment import deployment_command
            await deployment_command(args, ctx)
        elif args.command == "project":
            from .commands.project import project_command
            await project_command(args, ctx)
        else:
            logger.error(f"Unknown command: {args.command}")
            sys.exit(1)

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        sys.exit(0)
    except AstroError as e:
        logger.error(str(e))
        sys.exit(1)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Main entry point for the CLI."""
    try:
        asyncio.run(async_main(argv))
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
