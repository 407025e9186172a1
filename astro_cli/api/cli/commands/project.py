"""Project command module - creates and locates project configuration."""

import argparse
import sys

from loguru import logger

from astro_cli.core.config import CONFIG_DIR, CONFIG_FILE_NAME_WITH_EXT, ConfigContext
from astro_cli.core.exceptions import AstroError
from ..utils.output import OutputFormatter


async def project_command(args: argparse.Namespace, ctx: ConfigContext) -> None:
    """Execute the project command with appropriate subcommand."""
    subcommand_handlers = {
        "init": project_init_command,
        "root": project_root_command,
    }

    handler = subcommand_handlers.get(args.project_command)
    if handler:
        await handler(args, ctx)
    else:
        logger.error(f"Unknown project command: {args.project_command}")
        sys.exit(1)


async def project_init_command(args: argparse.Namespace, ctx: ConfigContext) -> None:
    """Handle project init command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))
    project_path = args.path.absolute()

    if (project_path / CONFIG_DIR / CONFIG_FILE_NAME_WITH_EXT).exists():
        formatter.info(f"Project config already exists in {project_path}")
        return

    try:
        config_file = ctx.create_project_config(project_path)
    except AstroError as e:
        formatter.error(str(e))
        sys.exit(1)

    formatter.success(f"Initialized project config at {config_file}")


async def project_root_command(args: argparse.Namespace, ctx: ConfigContext) -> None:
    """Handle project root command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))

    root = ctx.project_root()
    if root is None:
        formatter.error("Not in a project directory")
        sys.exit(1)

    formatter.info(str(root))
