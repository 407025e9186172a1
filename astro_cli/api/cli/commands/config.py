"""Config command module - reads and writes home and project configuration."""

import argparse
import sys

from loguru import logger

from astro_cli.core.config import CFG, ConfigContext
from astro_cli.core.exceptions import AstroError
from ..utils.output import OutputFormatter


async def config_command(args: argparse.Namespace, ctx: ConfigContext) -> None:
    """Execute the config command with appropriate subcommand.

    Args:
        args: Parsed command-line arguments
        ctx: Resolved configuration for this invocation
    """
    subcommand_handlers = {
        "get": config_get_command,
        "set": config_set_command,
    }

    handler = subcommand_handlers.get(args.config_command)
    if handler:
        await handler(args, ctx)
    else:
        logger.error(f"Unknown config command: {args.config_command}")
        sys.exit(1)


async def config_get_command(args: argparse.Namespace, ctx: ConfigContext) -> None:
    """Handle config get command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))

    if args.key not in CFG:
        formatter.error(f"Config does not exist, check your config key: {args.key}")
        sys.exit(1)

    if args.global_scope:
        value = ctx.get_home_string(args.key)
    else:
        value = ctx.get_string(args.key)

    formatter.verbose_info(
        f"home={ctx.home.config_file} project={ctx.project.config_file or 'none'}"
    )
    formatter.info(value)


async def config_set_command(args: argparse.Namespace, ctx: ConfigContext) -> None:
    """Handle config set command."""
    formatter = OutputFormatter(verbose=getattr(args, 'verbose', False))

    try:
        if args.global_scope:
            ctx.set_home_string(args.key, args.value)
            scope = "home"
        else:
            ctx.set_project_string(args.key, args.value)
            scope = "project"
    except AstroError as e:
        formatter.error(f"Failed to set {args.key}: {e}")
        sys.exit(1)

    formatter.success(f"Setting {args.key} set to {args.value} in {scope} config")
