"""Deployment command module - manages user roles on deployments."""

import argparse
import sys
from typing import Optional

from loguru import logger

from astro_cli.core.config import ConfigContext
from astro_cli.deployment import add_user, delete_user, update_user
from astro_cli.houston import HoustonClient


async def deployment_command(
    args: argparse.Namespace,
    ctx: ConfigContext,
    client: Optional[HoustonClient] = None,
) -> None:
    """Execute the deployment command with appropriate subcommand.

    Houston errors are not caught here; the CLI entry point reports them.

    Args:
        args: Parsed command-line arguments
        ctx: Resolved configuration for this invocation
        client: Houston client to use, built from ``ctx`` when omitted
    """
    if args.deployment_command != "user":
        logger.error(f"Unknown deployment command: {args.deployment_command}")
        sys.exit(1)

    client = client or HoustonClient.from_config(ctx)
    logger.debug(f"Using Houston at {client.url}")

    if args.user_command == "add":
        await add_user(args.deployment_id, args.email, args.role, client, sys.stdout)
    elif args.user_command in ("remove", "delete"):
        await delete_user(args.deployment_id, args.email, client, sys.stdout)
    elif args.user_command == "update":
        await update_user(args.deployment_id, args.email, args.role, client, sys.stdout)
    else:
        logger.error(f"Unknown deployment user command: {args.user_command}")
        sys.exit(1)
